# main.py (raíz)
import logging

import uvicorn

from rinha.api.app import create_app
from rinha.config.database import get_database, ping_database
from rinha.config.logging_config import configure_logging
from rinha.config.settings import get_settings

settings = get_settings()
configure_logging(settings.log_level)

database = get_database(settings)
# sólo informativo: si Mongo no responde, la API arranca igual
ping_database(database)

app = create_app(database)


if __name__ == "__main__":
    logging.getLogger(__name__).info(
        f"🚀 Escuchando en {settings.application_host}:{settings.application_port}"
    )
    uvicorn.run(app, host=settings.application_host, port=settings.application_port)
