import logging
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from rinha.config.settings import Settings

logger = logging.getLogger(__name__)


# ==================================
# 🟢 MongoDB
# ==================================
def get_mongo_client(settings: Settings, timeout_ms: int = 5000) -> MongoClient:
    """Crea el cliente de MongoDB. La conexión real es perezosa (la abre el driver)."""
    return MongoClient(
        settings.database.connection_string(),
        serverSelectionTimeoutMS=timeout_ms,
    )


def get_database(settings: Settings, client: Optional[MongoClient] = None) -> Database:
    client = client or get_mongo_client(settings)
    return client[settings.database.database_name]


def ping_database(database: Database) -> bool:
    """Prueba la conexión con un ping. Nunca corta el arranque."""
    try:
        database.client.admin.command("ping")
        logger.info(f"🟢 Mongo conectado a la base: {database.name}")
        return True
    except PyMongoError as e:
        logger.warning(f"⚠️ No se pudo conectar a MongoDB ({database.name}): {e}")
        return False
