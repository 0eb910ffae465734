# rinha/config/settings.py
import os
from typing import Optional
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import BaseModel


class DatabaseSettings(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None
    host: str = "localhost"
    port: int = 27017
    database_name: str = "rinha"
    uri: Optional[str] = None  # si viene MONGO_URI se usa tal cual

    def connection_string(self) -> str:
        if self.uri:
            return self.uri
        if not self.username:
            return f"mongodb://{self.host}:{self.port}"
        user = quote_plus(self.username)
        password = quote_plus(self.password or "")
        return f"mongodb://{user}:{password}@{self.host}:{self.port}"


class Settings(BaseModel):
    database: DatabaseSettings
    application_host: str = "0.0.0.0"
    application_port: int = 8000
    log_level: str = "INFO"


def get_settings(env_file: Optional[str] = None) -> Settings:
    """
    Lee el archivo .env (sin pisar variables ya exportadas) y arma la
    configuración tipada. Un puerto no numérico levanta ValidationError.
    """
    load_dotenv(env_file)

    database = DatabaseSettings(
        username=os.getenv("MONGO_USERNAME") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        host=os.getenv("MONGO_HOST", "localhost"),
        port=os.getenv("MONGO_PORT", 27017),
        database_name=os.getenv("MONGO_DATABASE", "rinha"),
        uri=os.getenv("MONGO_URI") or None,
    )
    return Settings(
        database=database,
        application_host=os.getenv("APP_HOST", "0.0.0.0"),
        application_port=os.getenv("APP_PORT", 8000),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
