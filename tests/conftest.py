from typing import Generator
from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from rinha.api.app import create_app

TRACKED_ENV_KEYS = (
    "MONGO_USERNAME",
    "MONGO_PASSWORD",
    "MONGO_HOST",
    "MONGO_PORT",
    "MONGO_DATABASE",
    "MONGO_URI",
    "APP_HOST",
    "APP_PORT",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    # setenv + delenv: al terminar el test se restaura el estado original
    for key in TRACKED_ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def database():
    return mongomock.MongoClient()["rinha-test"]


@pytest.fixture
def client(database) -> Generator[TestClient, None, None]:
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def broken_database():
    """Base cuya colección falla en cada operación, como un Mongo caído."""
    db = MagicMock()
    collection = db.__getitem__.return_value
    error = ServerSelectionTimeoutError("mongo:27017: connection refused")
    collection.insert_one.side_effect = error
    collection.find_one.side_effect = error
    collection.find.side_effect = error
    collection.count_documents.side_effect = error
    return db


@pytest.fixture
def broken_client(broken_database) -> Generator[TestClient, None, None]:
    with TestClient(create_app(broken_database)) as test_client:
        yield test_client


@pytest.fixture
def valid_body():
    return {
        "apelido": "foo",
        "nome": "bye",
        "nascimento": "1992-11-23",
        "stack": ["Rust", "Ruby"],
    }
