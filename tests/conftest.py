# tests/conftest.py
"""Shared fixtures: isolated storage instances and API clients built from create_app()."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before app.config is imported anywhere
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.database import build_engine
from app.main import create_app
from app.services.seed_service import seed_storage
from app.services.storage_service import Storage
from app.storage.memory import MemoryBackend
from app.storage.sql import SqlBackend

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin123"


def make_settings(**overrides) -> Settings:
    values = {"STORAGE_BACKEND": "memory", "SEED_DATA": True, "LOG_TO_FILE": False, "BCRYPT_ROUNDS": 4}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture(params=["memory", "sql"])
def storage(request):
    """Empty façade over each backing. sql runs on a private in-memory SQLite database."""
    if request.param == "memory":
        return Storage(MemoryBackend())
    return Storage(SqlBackend(build_engine("sqlite://")))


@pytest.fixture
def seeded_storage(storage):
    seed_storage(storage, make_settings())
    return storage


@pytest.fixture
def app():
    return create_app(make_settings())


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return client
