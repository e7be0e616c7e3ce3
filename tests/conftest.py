import pytest
import os
import sys

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

from fastapi.testclient import TestClient

from accounts_service.config import Settings
from accounts_service.infrastructure.db import build_engine, build_session_factory
from accounts_service.infrastructure.models import Base
from accounts_service.main import create_app


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """In-memory database and quiet logs for every test."""
    monkeypatch.setenv("DATABASE_URL", "sqlite://")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("VERIFY_PASSWORD_ON_LOGIN", raising=False)
    monkeypatch.delenv("PASSWORD_SCHEMES", raising=False)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def session(settings):
    engine = build_engine(settings)
    Base.metadata.create_all(bind=engine)
    db = build_session_factory(engine)()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # entering the client runs startup, which creates the schema
    with TestClient(app) as c:
        yield c


def register_payload(**overrides):
    payload = {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@x.com",
        "password": "pw123",
    }
    payload.update(overrides)
    return payload
