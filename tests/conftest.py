"""Shared fixtures: test settings, a scripted fake connection and API clients."""

import os

# Settings are read at import time, so configure the environment first
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_FORMAT", "console")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("SENTRY_DSN", "")

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_db
from app.core.security import create_access_token
from app.main import app
from tests.fakes import FakeConnection


@pytest.fixture
def conn():
    return FakeConnection()


@pytest.fixture
def client(conn):
    async def override_get_db():
        yield conn

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_access_token('admin', True)}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_access_token('u1', False)}"}
