"""
PostgreSQL-backed fixtures.

These tests run the real SQL against a scratch database named by
``TEST_DATABASE_URL`` (``postgresql+asyncpg://...``) and are skipped when it
is unset. Every table is dropped and recreated from the models per test.
"""

import os

import httpx
import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from app import models  # noqa: F401  registers the tables on Base.metadata
from app.api.deps import get_db
from app.db.base import Base
from app.main import app

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")

ACME = {
    "handle": "acme",
    "name": "Acme Corp",
    "num_employees": 50,
    "description": "Anvils",
    "logo_url": None,
}


@pytest.fixture
async def engine():
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL is not set")

    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def api(engine):
    """HTTP client for the app, with one committed transaction per request."""

    async def override_get_db():
        async with engine.begin() as conn:
            yield conn

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def acme(api, admin_headers):
    response = await api.post("/companies", json=ACME, headers=admin_headers)
    assert response.status_code == 201
    return response.json()["company"]


@pytest.fixture
async def acme_job(api, acme, admin_headers):
    response = await api.post(
        "/jobs",
        json={"title": "Engineer", "salary": 100000, "equity": 0.1, "company_handle": "acme"},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["job"]
