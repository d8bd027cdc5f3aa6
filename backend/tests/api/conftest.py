"""API test fixtures - FastAPI app over the per-test SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so /health/ready sees the test engine
    - Lifespan is not run: schema comes from the root test_engine fixture

Design Decisions:
    - httpx AsyncClient + ASGITransport: exercises the real routing, validation and
      error handlers without a network socket
    - lenient_client turns off app-exception re-raising so catch-all 500s can be asserted
"""

import pytest
from httpx import ASGITransport, AsyncClient

import commerce.infrastructure.database as db_module
from commerce.infrastructure.database import get_db, DatabaseSessionManager
from commerce.main import app


@pytest.fixture
def wired_app(test_engine, test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield app

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(wired_app):
    """FastAPI test client with DB dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=wired_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def lenient_client(wired_app):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    async with AsyncClient(
        transport=ASGITransport(app=wired_app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c
