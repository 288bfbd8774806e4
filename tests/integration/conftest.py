"""
Fixtures for integration tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app
from app.database import Database
from app.services.auth_service import AuthService
from app.models.user import UserCreate


@pytest.fixture
async def client(test_db):
    """
    HTTP client for testing API endpoints.

    Points the app at the in-memory test database. The lifespan is not
    run, so no real MongoDB connection is opened.
    """
    original_db = Database.db
    Database.db = test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    Database.db = original_db
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client, test_db, sample_user_data):
    """
    Provides authentication headers for protected endpoints.

    Registers the sample user and returns valid JWT token headers.
    """
    _, token = await AuthService(test_db).register(UserCreate(**sample_user_data))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def admin_headers(client, test_db, sample_admin_data):
    _, token = await AuthService(test_db).register(
        UserCreate(**sample_admin_data), allow_admin=True
    )
    return {"Authorization": f"Bearer {token}"}
