"""
Pytest fixtures and configuration for all tests.
"""

import os

# Settings are read at import time by app.core.security
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("JWT_SECRET", "test-secret-key-at-least-32-chars-long")

import pytest
from typing import AsyncGenerator
from mongomock_motor import AsyncMongoMockClient
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.database import create_indexes
from app.seed import seed_catalog

TEST_DB_NAME = "trivia_test"


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    """
    Provide a clean in-memory database for each test.

    Indexes are the real ones, so unique-key races behave as in MongoDB.
    The category/difficulty catalog is seeded.
    """
    client = AsyncMongoMockClient()
    db = client[TEST_DB_NAME]

    await create_indexes(db)
    await seed_catalog(db)

    yield db

    client.close()


@pytest.fixture
def sample_user_data():
    """Sample registration data for testing."""
    return {
        "username": "testuser",
        "password": "password123",
        "first_name": "Test",
        "last_name": "User",
        "email": "test@example.com",
    }


@pytest.fixture
def sample_admin_data():
    return {
        "username": "adminuser",
        "password": "adminpass123",
        "first_name": "Admin",
        "last_name": "User",
        "email": "admin@example.com",
        "is_admin": True,
    }


@pytest.fixture
def sample_session_data():
    """A finished quiz: 7/10 correct in General Knowledge, easy."""
    return {
        "session_token": "token-abc-123",
        "category": "General Knowledge",
        "difficulty": "easy",
        "score": 7,
        "points": 90,
    }


@pytest.fixture
async def registered_user(test_db, sample_user_data):
    """A user created through registration (stats + "All" folder)."""
    from app.services.auth_service import AuthService
    from app.models.user import UserCreate

    user, _ = await AuthService(test_db).register(UserCreate(**sample_user_data))
    return user
