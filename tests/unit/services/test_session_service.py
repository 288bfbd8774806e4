"""
Unit tests for SessionService (session log with retention)
"""

import pytest

from app.core.errors import ConflictError, NotFoundError
from app.services.catalog_service import CatalogService
from app.services.session_service import SessionService, SESSION_LIMIT
from app.models.session import SessionCreate


def _session(token: str, points: int = 50) -> SessionCreate:
    return SessionCreate(
        session_token=token,
        category="General Knowledge",
        difficulty="easy",
        score=5,
        points=points,
    )


@pytest.fixture
async def catalog_keys(test_db):
    return await CatalogService(test_db).resolve("General Knowledge", "easy")


class TestSessionService:
    async def test_append_session(self, test_db, registered_user, catalog_keys):
        service = SessionService(test_db)
        category, difficulty = catalog_keys

        # Act
        record = await service.append_session(registered_user.id, _session("t-1"), category, difficulty)

        # Assert
        assert record.session_token == "t-1"
        assert record.category == "General Knowledge"
        assert record.difficulty_type == 1
        assert await test_db["played_sessions"].count_documents({}) == 1

    async def test_duplicate_token_is_conflict(self, test_db, registered_user, catalog_keys):
        service = SessionService(test_db)
        category, difficulty = catalog_keys
        await service.append_session(registered_user.id, _session("t-1"), category, difficulty)

        with pytest.raises(ConflictError):
            await service.append_session(registered_user.id, _session("t-1"), category, difficulty)

        assert await test_db["played_sessions"].count_documents({}) == 1

    async def test_retention_evicts_oldest(self, test_db, registered_user, catalog_keys):
        """The 16th session pushes out the first one."""
        service = SessionService(test_db)
        category, difficulty = catalog_keys

        for i in range(SESSION_LIMIT + 1):
            await service.append_session(registered_user.id, _session(f"t-{i}"), category, difficulty)

        # Assert
        sessions = await service.get_sessions(registered_user.username)
        tokens = {s.session_token for s in sessions}
        assert len(sessions) == SESSION_LIMIT
        assert "t-0" not in tokens
        assert f"t-{SESSION_LIMIT}" in tokens

    async def test_sessions_newest_first_with_limit(self, test_db, registered_user, catalog_keys):
        service = SessionService(test_db)
        category, difficulty = catalog_keys
        for i in range(3):
            await service.append_session(registered_user.id, _session(f"t-{i}"), category, difficulty)

        sessions = await service.get_sessions(registered_user.username, limit=2)

        assert [s.session_token for s in sessions] == ["t-2", "t-1"]

    async def test_delete_session(self, test_db, registered_user, catalog_keys):
        service = SessionService(test_db)
        category, difficulty = catalog_keys
        record = await service.append_session(registered_user.id, _session("t-1"), category, difficulty)

        deleted = await service.delete_session(registered_user.username, record.id)

        assert deleted.id == record.id
        assert await service.get_sessions(registered_user.username) == []

    async def test_delete_missing_session(self, test_db, registered_user):
        service = SessionService(test_db)

        with pytest.raises(NotFoundError):
            await service.delete_session(registered_user.username, "nope")
