"""
SessionService - played-session log capped per user.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import ConflictError, NotFoundError
from app.repositories.session_repository import SessionRepository, DuplicateSessionError
from app.repositories.user_repository import UserRepository
from app.services.user_service import require_user
from app.models.catalog import Category, Difficulty
from app.models.session import SessionCreate, SessionRecord

logger = logging.getLogger(__name__)

# Sesiones guardadas por usuario; al pasarse se borra la más vieja
SESSION_LIMIT = 15


class SessionService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.session_repo = SessionRepository(db)
        self.user_repo = UserRepository(db)

    async def get_sessions(self, username: str, limit: Optional[int] = None) -> list[SessionRecord]:
        user = await require_user(self.user_repo, username)
        return await self.session_repo.list_for_user(user.id, limit)

    async def insert_session(
        self,
        user_id: str,
        data: SessionCreate,
        category: Category,
        difficulty: Difficulty
    ) -> SessionRecord:
        """
        Insert one finished quiz without touching older sessions.

        Raises ConflictError if data.session_token was already recorded.
        """
        try:
            return await self.session_repo.create(
                user_id,
                data.session_token,
                category,
                difficulty,
                data.score,
                data.points,
            )
        except DuplicateSessionError:
            raise ConflictError("Duplicate session")

    async def evict_over_limit(self, user_id: str) -> Optional[SessionRecord]:
        """Delete the oldest session if the user holds more than SESSION_LIMIT."""
        if await self.session_repo.count_for_user(user_id) <= SESSION_LIMIT:
            return None

        evicted = await self.session_repo.delete_oldest(user_id)
        if evicted:
            logger.debug(f"Evicted session {evicted.id} of user {user_id}")
        return evicted

    async def append_session(
        self,
        user_id: str,
        data: SessionCreate,
        category: Category,
        difficulty: Difficulty
    ) -> SessionRecord:
        """
        Record one finished quiz, then evict the oldest session if the
        user is over SESSION_LIMIT.

        Raises ConflictError if data.session_token was already recorded.
        """
        record = await self.insert_session(user_id, data, category, difficulty)
        await self.evict_over_limit(user_id)
        return record

    async def delete_session(self, username: str, session_id: str) -> SessionRecord:
        user = await require_user(self.user_repo, username)

        record = await self.session_repo.delete(session_id, user.id)
        if not record:
            raise NotFoundError(f"No such session {session_id}")
        return record
