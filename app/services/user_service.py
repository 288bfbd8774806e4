"""
UserService - perfil de usuario: lectura, actualización parcial y borrado.
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import NotFoundError
from app.core.security import hash_password
from app.repositories import (
    UserRepository,
    StatsRepository,
    PersonalBestRepository,
    LeaderboardRepository,
    SessionRepository,
    PlayedCountRepository,
    FolderRepository,
    TriviaRepository,
    BadgeRepository,
)
from app.models.user import User, UserUpdate

logger = logging.getLogger(__name__)


async def require_user(user_repo: UserRepository, username: str) -> User:
    """Fetch a user by username or raise NotFoundError."""
    user = await user_repo.get_by_username(username)
    if not user:
        raise NotFoundError(f"No user: {username}")
    return user


class UserService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.user_repo = UserRepository(db)

    async def list_users(self) -> list[User]:
        return await self.user_repo.list_all()

    async def get_user(self, username: str) -> User:
        return await require_user(self.user_repo, username)

    async def update_user(self, username: str, data: UserUpdate) -> User:
        """
        Partial update: only the fields present in `data` change.
        A new password is hashed before it is stored.
        """
        updates = data.model_dump(exclude_none=True)

        password = updates.pop("password", None)
        if password is not None:
            updates["password_hash"] = hash_password(password)

        user = await self.user_repo.update(username, updates)
        if not user:
            raise NotFoundError(f"No user: {username}")
        return user

    async def remove_user(self, username: str) -> None:
        """Delete the user and everything that belongs to them."""
        user = await require_user(self.user_repo, username)

        for repo in (
            PersonalBestRepository(self.db),
            LeaderboardRepository(self.db),
            SessionRepository(self.db),
            PlayedCountRepository(self.db),
            TriviaRepository(self.db),
            FolderRepository(self.db),
            BadgeRepository(self.db),
        ):
            await repo.delete_for_user(user.id)

        await StatsRepository(self.db).delete(user.id)
        await self.user_repo.delete(user.id)

        logger.info(f"🗑️ Removed user {username}")
