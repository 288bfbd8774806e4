"""
BadgeService - level and trophy badges.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.badge_repository import BadgeRepository
from app.repositories.user_repository import UserRepository
from app.services.user_service import require_user
from app.models.badge import Badge
from app.models.results import UpsertResult


class BadgeService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.badge_repo = BadgeRepository(db)
        self.user_repo = UserRepository(db)

    async def get_badges(self, username: str) -> list[Badge]:
        user = await require_user(self.user_repo, username)
        return await self.badge_repo.list_for_user(user.id)

    async def award(self, username: str, badge_name: str) -> UpsertResult[Badge]:
        user = await require_user(self.user_repo, username)
        return await self.badge_repo.award(user.id, badge_name)
