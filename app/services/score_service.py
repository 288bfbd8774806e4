"""
ScoreService - personal best per category/difficulty.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.score_repository import PersonalBestRepository
from app.repositories.user_repository import UserRepository
from app.services.catalog_service import CatalogService
from app.services.user_service import require_user
from app.models.leaderboard import PersonalBest, ScoreCreate
from app.models.results import UpsertResult


class ScoreService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.best_repo = PersonalBestRepository(db)
        self.user_repo = UserRepository(db)
        self.catalog = CatalogService(db)

    async def get_scores(
        self,
        username: str,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[PersonalBest]:
        """User's top score in each category/difficulty, or just the one asked for."""
        user = await require_user(self.user_repo, username)
        return await self.best_repo.list_for_user(user.id, category, difficulty)

    async def update_score(self, username: str, data: ScoreCreate) -> UpsertResult[PersonalBest]:
        """
        Record `data` as the personal best unless the stored one has more points.

        Raises NotFoundError for an unknown user, category or difficulty.
        """
        category, difficulty = await self.catalog.resolve(data.category, data.difficulty)
        user = await require_user(self.user_repo, username)

        return await self.best_repo.upsert(
            user.id, category, difficulty, data.score, data.points
        )
