"""
LeaderboardService - one global record holder per category/difficulty.

The attempts rule (only the first few plays of a category/difficulty may
claim a record) is enforced by the caller through the played counts,
see PlayService.submit_result.
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.score_repository import LeaderboardRepository
from app.services.catalog_service import CatalogService
from app.models.leaderboard import LeaderboardEntry, ScoreCreate
from app.models.results import Updated, UpsertResult
from app.models.user import User

logger = logging.getLogger(__name__)

# Un slot vacío solo se puede reclamar con MÁS de estos puntos
LEADERBOARD_MIN_POINTS = 80


class LeaderboardService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.leaderboard_repo = LeaderboardRepository(db)
        self.catalog = CatalogService(db)

    async def get_leaderboard(
        self,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[LeaderboardEntry]:
        """Top score in every category/difficulty, optionally filtered."""
        return await self.leaderboard_repo.list_entries(category, difficulty)

    async def update_leaderboard(
        self,
        user: User,
        data: ScoreCreate
    ) -> UpsertResult[LeaderboardEntry]:
        """
        Claim or take over the record for data.category/data.difficulty.

        Raises NotFoundError for an unknown category or difficulty.
        """
        category, difficulty = await self.catalog.resolve(data.category, data.difficulty)

        result = await self.leaderboard_repo.upsert(
            category,
            difficulty,
            user_id=user.id,
            username=user.username,
            score=data.score,
            points=data.points,
            min_points=LEADERBOARD_MIN_POINTS,
        )

        if isinstance(result, Updated):
            logger.info(
                f"🏆 New leaderboard record by {user.username}: "
                f"{category.name}/{difficulty.difficulty} with {data.points} points"
            )

        return result
