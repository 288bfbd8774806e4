"""
Servicio de Puntos - Acumula puntos y recalcula nivel/título del usuario
"""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import BadRequestError, NotFoundError
from app.repositories.stats_repository import StatsRepository
from app.repositories.user_repository import UserRepository
from app.services.levels import apply_points, calc_progress, level_for
from app.services.user_service import require_user
from app.models.stats import UserStats, StatsResponse

logger = logging.getLogger(__name__)


def to_response(stats: UserStats) -> StatsResponse:
    """Stats plus the progress towards the next level."""
    progress = calc_progress(stats.points)
    return StatsResponse(
        user_id=stats.user_id,
        level=stats.level,
        title=stats.title,
        points=stats.points,
        quizzes_completed=stats.quizzes_completed,
        remaining_pts=progress.remaining,
        level_pts=progress.tier_size,
    )


class PointsService:
    """
    Servicio para sumar puntos a las stats de un usuario.

    El nivel y el título no se incrementan: se recalculan siempre a partir
    del total de puntos usando la tabla de niveles (services/levels.py).
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.stats_repo = StatsRepository(db)
        self.user_repo = UserRepository(db)

    async def get_stats(self, username: str) -> UserStats:
        user = await require_user(self.user_repo, username)

        stats = await self.stats_repo.get(user.id)
        if not stats:
            raise NotFoundError(f"No stats for user: {username}")
        return stats

    async def add_points(self, user_id: str, earned: int) -> tuple[UserStats, UserStats]:
        """
        Add `earned` points and one completed quiz.

        Points and quiz count go in with one $inc, so overlapping
        submissions all land. Level and title are then recomputed from
        the new total.

        Returns: (previous_stats, new_stats)
        Raises: NotFoundError if the user has no stats row
        """
        if earned < 0:
            raise BadRequestError(f"Points must be >= 0, got {earned}")

        after = await self.stats_repo.increment(user_id, earned)
        if not after:
            raise NotFoundError(f"No user with id: {user_id}")

        # Stats justo antes de este $inc
        before_points = after.points - earned
        level, title = level_for(before_points)
        current = UserStats(
            _id=user_id,
            level=level,
            title=title,
            points=before_points,
            quizzes_completed=after.quizzes_completed - 1,
        )

        saved = apply_points(current, earned)
        await self.stats_repo.set_level(user_id, saved.points, saved.level, saved.title)

        if saved.level > current.level:
            logger.info(f"⬆️ User {user_id} reached level {saved.level} ({saved.title})")

        return current, saved

    async def add_points_for(self, username: str, earned: int) -> UserStats:
        user = await require_user(self.user_repo, username)
        _, stats = await self.add_points(user.id, earned)
        return stats
