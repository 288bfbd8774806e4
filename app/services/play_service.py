"""
Servicio de Juego - Registra un quiz terminado de punta a punta

Flujo de submit_result:
1. Guarda la sesión (token duplicado → ConflictError, no se hace nada más)
2. Suma los puntos a las stats (nivel y título recalculados)
3. Actualiza el mejor puntaje personal
4. Incrementa el contador de partidas; si va por el intento 3 o menos,
   intenta el récord del leaderboard
5. Otorga insignias: título nuevo al subir de nivel, Trophy al romper un récord
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import TriviaError
from app.repositories.session_repository import SessionRepository, PlayedCountRepository
from app.repositories.score_repository import PersonalBestRepository
from app.repositories.badge_repository import BadgeRepository
from app.repositories.user_repository import UserRepository
from app.services.catalog_service import CatalogService
from app.services.points_service import PointsService
from app.services.session_service import SessionService
from app.services.leaderboard_service import LeaderboardService
from app.services.user_service import require_user
from app.models.badge import TROPHY_BADGE
from app.models.catalog import Category, Difficulty
from app.models.leaderboard import ScoreCreate
from app.models.results import Updated
from app.models.session import (
    SessionCreate,
    SessionRecord,
    PlayedCount,
    PlayedCountCreate,
    QuizOutcome,
)
from app.models.stats import UserStats
from app.models.user import User

logger = logging.getLogger(__name__)

# Solo los primeros intentos en una categoría/dificultad cuentan para el leaderboard
LEADERBOARD_MAX_ATTEMPTS = 3


class PlayService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.user_repo = UserRepository(db)
        self.played_repo = PlayedCountRepository(db)
        self.session_repo = SessionRepository(db)
        self.best_repo = PersonalBestRepository(db)
        self.badge_repo = BadgeRepository(db)
        self.catalog = CatalogService(db)
        self.points_service = PointsService(db)
        self.session_service = SessionService(db)
        self.leaderboard_service = LeaderboardService(db)

    # ============================================
    # 📌 PLAYED COUNTS
    # ============================================

    async def get_played_counts(
        self,
        username: str,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[PlayedCount]:
        user = await require_user(self.user_repo, username)
        return await self.played_repo.list_for_user(user.id, category, difficulty)

    async def increment_played_count(self, username: str, data: PlayedCountCreate) -> PlayedCount:
        category, difficulty = await self.catalog.resolve(data.category, data.difficulty)
        user = await require_user(self.user_repo, username)

        return await self.played_repo.increment(user.id, category, difficulty)

    # ============================================
    # 📌 SESSIONS
    # ============================================

    async def _record(
        self,
        user: User,
        data: SessionCreate,
        category: Category,
        difficulty: Difficulty
    ) -> tuple[SessionRecord, UserStats, UserStats]:
        session = await self.session_service.insert_session(user.id, data, category, difficulty)

        try:
            previous, stats = await self.points_service.add_points(user.id, data.points)
        except TriviaError:
            # Sin puntos no hay sesión: el cliente puede reintentar con el mismo token
            await self.session_repo.delete(session.id, user.id)
            raise

        # La más vieja se borra recién cuando los puntos ya se guardaron
        await self.session_service.evict_over_limit(user.id)

        return session, previous, stats

    async def record_session(self, username: str, data: SessionCreate) -> SessionRecord:
        """Log the session and add its points to the user's stats."""
        category, difficulty = await self.catalog.resolve(data.category, data.difficulty)
        user = await require_user(self.user_repo, username)

        session, _, _ = await self._record(user, data, category, difficulty)
        return session

    # ============================================
    # 📌 QUIZ RESULT
    # ============================================

    async def submit_result(self, username: str, data: SessionCreate) -> QuizOutcome:
        """
        Register a finished quiz.

        Lookups happen before any write: an unknown user, category or
        difficulty raises NotFoundError and nothing is stored. A duplicate
        session token raises ConflictError and nothing is stored either.
        """
        category, difficulty = await self.catalog.resolve(data.category, data.difficulty)
        user = await require_user(self.user_repo, username)

        session, previous, stats = await self._record(user, data, category, difficulty)
        messages = []

        score = ScoreCreate(
            category=data.category,
            difficulty=data.difficulty,
            score=data.score,
            points=data.points,
        )

        best = await self.best_repo.upsert(
            user.id, category, difficulty, data.score, data.points
        )
        if not isinstance(best, Updated):
            messages.append(best.reason)

        played = await self.played_repo.increment(user.id, category, difficulty)

        record = None
        if played.played <= LEADERBOARD_MAX_ATTEMPTS:
            record = await self.leaderboard_service.update_leaderboard(user, score)
            if not isinstance(record, Updated):
                messages.append(record.reason)
        else:
            messages.append(
                f"Only the first {LEADERBOARD_MAX_ATTEMPTS} attempts count for the leaderboard"
            )

        leveled_up = stats.level > previous.level
        to_award = []
        if leveled_up:
            to_award.append(stats.title)
        if isinstance(record, Updated):
            to_award.append(TROPHY_BADGE)

        badges = []
        for badge_name in to_award:
            awarded = await self.badge_repo.award(user.id, badge_name)
            if isinstance(awarded, Updated):
                badges.append(awarded.record)
            else:
                messages.append(awarded.reason)

        logger.debug(
            f"Quiz result for {username}: +{data.points} points, "
            f"level {stats.level}, played {played.played}"
        )

        return QuizOutcome(
            session=session,
            stats=stats,
            leveled_up=leveled_up,
            personal_best_updated=isinstance(best, Updated),
            personal_best=best.record if isinstance(best, Updated) else None,
            played=played.played,
            leaderboard_updated=isinstance(record, Updated),
            leaderboard_entry=record.record if isinstance(record, Updated) else None,
            badges_awarded=badges,
            messages=messages,
        )
