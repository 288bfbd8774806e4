from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.badge import Badge
from app.models.leaderboard import PersonalBest, LeaderboardEntry
from app.models.stats import UserStats


class SessionCreate(BaseModel):
    """
    Un quiz terminado.

    session_token lo genera el cliente una vez por intento; reenviar el
    mismo token no vuelve a contar puntos.
    """

    session_token: str = Field(..., min_length=1, max_length=100)
    category: str
    difficulty: str
    score: int = Field(..., ge=0)
    points: int = Field(..., ge=0)


class SessionRecord(BaseModel):
    id: str = Field(..., alias="_id")

    user_id: str
    session_token: str

    category_id: int
    difficulty_type: int
    category: str
    difficulty: str

    score: int
    points: int
    created_at: datetime

    class Config:
        populate_by_name = True


class PlayedCount(BaseModel):
    """Cuántas veces jugó un usuario una categoría/dificultad"""

    user_id: str
    category_id: int
    difficulty_type: int
    category: str
    difficulty: str
    played: int = 0

    class Config:
        populate_by_name = True


class PlayedCountCreate(BaseModel):
    category: str
    difficulty: str


class QuizOutcome(BaseModel):
    """Resultado completo de registrar un quiz terminado"""

    session: SessionRecord
    stats: UserStats
    leveled_up: bool = False

    personal_best_updated: bool = False
    personal_best: Optional[PersonalBest] = None

    played: int

    leaderboard_updated: bool = False
    leaderboard_entry: Optional[LeaderboardEntry] = None

    badges_awarded: list[Badge] = []
    messages: list[str] = []
