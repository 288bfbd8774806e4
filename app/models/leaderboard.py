from datetime import datetime
from pydantic import BaseModel, Field


class ScoreCreate(BaseModel):
    """Resultado de un quiz que se quiere registrar como récord"""

    category: str
    difficulty: str
    score: int = Field(..., ge=0)
    points: int = Field(..., ge=0)


class PersonalBest(BaseModel):
    """Mejor puntaje de un usuario en una categoría/dificultad"""

    user_id: str
    category_id: int
    difficulty_type: int

    category: str
    difficulty: str

    score: int
    points: int
    date: datetime

    class Config:
        populate_by_name = True


class LeaderboardEntry(BaseModel):
    """Récord global de una categoría/dificultad (un solo dueño)"""

    category_id: int
    difficulty_type: int

    category: str
    difficulty: str

    user_id: str
    username: str

    score: int
    points: int
    date: datetime

    class Config:
        populate_by_name = True
