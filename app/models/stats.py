from pydantic import BaseModel, Field


class UserStats(BaseModel):
    """Nivel y puntos acumulados de un usuario (un documento por usuario)"""

    user_id: str = Field(..., alias="_id")

    level: int = 0
    title: str = "Newbie"
    points: int = Field(0, ge=0)
    quizzes_completed: int = Field(0, ge=0)

    class Config:
        populate_by_name = True


class StatsResponse(BaseModel):
    user_id: str
    level: int
    title: str
    points: int
    quizzes_completed: int

    remaining_pts: int  # Puntos que faltan para el próximo nivel
    level_pts: int      # Tamaño del nivel actual


class PointsUpdate(BaseModel):
    new_points: int = Field(..., ge=0)
