"""
Controlador de leaderboard - Un récord global por categoría/dificultad

GET es público. POST necesita un usuario logueado: el récord queda a su nombre.
"""

from typing import Optional

from fastapi import APIRouter, Query

from app.core.dependencies import Database, CurrentUser
from app.services.leaderboard_service import LeaderboardService
from app.models.leaderboard import ScoreCreate
from app.models.results import as_payload


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


@router.get("")
async def get_leaderboard(
    db: Database,
    category: Optional[str] = Query(None, description="Filter by category name"),
    difficulty: Optional[str] = Query(None, description="easy | medium | hard")
):
    """
    Obtener los récords del leaderboard.

    Sin filtros devuelve el récord de cada categoría/dificultad.
    """
    entries = await LeaderboardService(db).get_leaderboard(category, difficulty)
    return {"top_leaderboard_scores": entries}


@router.post("")
async def update_leaderboard(request: ScoreCreate, user: CurrentUser, db: Database):
    """
    Intentar un récord con el usuario actual.

    Un slot vacío necesita más de 80 puntos; un récord existente se
    reemplaza con puntos iguales o mayores.
    """
    result = await LeaderboardService(db).update_leaderboard(user, request)
    return as_payload(result)
