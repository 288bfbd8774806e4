"""
Controlador de puntajes - Mejores puntajes, sesiones jugadas y contadores

POST /users/{username}/results registra un quiz terminado completo:
sesión, puntos, mejor puntaje, contador de partidas, leaderboard e insignias.
"""

from typing import Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from app.core.dependencies import Database, CorrectUserOrAdmin
from app.services.play_service import PlayService
from app.services.score_service import ScoreService
from app.services.session_service import SessionService
from app.models.leaderboard import ScoreCreate
from app.models.results import as_payload
from app.models.session import SessionCreate, PlayedCountCreate

router = APIRouter(prefix="/users/{username}", tags=["scores"])


class SessionDelete(BaseModel):
    session_id: str


# ============================================
# 📌 PERSONAL BEST
# ============================================

@router.get("/scores")
async def get_scores(
    username: str,
    user: CorrectUserOrAdmin,
    db: Database,
    category: Optional[str] = Query(None),
    difficulty: Optional[str] = Query(None)
):
    """
    Mejor puntaje del usuario en cada categoría/dificultad.

    Con category/difficulty se filtra a esa combinación.
    """
    scores = await ScoreService(db).get_scores(username, category, difficulty)
    return {"top_scores": scores}


@router.post("/scores")
async def update_score(username: str, request: ScoreCreate, user: CorrectUserOrAdmin, db: Database):
    """Guarda el puntaje si no es peor que el mejor guardado."""
    result = await ScoreService(db).update_score(username, request)
    return as_payload(result)


# ============================================
# 📌 SESSIONS
# ============================================

@router.get("/sessions")
async def get_sessions(
    username: str,
    user: CorrectUserOrAdmin,
    db: Database,
    limit: Optional[int] = Query(None, ge=1, le=100)
):
    """Sesiones jugadas, la más reciente primero."""
    sessions = await SessionService(db).get_sessions(username, limit)
    return {"sessions": [s.model_dump() for s in sessions]}


@router.post("/sessions")
async def add_session(username: str, request: SessionCreate, user: CorrectUserOrAdmin, db: Database):
    """
    Registra una sesión y suma sus puntos.

    Un session_token repetido → 400 y no se cuentan puntos dos veces.
    """
    session = await PlayService(db).record_session(username, request)
    return {"added": session.model_dump()}


@router.delete("/sessions")
async def delete_session(username: str, request: SessionDelete, user: CorrectUserOrAdmin, db: Database):
    session = await SessionService(db).delete_session(username, request.session_id)
    return {"deleted": session.model_dump()}


# ============================================
# 📌 PLAYED COUNTS
# ============================================

@router.get("/playedcounts")
async def get_played_counts(
    username: str,
    user: CorrectUserOrAdmin,
    db: Database,
    category: Optional[str] = Query(None),
    difficulty: Optional[str] = Query(None)
):
    played_counts = await PlayService(db).get_played_counts(username, category, difficulty)
    return {"played_counts": played_counts}


@router.post("/playedcounts")
async def increment_played_count(
    username: str,
    request: PlayedCountCreate,
    user: CorrectUserOrAdmin,
    db: Database
):
    played_count = await PlayService(db).increment_played_count(username, request)
    return {"updated": played_count}


# ============================================
# 📌 QUIZ RESULT
# ============================================

@router.post("/results")
async def submit_result(username: str, request: SessionCreate, user: CorrectUserOrAdmin, db: Database):
    """
    Registra un quiz terminado de punta a punta.

    El leaderboard solo se intenta en los primeros 3 intentos de cada
    categoría/dificultad.
    """
    outcome = await PlayService(db).submit_result(username, request)
    return {"result": outcome.model_dump()}
