"""
Controlador de quizzes - Preguntas de Open Trivia DB y catálogo
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.core.dependencies import Database
from app.services.catalog_service import CatalogService
from app.services.quiz_service import QuizService, get_quiz_service


router = APIRouter(prefix="/quizzes", tags=["quizzes"])


@router.get("")
async def get_questions(
    quiz_service: Annotated[QuizService, Depends(get_quiz_service)],
    category: Optional[int] = Query(None, description="Open Trivia DB category id"),
    difficulty: Optional[str] = Query(None, pattern="^(easy|medium|hard)$")
):
    """
    Trae un quiz de preguntas de opción múltiple.

    Las respuestas de cada pregunta vienen ya mezcladas en `answers`.
    Si la API externa falla → 502.
    """
    questions = await quiz_service.get_questions(category, difficulty)
    return {"questions": questions}


@router.get("/categories")
async def get_categories(db: Database):
    """Categorías y dificultades disponibles."""
    catalog = CatalogService(db)
    categories = await catalog.list_categories()
    difficulties = await catalog.list_difficulties()

    return {
        "categories": [c.model_dump() for c in categories],
        "difficulties": [d.model_dump() for d in difficulties],
    }
