"""
Servicio de Quizzes - Trae preguntas de Open Trivia DB

Flujo:
1. Pedir `amount` preguntas de opción múltiple para la categoría/dificultad
2. Si la API responde con response_code != 0 → QuestionSourceError (502)
3. Des-escapar las entidades HTML (&quot;, &#039;, ...) que manda la API
4. Mezclar las respuestas de cada pregunta (random.shuffle: Fisher-Yates,
   todas las permutaciones con la misma probabilidad)
"""

import html
import logging
import random
from typing import Optional

import httpx

from app.core.config import get_settings
from app.core.errors import QuestionSourceError
from app.models.catalog import Question

logger = logging.getLogger(__name__)


def shuffle_answers(correct: str, incorrect: list[str], rng: Optional[random.Random] = None) -> list[str]:
    """Correct answer plus distractors in random order."""
    answers = [correct, *incorrect]
    (rng or random).shuffle(answers)
    return answers


class QuizService:
    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        rng: Optional[random.Random] = None
    ):
        settings = get_settings()
        self.api_url = settings.trivia_api_url
        self.amount = settings.trivia_api_amount
        self.timeout = settings.trivia_api_timeout
        self.transport = transport
        self.rng = rng or random.Random()

    async def get_questions(
        self,
        category: Optional[int] = None,
        difficulty: Optional[str] = None
    ) -> list[Question]:
        """
        Fetch one quiz worth of questions.

        Args:
            category: Open Trivia DB category id (None = any)
            difficulty: easy | medium | hard (None = any)
        """
        params = {"amount": self.amount, "type": "multiple"}
        if category is not None:
            params["category"] = category
        if difficulty:
            params["difficulty"] = difficulty

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(self.api_url, params=params)
                response.raise_for_status()
                data = response.json()
        except httpx.TimeoutException:
            raise QuestionSourceError("Timeout fetching questions")
        except httpx.HTTPError as e:
            logger.warning(f"Question source failed: {e}")
            raise QuestionSourceError(f"Error fetching questions: {str(e)}")

        if data.get("response_code") != 0:
            raise QuestionSourceError(
                f"Question source answered with code {data.get('response_code')}"
            )

        return [self._to_question(raw) for raw in data.get("results", [])]

    def _to_question(self, raw: dict) -> Question:
        correct = html.unescape(raw["correct_answer"])
        incorrect = [html.unescape(a) for a in raw["incorrect_answers"]]

        return Question(
            category=html.unescape(raw["category"]),
            difficulty=raw["difficulty"],
            question=html.unescape(raw["question"]),
            correct_answer=correct,
            incorrect_answers=incorrect,
            answers=shuffle_answers(correct, incorrect, self.rng),
        )


def get_quiz_service() -> QuizService:
    """Dependency de FastAPI; los tests la reemplazan con dependency_overrides."""
    return QuizService()
