"""
Errores de dominio y su traducción a respuestas HTTP.

Los services lanzan estas excepciones cerca de la lectura que falla;
main.py registra los handlers con setup_error_handlers().
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TriviaError(Exception):
    """Base exception for all domain errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class NotFoundError(TriviaError):
    """Referenced user, folder, trivia, category, difficulty or session is absent."""
    status_code = status.HTTP_404_NOT_FOUND


class BadRequestError(TriviaError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BadRequestError):
    """Duplicate unique key: username, folder name, session token."""


class UnauthorizedError(TriviaError):
    status_code = status.HTTP_401_UNAUTHORIZED


class QuestionSourceError(TriviaError):
    """The external trivia API failed or returned no usable questions."""
    status_code = status.HTTP_502_BAD_GATEWAY


def setup_error_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""

    @app.exception_handler(TriviaError)
    async def trivia_error_handler(_request: Request, exc: TriviaError) -> JSONResponse:
        headers = None
        if isinstance(exc, UnauthorizedError):
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": str(exc)},
            headers=headers,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unhandled exceptions, always JSON."""
        logger.error(
            "❌ Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )
