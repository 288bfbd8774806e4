"""
Entry point de la API
"""

import logging
import re
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.middleware.base import BaseHTTPMiddleware

from app.core.config import get_settings
from app.core.errors import setup_error_handlers
from app.database import Database, create_indexes
from app.seed import seed_catalog

from app.controllers.auth_controller import router as auth_router
from app.controllers.users_controller import router as users_router
from app.controllers.scores_controller import router as scores_router
from app.controllers.favorites_controller import router as favorites_router
from app.controllers.leaderboard_controller import router as leaderboard_router
from app.controllers.quizzes_controller import router as quizzes_router
from app.controllers.health_controller import router as health_router

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Parse CORS origins
CORS_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",")]
CORS_ORIGIN_REGEX = re.compile(settings.cors_origin_regex) if settings.cors_origin_regex else None


def is_allowed_origin(origin: str) -> bool:
    """Check if origin is allowed by explicit list or regex pattern."""
    if not origin:
        return False
    if origin in CORS_ORIGINS:
        return True
    if CORS_ORIGIN_REGEX and CORS_ORIGIN_REGEX.match(origin):
        return True
    return False


class CORSMiddleware(BaseHTTPMiddleware):
    """
    CORS middleware that answers OPTIONS preflight before routing,
    so body/query validation never turns a preflight into a 4xx.
    """

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin", "")

        if request.method == "OPTIONS":
            if is_allowed_origin(origin):
                return Response(
                    status_code=200,
                    headers={
                        "Access-Control-Allow-Origin": origin,
                        "Access-Control-Allow-Methods": "GET, POST, DELETE, OPTIONS, PATCH",
                        "Access-Control-Allow-Headers": "Authorization, Content-Type, Accept, Origin",
                        "Access-Control-Allow-Credentials": "true",
                        "Access-Control-Max-Age": "86400",
                    }
                )
            return Response(status_code=403, content="Origin not allowed")

        response = await call_next(request)

        if is_allowed_origin(origin):
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Access-Control-Allow-Credentials"] = "true"

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    await Database.connect()
    db = Database.get_db()
    await create_indexes(db)
    await seed_catalog(db)
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Trivia API",
    description="Backend de la app de quizzes de trivia",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(CORSMiddleware)
setup_error_handlers(app)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(scores_router)
app.include_router(favorites_router)
app.include_router(leaderboard_router)
app.include_router(quizzes_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Trivia API",
        "version": "1.0.0",
        "docs": "/docs"
    }
