"""
🔌 Database Connection Setup - MongoDB

Configuración centralizada para conectar a MongoDB
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from app.core.config import get_settings

logger = logging.getLogger(__name__)


class Database:
    """Singleton para la conexión a MongoDB"""

    client: Optional[AsyncIOMotorClient] = None
    db: Optional[AsyncIOMotorDatabase] = None

    @classmethod
    async def connect(cls):
        """Conecta a MongoDB"""
        if cls.client is None:
            settings = get_settings()

            cls.client = AsyncIOMotorClient(
                settings.mongodb_uri,
                maxPoolSize=10,
                minPoolSize=2,
            )
            cls.db = cls.client[settings.mongodb_db_name]

            # Test de conexión
            await cls.client.admin.command("ping")
            logger.info(f"✅ Connected to MongoDB: {settings.mongodb_db_name}")

    @classmethod
    async def disconnect(cls):
        """Cierra la conexión"""
        if cls.client is not None:
            cls.client.close()
            cls.client = None
            cls.db = None
            logger.info("❌ Disconnected from MongoDB")

    @classmethod
    def get_db(cls) -> AsyncIOMotorDatabase:
        """Retorna la instancia de la base de datos"""
        if cls.db is None:
            raise RuntimeError("Database not connected. Call Database.connect() first.")
        return cls.db


# ============================================
# 🎯 DEPENDENCY para FastAPI
# ============================================

async def get_database() -> AsyncIOMotorDatabase:
    """
    FastAPI dependency para inyectar la DB

    Uso:
        @router.get("/users/{username}")
        async def get_user(username: str, db: Database):
            repo = UserRepository(db)
            return await repo.get_by_username(username)
    """
    return Database.get_db()


# ============================================
# 🏗️ CREAR ÍNDICES
# ============================================

async def create_indexes(db: AsyncIOMotorDatabase):
    """
    Crea los índices necesarios.

    Los índices únicos compuestos son los que garantizan que los upserts
    de puntajes y el guard de sesiones duplicadas sean atómicos.
    Es idempotente: se llama en cada arranque.
    """
    # Índices para users
    await db.users.create_index("username", unique=True)

    # Índices para personal_best (un récord por usuario/categoría/dificultad)
    await db.personal_best.create_index(
        [("user_id", 1), ("category_id", 1), ("difficulty_type", 1)],
        unique=True
    )

    # Índices para leaderboard (un solo dueño por categoría/dificultad)
    await db.leaderboard.create_index(
        [("category_id", 1), ("difficulty_type", 1)],
        unique=True
    )

    # Índices para played_sessions
    await db.played_sessions.create_index("session_token", unique=True)
    await db.played_sessions.create_index([("user_id", 1), ("created_at", 1)])

    # Índices para played_counts
    await db.played_counts.create_index(
        [("user_id", 1), ("category_id", 1), ("difficulty_type", 1)],
        unique=True
    )

    # Índices para folders y trivia
    await db.folders.create_index([("user_id", 1), ("name", 1)], unique=True)
    await db.trivia.create_index("folder_id")
    await db.trivia.create_index("user_id")

    # Índices para badges
    await db.badges.create_index([("user_id", 1), ("badge_name", 1)], unique=True)

    # Índices para el catálogo
    await db.categories.create_index("name", unique=True)
    await db.difficulties.create_index("difficulty", unique=True)

    logger.info("✅ Indexes created successfully")
