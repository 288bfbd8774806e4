"""
🎯 SessionRepository - historial de quizzes jugados

El token de sesión lo genera el cliente y tiene índice único: es el
guard contra envíos duplicados del mismo intento.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.models.catalog import Category, Difficulty
from app.models.session import SessionRecord, PlayedCount

# Orden cronológico; el _id desempata sesiones del mismo milisegundo
OLDEST_FIRST = [("created_at", 1), ("_id", 1)]
NEWEST_FIRST = [("created_at", -1), ("_id", -1)]


class DuplicateSessionError(ValueError):
    pass


class SessionRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["played_sessions"]

    # ============================================
    # 📌 CREATE
    # ============================================

    async def create(
        self,
        user_id: str,
        session_token: str,
        category: Category,
        difficulty: Difficulty,
        score: int,
        points: int
    ) -> SessionRecord:
        """
        Append a played session.

        Raises DuplicateSessionError if the token was already recorded.
        """
        doc = {
            "_id": str(ObjectId()),
            "user_id": user_id,
            "session_token": session_token,
            "category_id": category.id,
            "difficulty_type": difficulty.type,
            "category": category.name,
            "difficulty": difficulty.difficulty,
            "score": score,
            "points": points,
            "created_at": datetime.now(timezone.utc),
        }

        try:
            await self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateSessionError(f"Duplicate session: {session_token}")

        return SessionRecord(**doc)

    # ============================================
    # 📌 READ
    # ============================================

    async def list_for_user(
        self,
        user_id: str,
        limit: Optional[int] = None
    ) -> list[SessionRecord]:
        """Most recent sessions first."""
        cursor = self.collection.find({"user_id": user_id}).sort(NEWEST_FIRST)
        if limit:
            cursor = cursor.limit(limit)

        docs = await cursor.to_list(length=None)
        return [SessionRecord(**doc) for doc in docs]

    async def count_for_user(self, user_id: str) -> int:
        return await self.collection.count_documents({"user_id": user_id})

    # ============================================
    # 📌 DELETE
    # ============================================

    async def delete_oldest(self, user_id: str) -> Optional[SessionRecord]:
        """Remove the single oldest session of a user."""
        cursor = self.collection.find({"user_id": user_id}).sort(OLDEST_FIRST).limit(1)
        docs = await cursor.to_list(length=1)
        if not docs:
            return None

        return await self.delete(docs[0]["_id"], user_id)

    async def delete(self, session_id: str, user_id: str) -> Optional[SessionRecord]:
        doc = await self.collection.find_one_and_delete({"_id": session_id, "user_id": user_id})
        return SessionRecord(**doc) if doc else None

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count


class PlayedCountRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["played_counts"]

    async def increment(
        self,
        user_id: str,
        category: Category,
        difficulty: Difficulty,
        delta: int = 1
    ) -> PlayedCount:
        """Create the counter at zero on first play, then add `delta`."""
        doc = await self.collection.find_one_and_update(
            {
                "user_id": user_id,
                "category_id": category.id,
                "difficulty_type": difficulty.type,
            },
            {
                "$inc": {"played": delta},
                "$setOnInsert": {
                    "category": category.name,
                    "difficulty": difficulty.difficulty,
                },
            },
            upsert=True,
            return_document=ReturnDocument.AFTER
        )
        return PlayedCount(**doc)

    async def list_for_user(
        self,
        user_id: str,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[PlayedCount]:
        query = {"user_id": user_id}
        if category:
            query["category"] = category
        if difficulty:
            query["difficulty"] = difficulty

        cursor = self.collection.find(query).sort([("category", 1), ("difficulty_type", 1)])
        docs = await cursor.to_list(length=None)
        return [PlayedCount(**doc) for doc in docs]

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count
