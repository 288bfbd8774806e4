"""
🏆 Score repositories - récords personales y leaderboard global

Ambas colecciones tienen un índice único compuesto sobre su clave, así
que el upsert es: update condicional (points <= candidato) y, si no
matcheó nada, insert. Si el insert choca con el índice es porque ya hay
un récord mejor guardado.
"""

from datetime import datetime, timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.models.catalog import Category, Difficulty
from app.models.leaderboard import PersonalBest, LeaderboardEntry
from app.models.results import Updated, Unchanged, UpsertResult

NOT_HIGHER = "Not updated as the new score is less than the stored score."


def _score_filter(category: Optional[str], difficulty: Optional[str]) -> dict:
    query = {}
    if category:
        query["category"] = category
    if difficulty:
        query["difficulty"] = difficulty
    return query


class PersonalBestRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["personal_best"]

    async def list_for_user(
        self,
        user_id: str,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[PersonalBest]:
        """Top scores of a user, optionally narrowed to one category/difficulty."""
        query = {"user_id": user_id, **_score_filter(category, difficulty)}
        cursor = self.collection.find(query).sort([("category", 1), ("difficulty_type", 1)])
        docs = await cursor.to_list(length=None)
        return [PersonalBest(**doc) for doc in docs]

    async def upsert(
        self,
        user_id: str,
        category: Category,
        difficulty: Difficulty,
        score: int,
        points: int
    ) -> UpsertResult[PersonalBest]:
        """
        Insert when there is no record yet, otherwise overwrite only if
        `points` is not lower than the stored points. Ties are accepted
        and refresh the date.
        """
        key = {
            "user_id": user_id,
            "category_id": category.id,
            "difficulty_type": difficulty.type,
        }
        now = datetime.now(timezone.utc)

        doc = await self.collection.find_one_and_update(
            {**key, "points": {"$lte": points}},
            {"$set": {"score": score, "points": points, "date": now}},
            return_document=ReturnDocument.AFTER
        )
        if doc:
            return Updated(PersonalBest(**doc))

        new_doc = {
            **key,
            "category": category.name,
            "difficulty": difficulty.difficulty,
            "score": score,
            "points": points,
            "date": now,
        }
        try:
            await self.collection.insert_one(new_doc)
        except DuplicateKeyError:
            return Unchanged(NOT_HIGHER)

        return Updated(PersonalBest(**new_doc))

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count


class LeaderboardRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["leaderboard"]

    async def list_entries(
        self,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[LeaderboardEntry]:
        cursor = self.collection.find(_score_filter(category, difficulty)).sort(
            [("category", 1), ("difficulty_type", 1)]
        )
        docs = await cursor.to_list(length=None)
        return [LeaderboardEntry(**doc) for doc in docs]

    async def upsert(
        self,
        category: Category,
        difficulty: Difficulty,
        user_id: str,
        username: str,
        score: int,
        points: int,
        min_points: int
    ) -> UpsertResult[LeaderboardEntry]:
        """
        Same rule as the personal best, but an empty slot can only be
        claimed with more than `min_points`. Taking over an existing row
        also hands it to the new user.
        """
        key = {"category_id": category.id, "difficulty_type": difficulty.type}
        now = datetime.now(timezone.utc)
        holder = {
            "user_id": user_id,
            "username": username,
            "score": score,
            "points": points,
            "date": now,
        }

        doc = await self.collection.find_one_and_update(
            {**key, "points": {"$lte": points}},
            {"$set": holder},
            return_document=ReturnDocument.AFTER
        )
        if doc:
            return Updated(LeaderboardEntry(**doc))

        if points <= min_points:
            taken = await self.collection.count_documents(key)
            return Unchanged(
                NOT_HIGHER if taken
                else f"A leaderboard record needs more than {min_points} points."
            )

        new_doc = {
            **key,
            "category": category.name,
            "difficulty": difficulty.difficulty,
            **holder,
        }
        try:
            await self.collection.insert_one(new_doc)
        except DuplicateKeyError:
            return Unchanged(NOT_HIGHER)

        return Updated(LeaderboardEntry(**new_doc))

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count
