"""
StatsRepository - un documento de stats por usuario (_id = user_id).
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.models.stats import UserStats


class StatsRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["stats"]

    async def create(self, user_id: str) -> UserStats:
        """Zero stats for a freshly registered user."""
        stats = UserStats(_id=user_id)
        await self.collection.insert_one(stats.model_dump(by_alias=True))
        return stats

    async def get(self, user_id: str) -> Optional[UserStats]:
        doc = await self.collection.find_one({"_id": user_id})
        return UserStats(**doc) if doc else None

    async def increment(self, user_id: str, earned: int) -> Optional[UserStats]:
        """
        Add `earned` points and one completed quiz in a single $inc.

        Level and title are left as stored; see set_level.
        Returns None if the user has no stats row.
        """
        result = await self.collection.find_one_and_update(
            {"_id": user_id},
            {"$inc": {"points": earned, "quizzes_completed": 1}},
            return_document=ReturnDocument.AFTER
        )

        return UserStats(**result) if result else None

    async def set_level(self, user_id: str, points: int, level: int, title: str) -> bool:
        """
        Store level/title computed from `points`.

        Skipped when the total already moved on: the later writer
        recomputes from its own, larger total.
        """
        result = await self.collection.update_one(
            {"_id": user_id, "points": points},
            {"$set": {"level": level, "title": title}}
        )
        return result.matched_count > 0

    async def delete(self, user_id: str) -> None:
        await self.collection.delete_one({"_id": user_id})
