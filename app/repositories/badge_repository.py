"""
BadgeRepository - insignias ganadas por cada usuario.
"""

from datetime import datetime, timezone

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.models.badge import Badge
from app.models.results import Updated, Unchanged, UpsertResult


def badge_url(badge_name: str) -> str:
    return f"/badges/{badge_name.lower()}.gif"


class BadgeRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["badges"]

    async def list_for_user(self, user_id: str) -> list[Badge]:
        """Newest first."""
        cursor = self.collection.find({"user_id": user_id}).sort("date", -1)
        docs = await cursor.to_list(length=None)
        return [Badge(**doc) for doc in docs]

    async def award(self, user_id: str, badge_name: str) -> UpsertResult[Badge]:
        """Each badge is earned once; a second award leaves the first untouched."""
        doc = {
            "user_id": user_id,
            "badge_name": badge_name,
            "badge_url": badge_url(badge_name),
            "date": datetime.now(timezone.utc),
        }
        try:
            await self.collection.insert_one(doc)
        except DuplicateKeyError:
            return Unchanged("The user has already earned this badge.")

        return Updated(Badge(**doc))

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count
