"""
UserRepository - MongoDB access for users collection.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.models.user import User, UserCreate


class DuplicateUsernameError(ValueError):
    pass


class UserRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["users"]

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        doc = await self.collection.find_one({"_id": user_id})
        return User(**doc) if doc else None

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        doc = await self.collection.find_one({"username": username})
        return User(**doc) if doc else None

    async def list_all(self) -> list[User]:
        """All users ordered by username."""
        cursor = self.collection.find().sort("username", 1)
        docs = await cursor.to_list(length=None)
        return [User(**doc) for doc in docs]

    async def create(self, user_data: UserCreate, password_hash: str) -> User:
        """
        Create a new user.

        Raises DuplicateUsernameError if the username is taken.
        """
        user_doc = {
            "_id": str(ObjectId()),
            "username": user_data.username,
            "password_hash": password_hash,
            "first_name": user_data.first_name,
            "last_name": user_data.last_name,
            "email": user_data.email,
            "created_at": datetime.now(timezone.utc),
            "is_admin": user_data.is_admin,
        }

        try:
            await self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            raise DuplicateUsernameError(f"Duplicate username: {user_data.username}")

        return User(**user_doc)

    async def update(self, username: str, updates: dict) -> Optional[User]:
        """Set the given fields; returns None if the user does not exist."""
        if not updates:
            return await self.get_by_username(username)

        result = await self.collection.find_one_and_update(
            {"username": username},
            {"$set": updates},
            return_document=ReturnDocument.AFTER
        )

        return User(**result) if result else None

    async def delete(self, user_id: str) -> bool:
        result = await self.collection.delete_one({"_id": user_id})
        return result.deleted_count > 0

    async def exists(self, user_id: str) -> bool:
        """Check if user exists."""
        count = await self.collection.count_documents({"_id": user_id})
        return count > 0
