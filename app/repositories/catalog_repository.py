"""
CatalogRepository - categorías y dificultades de Open Trivia DB.

Los récords se guardan por id de categoría y tipo de dificultad; la API
los recibe por nombre, así que todo pasa por aquí primero.
"""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.catalog import Category, Difficulty


class CatalogRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.categories = db["categories"]
        self.difficulties = db["difficulties"]

    async def get_category(self, name: str) -> Optional[Category]:
        doc = await self.categories.find_one({"name": name})
        return Category(**doc) if doc else None

    async def get_difficulty(self, difficulty: str) -> Optional[Difficulty]:
        doc = await self.difficulties.find_one({"difficulty": difficulty})
        return Difficulty(**doc) if doc else None

    async def list_categories(self) -> list[Category]:
        docs = await self.categories.find().sort("name", 1).to_list(length=None)
        return [Category(**doc) for doc in docs]

    async def list_difficulties(self) -> list[Difficulty]:
        docs = await self.difficulties.find().sort("_id", 1).to_list(length=None)
        return [Difficulty(**doc) for doc in docs]

    async def upsert_category(self, category_id: int, name: str) -> None:
        await self.categories.update_one(
            {"_id": category_id},
            {"$set": {"name": name}},
            upsert=True
        )

    async def upsert_difficulty(self, difficulty_type: int, difficulty: str) -> None:
        await self.difficulties.update_one(
            {"_id": difficulty_type},
            {"$set": {"difficulty": difficulty}},
            upsert=True
        )
