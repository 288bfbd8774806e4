"""
CatalogService - resolves category/difficulty names to catalog rows.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import NotFoundError
from app.repositories.catalog_repository import CatalogRepository
from app.models.catalog import Category, Difficulty


class CatalogService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.catalog_repo = CatalogRepository(db)

    async def resolve(self, category: str, difficulty: str) -> tuple[Category, Difficulty]:
        """
        Look up both names.

        Raises NotFoundError for an unknown category or difficulty.
        """
        found_category = await self.catalog_repo.get_category(category)
        if not found_category:
            raise NotFoundError(f"No such category {category}")

        found_difficulty = await self.catalog_repo.get_difficulty(difficulty)
        if not found_difficulty:
            raise NotFoundError(f"No such difficulty {difficulty}")

        return found_category, found_difficulty

    async def list_categories(self) -> list[Category]:
        return await self.catalog_repo.list_categories()

    async def list_difficulties(self) -> list[Difficulty]:
        return await self.catalog_repo.list_difficulties()
