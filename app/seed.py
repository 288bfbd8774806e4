"""Catalog seed data: categories and difficulties as Open Trivia DB names them."""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.repositories.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)

# {opentdb category id: name}
CATEGORY_SEED_DATA: dict[int, str] = {
    9: "General Knowledge",
    10: "Entertainment: Books",
    11: "Entertainment: Film",
    12: "Entertainment: Music",
    13: "Entertainment: Musicals & Theatres",
    14: "Entertainment: Television",
    15: "Entertainment: Video Games",
    16: "Entertainment: Board Games",
    17: "Science & Nature",
    18: "Science: Computers",
    19: "Science: Mathematics",
    20: "Mythology",
    21: "Sports",
    22: "Geography",
    23: "History",
    24: "Politics",
    25: "Art",
    26: "Celebrities",
    27: "Animals",
    28: "Vehicles",
    29: "Entertainment: Comics",
    30: "Science: Gadgets",
    31: "Entertainment: Japanese Anime & Manga",
    32: "Entertainment: Cartoon & Animations",
}

# {difficulty type: name}
DIFFICULTY_SEED_DATA: dict[int, str] = {
    1: "easy",
    2: "medium",
    3: "hard",
}


async def seed_catalog(db: AsyncIOMotorDatabase) -> None:
    """Upsert every category and difficulty. Safe to run on each startup."""
    repo = CatalogRepository(db)

    for category_id, name in CATEGORY_SEED_DATA.items():
        await repo.upsert_category(category_id, name)

    for difficulty_type, difficulty in DIFFICULTY_SEED_DATA.items():
        await repo.upsert_difficulty(difficulty_type, difficulty)

    logger.info(
        "✅ Catalog seeded: %d categories, %d difficulties",
        len(CATEGORY_SEED_DATA),
        len(DIFFICULTY_SEED_DATA),
    )
