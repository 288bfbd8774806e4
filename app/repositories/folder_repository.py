"""
FolderRepository / TriviaRepository - carpetas de favoritos y preguntas guardadas.

Todas las consultas van acotadas por user_id: una carpeta de otro
usuario se trata igual que una que no existe.
"""

from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from app.models.folder import Folder, Trivia


class DuplicateFolderError(ValueError):
    pass


class FolderRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["folders"]

    async def create(self, user_id: str, name: str) -> Folder:
        doc = {"_id": str(ObjectId()), "user_id": user_id, "name": name}
        try:
            await self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateFolderError(f"Duplicate folder name: {name}")
        return Folder(**doc)

    async def get(self, user_id: str, folder_id: str) -> Optional[Folder]:
        doc = await self.collection.find_one({"_id": folder_id, "user_id": user_id})
        return Folder(**doc) if doc else None

    async def get_by_name(self, user_id: str, name: str) -> Optional[Folder]:
        doc = await self.collection.find_one({"user_id": user_id, "name": name})
        return Folder(**doc) if doc else None

    async def list_for_user(self, user_id: str) -> list[Folder]:
        cursor = self.collection.find({"user_id": user_id}).sort("name", 1)
        docs = await cursor.to_list(length=None)
        return [Folder(**doc) for doc in docs]

    async def rename(self, user_id: str, folder_id: str, new_name: str) -> Optional[Folder]:
        try:
            doc = await self.collection.find_one_and_update(
                {"_id": folder_id, "user_id": user_id},
                {"$set": {"name": new_name}},
                return_document=ReturnDocument.AFTER
            )
        except DuplicateKeyError:
            raise DuplicateFolderError(f"Duplicate folder name: {new_name}")
        return Folder(**doc) if doc else None

    async def delete(self, user_id: str, folder_id: str) -> Optional[Folder]:
        doc = await self.collection.find_one_and_delete({"_id": folder_id, "user_id": user_id})
        return Folder(**doc) if doc else None

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count


class TriviaRepository:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db["trivia"]

    async def create(self, user_id: str, folder_id: str, question: str, answer: str) -> Trivia:
        doc = {
            "_id": str(ObjectId()),
            "user_id": user_id,
            "folder_id": folder_id,
            "question": question,
            "answer": answer,
        }
        await self.collection.insert_one(doc)
        return Trivia(**doc)

    async def get(self, user_id: str, trivia_id: str) -> Optional[Trivia]:
        doc = await self.collection.find_one({"_id": trivia_id, "user_id": user_id})
        return Trivia(**doc) if doc else None

    async def list_for_user(self, user_id: str) -> list[Trivia]:
        docs = await self.collection.find({"user_id": user_id}).to_list(length=None)
        return [Trivia(**doc) for doc in docs]

    async def list_for_folder(self, folder_id: str) -> list[Trivia]:
        docs = await self.collection.find({"folder_id": folder_id}).to_list(length=None)
        return [Trivia(**doc) for doc in docs]

    async def move(self, user_id: str, trivia_id: str, folder_id: str) -> Optional[Trivia]:
        doc = await self.collection.find_one_and_update(
            {"_id": trivia_id, "user_id": user_id},
            {"$set": {"folder_id": folder_id}},
            return_document=ReturnDocument.AFTER
        )
        return Trivia(**doc) if doc else None

    async def delete(self, user_id: str, trivia_id: str) -> Optional[Trivia]:
        doc = await self.collection.find_one_and_delete({"_id": trivia_id, "user_id": user_id})
        return Trivia(**doc) if doc else None

    async def delete_for_folder(self, folder_id: str) -> int:
        result = await self.collection.delete_many({"folder_id": folder_id})
        return result.deleted_count

    async def delete_for_user(self, user_id: str) -> int:
        result = await self.collection.delete_many({"user_id": user_id})
        return result.deleted_count
