"""
FolderService - carpetas de favoritos y preguntas guardadas de un usuario.

La carpeta "All" se crea al registrarse: no se puede renombrar ni borrar.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import BadRequestError, ConflictError, NotFoundError
from app.repositories.folder_repository import (
    FolderRepository,
    TriviaRepository,
    DuplicateFolderError,
)
from app.repositories.user_repository import UserRepository
from app.services.user_service import require_user
from app.models.folder import (
    DEFAULT_FOLDER,
    Folder,
    FolderWithTrivia,
    Trivia,
    TriviaCreate,
)


class FolderService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.folder_repo = FolderRepository(db)
        self.trivia_repo = TriviaRepository(db)
        self.user_repo = UserRepository(db)

    async def _require_folder(self, user_id: str, folder_id: str) -> Folder:
        folder = await self.folder_repo.get(user_id, folder_id)
        if not folder:
            raise NotFoundError(f"No such folder {folder_id}")
        return folder

    async def _require_folder_named(self, user_id: str, name: str) -> Folder:
        folder = await self.folder_repo.get_by_name(user_id, name)
        if not folder:
            raise NotFoundError(f"No such folder {name}")
        return folder

    # ============================================
    # 📌 FOLDERS
    # ============================================

    async def list_folders(self, username: str) -> list[Folder]:
        """The default folder first, the rest by name."""
        user = await require_user(self.user_repo, username)
        folders = await self.folder_repo.list_for_user(user.id)

        return sorted(folders, key=lambda f: f.name != DEFAULT_FOLDER)

    async def create_folder(self, username: str, name: str) -> Folder:
        user = await require_user(self.user_repo, username)
        try:
            return await self.folder_repo.create(user.id, name)
        except DuplicateFolderError as e:
            raise ConflictError(str(e))

    async def get_folder(self, username: str, folder_id: str) -> FolderWithTrivia:
        user = await require_user(self.user_repo, username)
        folder = await self._require_folder(user.id, folder_id)

        trivia = await self.trivia_repo.list_for_folder(folder.id)
        return FolderWithTrivia(folder_id=folder.id, folder_name=folder.name, trivia=trivia)

    async def rename_folder(self, username: str, folder_id: str, new_name: str) -> Folder:
        user = await require_user(self.user_repo, username)
        folder = await self._require_folder(user.id, folder_id)

        if folder.name == DEFAULT_FOLDER:
            raise BadRequestError(f"Folder {DEFAULT_FOLDER} cannot be renamed")

        try:
            renamed = await self.folder_repo.rename(user.id, folder.id, new_name)
        except DuplicateFolderError as e:
            raise ConflictError(str(e))

        if not renamed:
            raise NotFoundError(f"No such folder {folder_id}")
        return renamed

    async def delete_folder(self, username: str, folder_id: str) -> Folder:
        """Delete a folder and the trivia saved in it."""
        user = await require_user(self.user_repo, username)
        folder = await self._require_folder(user.id, folder_id)

        if folder.name == DEFAULT_FOLDER:
            raise BadRequestError(f"Folder {DEFAULT_FOLDER} cannot be deleted")

        await self.trivia_repo.delete_for_folder(folder.id)
        deleted = await self.folder_repo.delete(user.id, folder.id)
        if not deleted:
            raise NotFoundError(f"No such folder {folder_id}")
        return deleted

    # ============================================
    # 📌 FAVORITE TRIVIA
    # ============================================

    async def list_trivia(self, username: str) -> list[Trivia]:
        user = await require_user(self.user_repo, username)
        return await self.trivia_repo.list_for_user(user.id)

    async def add_trivia(self, username: str, data: TriviaCreate) -> Trivia:
        user = await require_user(self.user_repo, username)
        folder = await self._require_folder_named(user.id, data.folder_name or DEFAULT_FOLDER)

        return await self.trivia_repo.create(user.id, folder.id, data.question, data.answer)

    async def get_trivia(self, username: str, trivia_id: str) -> Trivia:
        user = await require_user(self.user_repo, username)
        trivia = await self.trivia_repo.get(user.id, trivia_id)
        if not trivia:
            raise NotFoundError(f"No such trivia {trivia_id}")
        return trivia

    async def move_trivia(self, username: str, trivia_id: str, folder_name: str) -> Trivia:
        """Move a saved trivia into another folder of the same user."""
        user = await require_user(self.user_repo, username)
        folder = await self._require_folder_named(user.id, folder_name)

        trivia = await self.trivia_repo.move(user.id, trivia_id, folder.id)
        if not trivia:
            raise NotFoundError(f"No such trivia {trivia_id}")
        return trivia

    async def delete_trivia(self, username: str, trivia_id: str) -> Trivia:
        user = await require_user(self.user_repo, username)
        trivia = await self.trivia_repo.delete(user.id, trivia_id)
        if not trivia:
            raise NotFoundError(f"No such trivia {trivia_id}")
        return trivia
