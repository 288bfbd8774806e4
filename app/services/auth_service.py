"""
AuthService - registration and username/password login.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import ConflictError, UnauthorizedError
from app.core.security import create_access_token, hash_password, verify_password
from app.repositories.user_repository import UserRepository, DuplicateUsernameError
from app.repositories.stats_repository import StatsRepository
from app.repositories.folder_repository import FolderRepository
from app.models.folder import DEFAULT_FOLDER
from app.models.user import User, UserCreate


class AuthService:
    def __init__(self, db: AsyncIOMotorDatabase):
        self.user_repo = UserRepository(db)
        self.stats_repo = StatsRepository(db)
        self.folder_repo = FolderRepository(db)

    async def register(self, user_data: UserCreate, allow_admin: bool = False) -> tuple[User, str]:
        """
        Register a new user.

        Only an admin creating users may set is_admin; public sign-ups
        always get a regular account.

        1. Creates the user with a hashed password
        2. Creates zeroed stats and the default "All" folder
        3. Returns user and JWT access token

        Returns: (user, jwt_token)
        Raises: ConflictError on a duplicate username
        """
        if user_data.is_admin and not allow_admin:
            user_data = user_data.model_copy(update={"is_admin": False})

        try:
            user = await self.user_repo.create(user_data, hash_password(user_data.password))
        except DuplicateUsernameError as e:
            raise ConflictError(str(e))

        try:
            await self.stats_repo.create(user.id)
            await self.folder_repo.create(user.id, DEFAULT_FOLDER)
        except Exception:
            # Sin stats o sin "All" la cuenta queda a medias: se deshace el registro
            await self.folder_repo.delete_for_user(user.id)
            await self.stats_repo.delete(user.id)
            await self.user_repo.delete(user.id)
            raise

        return user, create_access_token(user.username, user.is_admin)

    async def authenticate(self, username: str, password: str) -> tuple[User, str]:
        """
        Check username/password.

        Returns: (user, jwt_token)
        Raises: UnauthorizedError if the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)

        if user and user.password_hash and verify_password(password, user.password_hash):
            return user, create_access_token(user.username, user.is_admin)

        raise UnauthorizedError("Invalid username/password")
