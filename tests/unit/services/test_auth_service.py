"""
Unit tests for AuthService
"""

import pytest
from unittest.mock import AsyncMock, patch
from pymongo.errors import PyMongoError

from app.core.errors import ConflictError, UnauthorizedError
from app.core.security import decode_access_token
from app.services.auth_service import AuthService
from app.models.user import UserCreate


class TestAuthService:
    """Test suite for AuthService registration and login."""

    async def test_register_creates_user_stats_and_folder(self, test_db, sample_user_data):
        service = AuthService(test_db)

        # Act
        user, token = await service.register(UserCreate(**sample_user_data))

        # Assert
        assert user.username == sample_user_data["username"]
        assert user.password_hash != sample_user_data["password"]
        assert decode_access_token(token)["sub"] == user.username

        stats = await test_db["stats"].find_one({"_id": user.id})
        assert stats["points"] == 0
        assert stats["title"] == "Newbie"

        folder = await test_db["folders"].find_one({"user_id": user.id})
        assert folder["name"] == "All"

    async def test_register_duplicate_username(self, test_db, sample_user_data):
        service = AuthService(test_db)
        await service.register(UserCreate(**sample_user_data))

        with pytest.raises(ConflictError):
            await service.register(UserCreate(**sample_user_data))

        assert await test_db["users"].count_documents({}) == 1

    async def test_register_undone_when_setup_fails(self, test_db, sample_user_data):
        """If stats or the "All" folder cannot be created, the user is removed too."""
        service = AuthService(test_db)

        with patch.object(
            service.folder_repo,
            "create",
            new=AsyncMock(side_effect=PyMongoError("write failed"))
        ):
            with pytest.raises(PyMongoError):
                await service.register(UserCreate(**sample_user_data))

        assert await test_db["users"].count_documents({}) == 0
        assert await test_db["stats"].count_documents({}) == 0
        assert await test_db["folders"].count_documents({}) == 0

        # The username is free again
        user, _ = await service.register(UserCreate(**sample_user_data))
        assert user.username == sample_user_data["username"]

    async def test_public_register_cannot_create_admin(self, test_db, sample_admin_data):
        service = AuthService(test_db)

        user, token = await service.register(UserCreate(**sample_admin_data))

        assert user.is_admin is False
        assert decode_access_token(token)["is_admin"] is False

    async def test_admin_created_user_can_be_admin(self, test_db, sample_admin_data):
        service = AuthService(test_db)

        user, _ = await service.register(UserCreate(**sample_admin_data), allow_admin=True)

        assert user.is_admin is True

    async def test_authenticate(self, test_db, sample_user_data):
        service = AuthService(test_db)
        await service.register(UserCreate(**sample_user_data))

        with patch("app.services.auth_service.create_access_token") as mock_jwt:
            mock_jwt.return_value = "fake_jwt_token"

            # Act
            user, token = await service.authenticate(
                sample_user_data["username"], sample_user_data["password"]
            )

        # Assert
        assert user.username == sample_user_data["username"]
        assert token == "fake_jwt_token"

    async def test_authenticate_wrong_password(self, test_db, sample_user_data):
        service = AuthService(test_db)
        await service.register(UserCreate(**sample_user_data))

        with pytest.raises(UnauthorizedError):
            await service.authenticate(sample_user_data["username"], "wrong-password")

    async def test_authenticate_unknown_user(self, test_db):
        service = AuthService(test_db)

        with pytest.raises(UnauthorizedError):
            await service.authenticate("ghost", "whatever")
