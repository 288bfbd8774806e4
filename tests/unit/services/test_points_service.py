"""
Unit tests for PointsService
"""

import asyncio

import pytest
from unittest.mock import patch

from app.core.errors import BadRequestError, NotFoundError
from app.services.levels import level_for
from app.services.points_service import PointsService, to_response
from app.models.stats import UserStats


class TestPointsService:
    """Test suite for PointsService stats updates."""

    async def test_new_user_has_zero_stats(self, test_db, registered_user):
        service = PointsService(test_db)

        stats = await service.get_stats(registered_user.username)

        assert stats.points == 0
        assert stats.level == 0
        assert stats.title == "Newbie"
        assert stats.quizzes_completed == 0

    async def test_add_points(self, test_db, registered_user):
        service = PointsService(test_db)

        # Act
        previous, stats = await service.add_points(registered_user.id, 450)

        # Assert
        assert previous.points == 0
        assert stats.points == 450
        assert stats.level == 2
        assert stats.quizzes_completed == 1

        stored = await test_db["stats"].find_one({"_id": registered_user.id})
        assert stored["points"] == 450
        assert stored["level"] == 2

    async def test_add_points_level_up_across_tiers(self, test_db, registered_user):
        service = PointsService(test_db)
        await service.add_points(registered_user.id, 900)

        # Act
        _, stats = await service.add_points(registered_user.id, 111)

        # Assert
        assert stats.points == 1011
        assert stats.level == 5
        assert stats.title == "Apprentice"
        assert stats.quizzes_completed == 2

    async def test_add_points_unknown_user(self, test_db):
        service = PointsService(test_db)

        with pytest.raises(NotFoundError):
            await service.add_points("missing-user-id", 10)

    async def test_get_stats_unknown_username(self, test_db):
        service = PointsService(test_db)

        with pytest.raises(NotFoundError):
            await service.get_stats("ghost")

    async def test_negative_points_rejected(self, test_db, registered_user):
        service = PointsService(test_db)

        with pytest.raises(BadRequestError):
            await service.add_points(registered_user.id, -5)

        stored = await test_db["stats"].find_one({"_id": registered_user.id})
        assert stored["points"] == 0
        assert stored["quizzes_completed"] == 0

    async def test_concurrent_submissions_both_land(self, test_db, registered_user):
        service = PointsService(test_db)

        # Act
        await asyncio.gather(
            service.add_points(registered_user.id, 100),
            service.add_points(registered_user.id, 200),
        )

        # Assert
        stored = await test_db["stats"].find_one({"_id": registered_user.id})
        assert stored["points"] == 300
        assert stored["quizzes_completed"] == 2
        assert stored["level"] == level_for(300)[0]

    async def test_write_between_increment_and_level(self, test_db, registered_user):
        """Another submission landing mid-update is kept and sets the final level."""
        service = PointsService(test_db)
        other = PointsService(test_db)
        real_increment = service.stats_repo.increment

        async def increment_then_other_writer(user_id, earned):
            after = await real_increment(user_id, earned)
            await other.add_points(user_id, 1000)
            return after

        # Act
        with patch.object(service.stats_repo, "increment", new=increment_then_other_writer):
            previous, stats = await service.add_points(registered_user.id, 150)

        # Assert: this call reports its own delta
        assert previous.points == 0
        assert stats.points == 150
        assert stats.quizzes_completed == 1

        stored = await test_db["stats"].find_one({"_id": registered_user.id})
        level, title = level_for(1150)
        assert stored["points"] == 1150
        assert stored["quizzes_completed"] == 2
        assert stored["level"] == level
        assert stored["title"] == title

    def test_to_response_includes_progress(self):
        stats = UserStats(_id="u1", level=0, points=150)

        response = to_response(stats)

        assert response.remaining_pts == 50
        assert response.level_pts == 200
        assert response.user_id == "u1"
