"""
Unit tests for ScoreService (personal best)
"""

import pytest

from app.core.errors import NotFoundError
from app.repositories.score_repository import NOT_HIGHER
from app.services.score_service import ScoreService
from app.models.leaderboard import ScoreCreate
from app.models.results import Updated, Unchanged


def _score(points: int, score: int = 5, category: str = "General Knowledge", difficulty: str = "easy"):
    return ScoreCreate(category=category, difficulty=difficulty, score=score, points=points)


class TestScoreService:
    async def test_first_score_is_inserted(self, test_db, registered_user):
        service = ScoreService(test_db)

        # Act
        result = await service.update_score(registered_user.username, _score(120))

        # Assert
        assert isinstance(result, Updated)
        assert result.record.points == 120
        assert result.record.category_id == 9
        assert result.record.difficulty_type == 1

    async def test_higher_points_overwrite(self, test_db, registered_user):
        service = ScoreService(test_db)
        await service.update_score(registered_user.username, _score(120, score=6))

        result = await service.update_score(registered_user.username, _score(150, score=8))

        assert isinstance(result, Updated)
        scores = await service.get_scores(registered_user.username)
        assert len(scores) == 1
        assert scores[0].points == 150
        assert scores[0].score == 8

    async def test_lower_points_are_rejected(self, test_db, registered_user):
        service = ScoreService(test_db)
        await service.update_score(registered_user.username, _score(120))
        before = await test_db["personal_best"].find_one({"user_id": registered_user.id})

        # Act
        result = await service.update_score(registered_user.username, _score(119))

        # Assert
        assert isinstance(result, Unchanged)
        assert result.reason == NOT_HIGHER
        after = await test_db["personal_best"].find_one({"user_id": registered_user.id})
        assert after == before

    async def test_tie_is_accepted(self, test_db, registered_user):
        service = ScoreService(test_db)
        await service.update_score(registered_user.username, _score(120))

        result = await service.update_score(registered_user.username, _score(120))

        assert isinstance(result, Updated)
        assert result.record.points == 120

    async def test_keys_are_independent(self, test_db, registered_user):
        service = ScoreService(test_db)
        await service.update_score(registered_user.username, _score(120))
        await service.update_score(registered_user.username, _score(30, difficulty="hard"))

        scores = await service.get_scores(registered_user.username)
        hard = await service.get_scores(registered_user.username, difficulty="hard")

        assert len(scores) == 2
        assert [s.points for s in hard] == [30]

    async def test_unknown_category(self, test_db, registered_user):
        service = ScoreService(test_db)

        with pytest.raises(NotFoundError):
            await service.update_score(registered_user.username, _score(10, category="Cooking"))

        assert await test_db["personal_best"].count_documents({}) == 0

    async def test_unknown_user(self, test_db):
        service = ScoreService(test_db)

        with pytest.raises(NotFoundError):
            await service.update_score("ghost", _score(10))
