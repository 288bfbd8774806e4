"""
Integration tests for TriviaApiClient against the ASGI app
"""

import pytest
from httpx import ASGITransport

from app.client import Credential, TriviaApiClient, TriviaApiError
from app.database import Database
from app.main import app


@pytest.fixture
async def api(test_db):
    original_db = Database.db
    Database.db = test_db

    async with TriviaApiClient("http://test", transport=ASGITransport(app=app)) as client:
        yield client

    Database.db = original_db


class TestTriviaApiClient:
    async def test_register_login_and_play(self, api, sample_user_data, sample_session_data):
        await api.register(sample_user_data)
        cred = await api.login(sample_user_data["username"], sample_user_data["password"])

        # Act
        result = await api.submit_result(cred, sample_session_data)

        # Assert
        assert result["stats"]["points"] == sample_session_data["points"]
        stats = await api.get_stats(cred)
        assert stats["quizzes_completed"] == 1
        assert len(await api.get_sessions(cred)) == 1
        assert len(await api.get_leaderboard()) == 1

    async def test_each_call_uses_its_own_credential(self, api, sample_user_data):
        alice = await api.register({**sample_user_data, "username": "alice"})
        bob = await api.register({**sample_user_data, "username": "bob"})

        assert (await api.get_user(alice))["username"] == "alice"
        assert (await api.get_user(bob))["username"] == "bob"

        with pytest.raises(TriviaApiError) as exc:
            await api.get_user(alice, username="bob")
        assert exc.value.status_code == 401

    async def test_bad_token(self, api):
        cred = Credential(username="ghost", token="not-a-jwt")

        with pytest.raises(TriviaApiError) as exc:
            await api.get_stats(cred)

        assert exc.value.status_code == 401

    async def test_favorites(self, api, sample_user_data):
        cred = await api.register(sample_user_data)

        added = await api.add_to_fav(cred, "Capital of France?", "Paris")
        folders = await api.get_folders(cred)

        assert added["folder_id"] == folders[0]["id"]
        assert folders[0]["name"] == "All"

    def test_credential_headers(self):
        cred = Credential(username="alice", token="abc")

        assert cred.headers == {"Authorization": "Bearer abc"}
