"""
Integration tests for /leaderboard and /quizzes endpoints
"""

import httpx

from app.services.quiz_service import QuizService, get_quiz_service
from app.main import app


class TestLeaderboardEndpoints:
    async def test_get_is_public(self, client):
        response = await client.get("/leaderboard")

        assert response.status_code == 200
        assert response.json() == {"top_leaderboard_scores": []}

    async def test_post_requires_login(self, client):
        score = {"category": "Sports", "difficulty": "hard", "score": 9, "points": 200}

        response = await client.post("/leaderboard", json=score)

        assert response.status_code in (401, 403)

    async def test_insert_gate(self, client, auth_headers):
        score = {"category": "Sports", "difficulty": "hard", "score": 9}

        rejected = await client.post("/leaderboard", json={**score, "points": 80}, headers=auth_headers)
        accepted = await client.post("/leaderboard", json={**score, "points": 81}, headers=auth_headers)

        assert "message" in rejected.json()
        assert accepted.json()["updated"]["points"] == 81

        board = await client.get("/leaderboard", params={"category": "Sports"})
        assert len(board.json()["top_leaderboard_scores"]) == 1


class TestQuizzesEndpoints:
    async def test_get_questions(self, client):
        def handler(request):
            return httpx.Response(200, json={
                "response_code": 0,
                "results": [{
                    "category": "Sports",
                    "difficulty": "hard",
                    "question": "Who won?",
                    "correct_answer": "A",
                    "incorrect_answers": ["B", "C", "D"],
                }],
            })

        app.dependency_overrides[get_quiz_service] = lambda: QuizService(
            transport=httpx.MockTransport(handler)
        )

        response = await client.get("/quizzes", params={"category": 21, "difficulty": "hard"})

        assert response.status_code == 200
        question = response.json()["questions"][0]
        assert sorted(question["answers"]) == ["A", "B", "C", "D"]

    async def test_source_failure_is_502(self, client):
        app.dependency_overrides[get_quiz_service] = lambda: QuizService(
            transport=httpx.MockTransport(lambda request: httpx.Response(500))
        )

        response = await client.get("/quizzes")

        assert response.status_code == 502

    async def test_bad_difficulty_is_422(self, client):
        response = await client.get("/quizzes", params={"difficulty": "extreme"})

        assert response.status_code == 422

    async def test_categories(self, client):
        response = await client.get("/quizzes/categories")

        body = response.json()
        assert {"_id": 9, "name": "General Knowledge"} not in body["categories"]
        assert {"id": 9, "name": "General Knowledge"} in body["categories"]
        assert [d["difficulty"] for d in body["difficulties"]] == ["easy", "medium", "hard"]


class TestHealthEndpoints:
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.json()["status"] == "ok"
        assert response.json()["database"] == "connected"

    async def test_root(self, client):
        response = await client.get("/")

        assert response.json()["name"] == "Trivia API"
