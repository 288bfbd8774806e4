"""
Cliente async de la Trivia API

El token no se guarda en el cliente: cada llamada recibe el Credential
del usuario que la hace, así un mismo cliente sirve a varios usuarios.

Uso:
    async with TriviaApiClient("http://localhost:8000") as api:
        cred = await api.login("alice", "password")
        stats = await api.get_stats(cred)
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Bearer token de un usuario logueado."""
    username: str
    token: str

    @property
    def headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"}


class TriviaApiError(Exception):
    """Error HTTP devuelto por la API, con el `detail` del body."""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class TriviaApiClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "TriviaApiClient":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        credential: Optional[Credential] = None,
        params: Optional[dict] = None,
        json: Optional[dict] = None
    ) -> dict:
        """
        Hace la request y devuelve el JSON.

        Raises:
            TriviaApiError: si la API responde con status >= 400
        """
        headers = credential.headers if credential else None
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        logger.debug(f"API call: {method} {endpoint}")
        response = await self._client.request(
            method, endpoint, headers=headers, params=params, json=json
        )

        if response.is_error:
            try:
                detail = response.json().get("detail")
            except ValueError:
                detail = response.text
            raise TriviaApiError(response.status_code, detail)

        return response.json()

    # ==================== AUTH ====================

    async def login(self, username: str, password: str) -> Credential:
        data = await self.request("POST", "/auth/token", json={"username": username, "password": password})
        return Credential(username=username, token=data["token"])

    async def register(self, user_data: dict) -> Credential:
        data = await self.request("POST", "/auth/register", json=user_data)
        return Credential(username=user_data["username"], token=data["token"])

    # ==================== USERS ====================

    async def get_user(self, credential: Credential, username: Optional[str] = None) -> dict:
        data = await self.request("GET", f"/users/{username or credential.username}", credential)
        return data["user"]

    async def patch_user(self, credential: Credential, updates: dict) -> dict:
        data = await self.request("PATCH", f"/users/{credential.username}", credential, json=updates)
        return data["user"]

    async def remove_user(self, credential: Credential) -> dict:
        return await self.request("DELETE", f"/users/{credential.username}", credential)

    async def get_stats(self, credential: Credential) -> dict:
        data = await self.request("GET", f"/users/{credential.username}/stats", credential)
        return data["stats"]

    async def get_badges(self, credential: Credential) -> list[dict]:
        data = await self.request("GET", f"/users/{credential.username}/badges", credential)
        return data["badges"]

    # ==================== SCORES ====================

    async def get_scores(
        self,
        credential: Credential,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[dict]:
        data = await self.request(
            "GET",
            f"/users/{credential.username}/scores",
            credential,
            params={"category": category, "difficulty": difficulty},
        )
        return data["top_scores"]

    async def get_sessions(self, credential: Credential, limit: Optional[int] = None) -> list[dict]:
        data = await self.request(
            "GET", f"/users/{credential.username}/sessions", credential, params={"limit": limit}
        )
        return data["sessions"]

    async def submit_result(self, credential: Credential, result: dict) -> dict:
        """Envía un quiz terminado; `result` lleva session_token, category, difficulty, score, points."""
        data = await self.request("POST", f"/users/{credential.username}/results", credential, json=result)
        return data["result"]

    # ==================== FAVORITES ====================

    async def get_folders(self, credential: Credential) -> list[dict]:
        data = await self.request("GET", f"/users/{credential.username}/folders", credential)
        return data["folders"]

    async def add_to_fav(
        self,
        credential: Credential,
        question: str,
        answer: str,
        folder_name: Optional[str] = None
    ) -> dict:
        body = {"question": question, "answer": answer}
        if folder_name:
            body["folder_name"] = folder_name
        data = await self.request("POST", f"/users/{credential.username}/fav", credential, json=body)
        return data["added"]

    # ==================== QUIZZES / LEADERBOARD ====================

    async def get_questions(self, category: Optional[int] = None, difficulty: Optional[str] = None) -> list[dict]:
        data = await self.request("GET", "/quizzes", params={"category": category, "difficulty": difficulty})
        return data["questions"]

    async def get_leaderboard(
        self,
        category: Optional[str] = None,
        difficulty: Optional[str] = None
    ) -> list[dict]:
        data = await self.request("GET", "/leaderboard", params={"category": category, "difficulty": difficulty})
        return data["top_leaderboard_scores"]
