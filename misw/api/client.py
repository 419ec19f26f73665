"""
API Client - Blocking HTTP client for the minesweeper service.

Endpoints:
    PUT  /user    Create a user (no auth)
    GET  /user    Stats for the authenticated user
    PUT  /game    Start a new game
    POST /game    Make a move
    GET  /games   List unfinished games

Authenticated endpoints use HTTP Basic auth. A client built without
credentials can only create users.

Usage:
    client = ApiClient.with_credentials(base_url, "alice", "secret")
    stats = client.get_user_stats()
    game = client.new_game(10, 10, 16)
    response = client.make_move(game.id, 3, 4)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar
import logging

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..config import DEFAULT_TIMEOUT
from .errors import (
    MalformedResponseError,
    MissingCredentialsError,
    TransportError,
    UnexpectedStatusError,
)
from .schemas import (
    CreateUserRequest,
    MakeMoveRequest,
    MoveResponse,
    NewGameRequest,
    NewGameResponse,
    UnfinishedGame,
    UserStats,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNFINISHED_GAMES = TypeAdapter(list[UnfinishedGame])


@dataclass(frozen=True)
class Credentials:
    """Username and password, kept in memory only."""
    username: str
    password: str = field(repr=False)


class ApiClient:
    """
    Client for the game service.

    The underlying requests.Session can be shared between clients
    (e.g. the setup client and the credentialed one) by passing http.
    """

    def __init__(
        self,
        base_url: str,
        credentials: Credentials | None = None,
        http: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.strip().rstrip("/")
        self.credentials = credentials
        self.http = http or requests.Session()
        self.timeout = timeout

    @classmethod
    def with_credentials(
        cls,
        base_url: str,
        username: str,
        password: str,
        http: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> ApiClient:
        """Create a client that authenticates every protected request."""
        return cls(
            base_url,
            credentials=Credentials(username=username, password=password),
            http=http,
            timeout=timeout,
        )

    # =========================================================================
    # Endpoints
    # =========================================================================

    def create_user(self, username: str, password: str) -> None:
        """Register a user. Raises UnexpectedStatusError(409) if it exists."""
        body = CreateUserRequest(username=username, password=password)
        response = self._send("PUT", "/user", body=body)
        self._check_status(response)

    def get_user_stats(self) -> UserStats:
        response = self._send("GET", "/user", authenticated=True)
        return self._parse(response, UserStats.model_validate)

    def new_game(self, width: int, height: int, bomb_count: int) -> NewGameResponse:
        body = NewGameRequest(width=width, height=height, bomb_count=bomb_count)
        response = self._send("PUT", "/game", body=body, authenticated=True)
        return self._parse(response, NewGameResponse.model_validate)

    def make_move(self, game_id: int, x: int, y: int) -> MoveResponse:
        body = MakeMoveRequest(game_id=game_id, x=x, y=y)
        response = self._send("POST", "/game", body=body, authenticated=True)
        return self._parse(response, MoveResponse.model_validate)

    def get_unfinished_games(self) -> list[UnfinishedGame]:
        response = self._send("GET", "/games", authenticated=True)
        return self._parse(response, _UNFINISHED_GAMES.validate_python)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _send(
        self,
        method: str,
        path: str,
        body: BaseModel | None = None,
        authenticated: bool = False,
    ) -> requests.Response:
        auth = None
        if authenticated:
            if self.credentials is None:
                raise MissingCredentialsError()
            auth = (self.credentials.username, self.credentials.password)

        kwargs: dict[str, Any] = {"auth": auth, "timeout": self.timeout}
        if body is not None:
            kwargs["json"] = body.model_dump(by_alias=True)

        url = f"{self.base_url}{path}"
        try:
            response = self.http.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(e) from e

        logger.debug("%s %s -> %s", method, path, response.status_code)
        return response

    @staticmethod
    def _check_status(response: requests.Response) -> None:
        if not 200 <= response.status_code < 300:
            raise UnexpectedStatusError(response.status_code, response.text)

    def _parse(self, response: requests.Response, validate: Callable[[Any], T]) -> T:
        self._check_status(response)
        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"invalid JSON ({e})") from e
        try:
            return validate(payload)
        except ValidationError as e:
            raise MalformedResponseError(
                f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}"
            ) from e
