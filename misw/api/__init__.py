"""
API Module - Client side of the minesweeper service.

The service owns all game logic. The client:
1. Creates the user account
2. Fetches player stats (also used to verify the password)
3. Starts games and lists unfinished ones
4. Submits moves and receives full board snapshots

No game state is kept on the client beyond the active session.
"""

from .client import ApiClient, Credentials
from .errors import (
    ApiError,
    TransportError,
    MissingCredentialsError,
    UnexpectedStatusError,
    MalformedResponseError,
)
from .schemas import (
    # Requests
    CreateUserRequest,
    NewGameRequest,
    MakeMoveRequest,
    # Responses
    UserStats,
    NewGameResponse,
    MoveResponse,
    UnfinishedGame,
)

__all__ = [
    # Client
    "ApiClient",
    "Credentials",
    # Errors
    "ApiError",
    "TransportError",
    "MissingCredentialsError",
    "UnexpectedStatusError",
    "MalformedResponseError",
    # Requests
    "CreateUserRequest",
    "NewGameRequest",
    "MakeMoveRequest",
    # Responses
    "UserStats",
    "NewGameResponse",
    "MoveResponse",
    "UnfinishedGame",
]
