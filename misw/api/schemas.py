"""
Pydantic Schemas - Wire models for the game service.

Field names follow Python style; aliases carry the camelCase names
used on the wire. Requests are dumped with by_alias=True, responses
are validated from the decoded JSON.

Boards must be rectangular: a ragged board in a response fails
validation and surfaces as a malformed response.
"""

from typing import Annotated, Optional
from pydantic import AfterValidator, BaseModel, Field

from ..board import is_rectangular


def _check_board(rows: list[list[str]]) -> list[list[str]]:
    if not is_rectangular(rows):
        raise ValueError("board rows must all have the same length")
    return rows


BoardRows = Annotated[list[list[str]], AfterValidator(_check_board)]


# =============================================================================
# Request Models
# =============================================================================

class CreateUserRequest(BaseModel):
    """Body for PUT /user."""
    username: str
    password: str


class NewGameRequest(BaseModel):
    """Body for PUT /game."""
    width: int
    height: int
    bomb_count: int = Field(..., alias="bombCount")

    model_config = {"populate_by_name": True}


class MakeMoveRequest(BaseModel):
    """Body for POST /game. Coordinates are zero-based, x is the column."""
    game_id: int = Field(..., alias="gameId")
    x: int
    y: int

    model_config = {"populate_by_name": True}


# =============================================================================
# Response Models
# =============================================================================

class UserStats(BaseModel):
    """Read-only player statistics from GET /user."""
    username: str
    games_played: int = Field(..., alias="gamesPlayed")
    games_won: int = Field(..., alias="gamesWon")
    games_lost: int = Field(..., alias="gamesLost")
    average_moves: float = Field(..., alias="averageMoves")

    model_config = {"populate_by_name": True}


class NewGameResponse(BaseModel):
    """A freshly created game and its all-covered board."""
    id: int
    board: BoardRows


class MoveResponse(BaseModel):
    """
    Board snapshot after a move.

    result is absent while the game continues, true on a win
    and false when a bomb was hit.
    """
    board: BoardRows
    result: Optional[bool] = None

    @property
    def is_final(self) -> bool:
        return self.result is not None


class UnfinishedGame(BaseModel):
    """Summary of a game the player can resume."""
    id: int
    board: BoardRows
    moves_count: int = Field(..., alias="movesCount")
    updated_at: str = Field(..., alias="updatedAt")

    model_config = {"populate_by_name": True}
