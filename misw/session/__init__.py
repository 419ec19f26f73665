"""
Session Module - Everything between login and quit.

A session is one authenticated run of the client:
- Created when the service accepts the username and password
- Holds the single credentialed client handle
- Plays one game at a time through the move loop
- Ends when the player quits or a fatal error occurs

Sessions are EPHEMERAL:
- Credentials stay in memory only
- The board shown is always the service's latest snapshot
- Nothing is written to disk
"""

from .negotiator import AuthenticatedSession, SessionNegotiator
from .catalog import GameCatalog, describe_games, resolve_selection
from .game_loop import GameSession, LoopState, MoveInputError, MoveLoop, parse_move, validate_move
from .menu import MenuController, default_bomb_count

__all__ = [
    "AuthenticatedSession",
    "SessionNegotiator",
    "GameCatalog",
    "describe_games",
    "resolve_selection",
    "GameSession",
    "LoopState",
    "MoveInputError",
    "MoveLoop",
    "parse_move",
    "validate_move",
    "MenuController",
    "default_bomb_count",
]
