"""
Game Catalog - Unfinished games and picking one to resume.
"""

from __future__ import annotations
from typing import Sequence

from ..api import ApiClient, ApiError, UnfinishedGame
from ..board import dimensions
from ..errors import FatalError
from ..terminal import Terminal


def describe_games(games: Sequence[UnfinishedGame]) -> list[str]:
    """One numbered line per game, numbering from 1."""
    lines = []
    for number, game in enumerate(games, start=1):
        width, height = dimensions(game.board)
        lines.append(
            f"{number}) Game #{game.id} - {width}x{height} board, "
            f"moves: {game.moves_count}, updated: {game.updated_at}"
        )
    return lines


def resolve_selection(games: Sequence[UnfinishedGame], index: int) -> UnfinishedGame | None:
    """Map a 1-based choice to a game, or None when out of range."""
    if index < 1 or index > len(games):
        return None
    return games[index - 1]


class GameCatalog:
    """Lists the player's unfinished games and resolves a selection."""

    def __init__(self, client: ApiClient, terminal: Terminal):
        self.client = client
        self.terminal = terminal

    def list_unfinished(self) -> list[UnfinishedGame]:
        """Fetch unfinished games; an empty list is a normal answer."""
        try:
            return self.client.get_unfinished_games()
        except ApiError as e:
            raise FatalError(f"Failed to fetch unfinished games: {e}") from e

    def show(self, games: Sequence[UnfinishedGame]) -> None:
        self.terminal.write()
        self.terminal.write("Unfinished games:")
        for line in describe_games(games):
            self.terminal.write(line)

    def choose(self, games: Sequence[UnfinishedGame]) -> UnfinishedGame:
        """Prompt until the player picks a listed game."""
        while True:
            choice = self.terminal.prompt_int("Select a game by number", 1)
            game = resolve_selection(games, choice)
            if game is not None:
                return game
            self.terminal.write(f"Please choose a number between 1 and {len(games)}.")
