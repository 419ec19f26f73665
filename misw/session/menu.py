"""
Menu Controller - Top-level dispatch after login.

Options:
    1) Start a new game
    2) See running games (resume one)
    3) View my stats
    q) Quit

FatalError from any option propagates to the caller. Input mistakes
are handled here and bring the player back to the menu.
"""

from __future__ import annotations
import logging

from ..api import ApiError
from ..errors import FatalError
from ..terminal import Terminal
from .catalog import GameCatalog
from .game_loop import GameSession, MoveLoop
from .negotiator import AuthenticatedSession, print_user_stats

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 10
BOMB_DENSITY_DIVISOR = 6

MENU_LINES = [
    "Options:",
    "1) Start a new game",
    "2) See running games",
    "3) View my stats",
    "q) Quit",
]


def default_bomb_count(width: int, height: int) -> int:
    """Suggested bombs: one per six cells, at least one."""
    return max(1, (width * height) // BOMB_DENSITY_DIVISOR)


def bomb_count_is_valid(bombs: int, width: int, height: int) -> bool:
    return 1 <= bombs <= width * height


class MenuController:
    """Runs the menu until the player quits."""

    def __init__(self, session: AuthenticatedSession, terminal: Terminal):
        self.session = session
        self.terminal = terminal
        self.catalog = GameCatalog(session.client, terminal)
        self.move_loop = MoveLoop(session.client, terminal)

    def run(self) -> None:
        while True:
            for line in MENU_LINES:
                self.terminal.write(line)
            choice = self.terminal.read_line("Select an option")

            if choice == "1":
                self.start_new_game()
            elif choice == "2":
                self.resume_game()
            elif choice == "3":
                self.show_stats()
            elif choice.lower() == "q":
                self.terminal.write("Goodbye!")
                return
            else:
                self.terminal.write("Please choose 1, 2, 3, or q.")

    def start_new_game(self) -> GameSession | None:
        """Ask for the board size and bomb count, then play the new game."""
        width = self.terminal.prompt_int("Board width", DEFAULT_BOARD_SIZE)
        height = self.terminal.prompt_int("Board height", DEFAULT_BOARD_SIZE)
        if width < 1 or height < 1:
            self.terminal.write("Width and height must both be at least 1.")
            return None

        max_bombs = width * height
        while True:
            bombs = self.terminal.prompt_int(
                f"Bomb count (1-{max_bombs})", default_bomb_count(width, height)
            )
            if bomb_count_is_valid(bombs, width, height):
                break
            self.terminal.write(f"Bombs must be between 1 and {max_bombs}.")

        try:
            game = self.session.client.new_game(width, height, bombs)
        except ApiError as e:
            raise FatalError(f"Failed to start game: {e}") from e

        logger.info("Started game %d (%dx%d, %d bombs)", game.id, width, height, bombs)
        self.terminal.write()
        self.terminal.write(
            f"Started game #{game.id} ({width}x{height}, {bombs} bombs). "
            "Enter moves as 'x y'."
        )
        return self.move_loop.play(game.id, game.board)

    def resume_game(self) -> GameSession | None:
        games = self.catalog.list_unfinished()
        if not games:
            self.terminal.write("No unfinished games found.")
            return None

        self.catalog.show(games)
        game = self.catalog.choose(games)

        self.terminal.write()
        self.terminal.write(f"Resumed game #{game.id}. Enter moves as 'x y'.")
        return self.move_loop.play(game.id, game.board)

    def show_stats(self) -> None:
        try:
            stats = self.session.client.get_user_stats()
        except ApiError as e:
            raise FatalError(f"Failed to load user stats: {e}") from e
        self.session.stats = stats
        print_user_stats(self.terminal, stats)
