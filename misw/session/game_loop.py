"""
Game Loop - The per-game move state machine.

The loop:
1. Render the current board
2. Read a move ("x y") or "q" to go back to the menu
3. Parse and bounds-check locally; bad input never reaches the service
4. Submit the move
5. Replace the board with the snapshot from the response
6. Stop when the response carries a result (win or loss)

A failed submission leaves the board untouched and asks for another move.
Quitting abandons the game locally; the service keeps it as unfinished.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import logging

from ..api import ApiClient, ApiError
from ..board import Board, dimensions, in_bounds, render_board
from ..terminal import Terminal, parse_int

logger = logging.getLogger(__name__)

QUIT_SENTINEL = "q"


class LoopState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Accepting moves
    TERMINAL = "terminal"  # Won or lost
    ABANDONED = "abandoned"  # Player went back to the menu


class MoveInputError(ValueError):
    """A move line that can't be turned into in-range coordinates."""


@dataclass
class GameSession:
    """
    One game being played.

    The board is always the latest snapshot from the service and is
    replaced, never patched.
    """
    game_id: int
    board: Board
    state: LoopState = LoopState.ACTIVE
    outcome: bool | None = None
    moves_submitted: int = 0

    @property
    def is_active(self) -> bool:
        return self.state == LoopState.ACTIVE

    @property
    def won(self) -> bool:
        return self.outcome is True

    def apply_snapshot(self, board: Board, outcome: bool | None) -> None:
        self.board = board
        self.moves_submitted += 1
        if outcome is not None:
            self.outcome = outcome
            self.state = LoopState.TERMINAL


def is_quit(line: str) -> bool:
    return line.strip().lower() == QUIT_SENTINEL


def parse_move(line: str) -> tuple[int, int]:
    """Parse "x y" into integers. Anything else raises MoveInputError."""
    tokens = line.split()
    if len(tokens) != 2:
        raise MoveInputError("Enter a move as two numbers: x y")
    try:
        x = parse_int(tokens[0])
    except ValueError:
        raise MoveInputError("Could not read x coordinate.")
    try:
        y = parse_int(tokens[1])
    except ValueError:
        raise MoveInputError("Could not read y coordinate.")
    return x, y


def validate_move(board: Board, x: int, y: int) -> None:
    """Reject moves outside the current board, or on an empty one."""
    if not board:
        raise MoveInputError("Board is empty; nothing to play.")
    if not in_bounds(board, x, y):
        width, height = dimensions(board)
        raise MoveInputError(
            f"Coordinates must be within 0..{width} for x and 0..{height} for y."
        )


class MoveLoop:
    """
    Drives a single game until it ends or the player quits.

    Usage:
        loop = MoveLoop(client, terminal)
        session = loop.play(game_id, board)
        if session.state == LoopState.TERMINAL:
            print("won" if session.won else "lost")
    """

    def __init__(self, client: ApiClient, terminal: Terminal):
        self.client = client
        self.terminal = terminal

    def play(self, game_id: int, board: Board) -> GameSession:
        session = GameSession(game_id=game_id, board=board)

        while session.is_active:
            if not session.board:
                # Nothing to aim at; leave without touching the service.
                self._render(session.board)
                self.terminal.write("Board is empty; nothing to play.")
                session.state = LoopState.ABANDONED
                break

            self.terminal.write()
            self._render(session.board)
            line = self.terminal.read_line("Move (x y) or 'q' to return to menu")
            if is_quit(line):
                self.terminal.write("Returning to menu.")
                session.state = LoopState.ABANDONED
                break

            try:
                x, y = parse_move(line)
                validate_move(session.board, x, y)
            except MoveInputError as e:
                self.terminal.write(str(e))
                continue

            self.step(session, x, y)

        return session

    def step(self, session: GameSession, x: int, y: int) -> bool:
        """
        Submit one validated move and apply the response.

        Returns False if the submission failed; the board is unchanged.
        """
        try:
            response = self.client.make_move(session.game_id, x, y)
        except ApiError as e:
            logger.warning("Move (%d, %d) in game %d failed: %s", x, y, session.game_id, e)
            self.terminal.write(f"Move failed: {e}")
            return False

        session.apply_snapshot(response.board, response.result)

        if response.is_final:
            self._render(session.board)
            if session.won:
                self.terminal.write("You win! Board cleared.")
            else:
                self.terminal.write("Boom! You hit a bomb.")
            self.terminal.write(f"Game #{session.game_id} finished.")
            self.terminal.write()
        return True

    def _render(self, board: Board) -> None:
        for line in render_board(board):
            self.terminal.write(line)
