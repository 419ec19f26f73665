"""
Board Model - Grid of cell codes as sent by the service.

A board is a list of rows, each a list of cell codes:
- " "       unrevealed cell
- "0".."8"  revealed cell with its adjacent bomb count
- anything else is shown as-is ("X" detonated bomb, "B" bomb, ...)

The board is never modified here. Decoding is presentation only.
"""

from __future__ import annotations

Board = list[list[str]]

COVERED_CELL = " "
COVERED_GLYPH = "#"
EMPTY_GLYPH = " "
CELL_WIDTH = 3
EMPTY_BOARD_LINE = "(empty board)"


def decode_cell(code: str) -> str:
    """Map a cell code to the glyph shown on screen."""
    if code == COVERED_CELL:
        return COVERED_GLYPH
    if code == "0":
        return EMPTY_GLYPH
    return code


def dimensions(board: Board) -> tuple[int, int]:
    """Return (width, height); an empty board is (0, 0)."""
    if not board:
        return 0, 0
    return len(board[0]), len(board)


def is_rectangular(board: Board) -> bool:
    """Check that every row has the width of row 0."""
    width, _ = dimensions(board)
    return all(len(row) == width for row in board)


def in_bounds(board: Board, x: int, y: int) -> bool:
    """Check (x, y) against the board; nothing is in bounds on an empty board."""
    width, height = dimensions(board)
    return 0 <= x < width and 0 <= y < height


def render_board(board: Board) -> list[str]:
    """
    Render the board as text lines.

    The first line holds zero-based column indices, each following line
    starts with its zero-based row index. Every cell is right-aligned
    to CELL_WIDTH.
    """
    if not board:
        return [EMPTY_BOARD_LINE]

    width, _ = dimensions(board)
    gutter = " " * (CELL_WIDTH + 1)
    lines = [gutter + "".join(f"{x:>{CELL_WIDTH}}" for x in range(width))]

    for y, row in enumerate(board):
        cells = "".join(f"{decode_cell(cell):>{CELL_WIDTH}}" for cell in row)
        lines.append(f"{y:>{CELL_WIDTH}} {cells}")

    return lines
