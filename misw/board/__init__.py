"""Board model - cell decoding, dimensions and text rendering."""

from .model import (
    Board,
    COVERED_CELL,
    COVERED_GLYPH,
    EMPTY_GLYPH,
    EMPTY_BOARD_LINE,
    decode_cell,
    dimensions,
    is_rectangular,
    in_bounds,
    render_board,
)

__all__ = [
    "Board",
    "COVERED_CELL",
    "COVERED_GLYPH",
    "EMPTY_GLYPH",
    "EMPTY_BOARD_LINE",
    "decode_cell",
    "dimensions",
    "is_rectangular",
    "in_bounds",
    "render_board",
]
