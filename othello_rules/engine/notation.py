"""
Coordinate and board notation.

Cells are written as a file letter (a-h, the column) followed by a rank digit
(1-8, the row plus one): 'a1' is (0, 0), 'h8' is (7, 7). Boards are written as
eight rows of one glyph per cell, optionally framed by coordinate labels.
"""

from __future__ import annotations

from typing import Optional

from ..settings import DisplaySettings
from .board import Board
from .discs import Disc
from .position import Position

FILES = "abcdefgh"


def position_to_notation(pos: Position) -> str:
    """Convert a Position to coordinate notation (e.g., 'e4')."""
    return f"{FILES[pos.col]}{pos.row + 1}"


def notation_to_position(notation: str) -> Position:
    """Convert coordinate notation (e.g., 'e4') to a Position."""
    text = notation.strip()
    if len(text) != 2:
        raise ValueError(f"Invalid notation format: {notation}")

    file_char = text[0].lower()
    rank_char = text[1]

    if file_char not in FILES or not rank_char.isdigit():
        raise ValueError(f"Invalid notation format: {notation}")

    rank = int(rank_char) - 1
    if rank < 0 or rank > 7:
        raise ValueError(f"Invalid notation: {notation}")

    return Position.at(rank, FILES.index(file_char))


def _glyphs(display: Optional[DisplaySettings]) -> dict:
    if display is None:
        display = DisplaySettings()
    return {
        Disc.EMPTY: display.empty,
        Disc.PLAYER1: display.player1,
        Disc.PLAYER2: display.player2,
    }


def render_board(board: Board, display: Optional[DisplaySettings] = None) -> str:
    """Draw the board as text, row 0 first."""
    glyphs = _glyphs(display)
    labels = display.coordinates if display is not None else True
    lines = []
    if labels:
        lines.append("  " + " ".join(FILES))
    for r, row in enumerate(board.rows()):
        cells = " ".join(glyphs[d] for d in row)
        lines.append(f"{r + 1} {cells}" if labels else cells)
    return "\n".join(lines)


def parse_board(text: str, display: Optional[DisplaySettings] = None) -> Board:
    """Inverse of render_board; coordinate labels and spacing are ignored."""
    by_glyph = {g: d for d, g in _glyphs(display).items()}
    rows = []
    for line in text.splitlines():
        cells = line.split()
        if not cells:
            continue
        # file-label header
        if cells == list(FILES):
            continue
        # leading rank label
        if len(cells) == 9 and cells[0].isdigit():
            cells = cells[1:]
        if len(cells) == 1 and len(cells[0]) == 8:
            cells = list(cells[0])
        rows.append(cells)

    if len(rows) != 8:
        raise ValueError(f"expected 8 board rows, got {len(rows)}")
    grid = []
    for r, cells in enumerate(rows):
        if len(cells) != 8:
            raise ValueError(f"row {r + 1}: expected 8 cells, got {len(cells)}")
        try:
            grid.append([by_glyph[c] for c in cells])
        except KeyError as e:
            raise ValueError(f"row {r + 1}: unknown glyph {e.args[0]!r}") from None
    return Board.from_grid(grid)
