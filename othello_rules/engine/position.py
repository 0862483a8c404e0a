from __future__ import annotations

from dataclasses import dataclass
from operator import index as _as_int
from typing import Optional, Tuple, Union

from ..errors import IndexOutOfBounds

# Cells are packed as row*8 + col: the upper three bits hold the row,
# the lower three the column. (0,0) = 0 (LSB) to (7,7) = 63 (MSB).
BOARD_SIZE = 8
MAX_VALID_IDX = 0b111111  # (7, 7)


@dataclass(frozen=True, order=True)
class Position:
    """A single board cell packed into a 6-bit index.

    Build through ``Position.at`` / ``Position.of``; the raw ``Position(idx)``
    form skips validation and is only used where the index is already known
    to be in range.
    """

    idx: int

    @staticmethod
    def at(row, col) -> "Position":
        r = _coord(row)
        c = _coord(col)
        if not (0 <= r < BOARD_SIZE) or not (0 <= c < BOARD_SIZE):
            raise IndexOutOfBounds(f"Index out of bounds: ({row}, {col})")
        return Position((r << 3) | c)

    @staticmethod
    def of(value: "PositionLike") -> "Position":
        if isinstance(value, Position):
            return value
        try:
            row, col = value  # type: ignore[misc]
        except (TypeError, ValueError):
            raise TypeError(f"not a position: {value!r}") from None
        return Position.at(row, col)

    @property
    def row(self) -> int:
        return (self.idx >> 3) & 0b111

    @property
    def col(self) -> int:
        return self.idx & 0b111

    def coords(self) -> Tuple[int, int]:
        return self.row, self.col

    def offset(self, drow: int, dcol: int) -> Optional["Position"]:
        """Displace by (drow, dcol); None when that leaves the board."""
        r = self.row + drow
        c = self.col + dcol
        if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
            return Position((r << 3) | c)
        return None

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.col})"


PositionLike = Union[Position, Tuple[int, int]]


def _coord(value) -> int:
    # bools are ints in Python but never valid coordinates
    if isinstance(value, bool):
        raise TypeError(f"coordinate must be an integer, got {value!r}")
    return _as_int(value)
