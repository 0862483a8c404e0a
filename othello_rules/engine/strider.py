from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Tuple

from ..errors import InvariantViolation
from .discs import Disc
from .position import Position

if TYPE_CHECKING:
    from .board import Board


class Direction(Enum):
    """Compass directions as (drow, dcol); row 0 is the top of the board."""

    UP = (-1, 0)
    UP_RIGHT = (-1, 1)
    RIGHT = (0, 1)
    DOWN_RIGHT = (1, 1)
    DOWN = (1, 0)
    DOWN_LEFT = (1, -1)
    LEFT = (0, -1)
    UP_LEFT = (-1, -1)

    @property
    def drow(self) -> int:
        return self.value[0]

    @property
    def dcol(self) -> int:
        return self.value[1]

    @property
    def idx_delta(self) -> int:
        """Change of the packed index for one step in this direction."""
        return self.drow * 8 + self.dcol

    @staticmethod
    def between(center: Position, neighbour: Position) -> "Direction":
        """Direction pointing from `center` to the adjacent cell `neighbour`."""
        key = (neighbour.row - center.row, neighbour.col - center.col)
        try:
            return Direction(key)
        except ValueError:
            raise InvariantViolation(
                f"{neighbour!r} is not adjacent to {center!r}"
            ) from None

    @staticmethod
    def from_delta(delta: int) -> "Direction":
        """Map ``center.idx - neighbour.idx`` to a direction (8 => UP, -1 => RIGHT).

        The packed delta alone cannot tell a row wrap from a real step, so
        prefer ``between`` when both cells are at hand.
        """
        try:
            return _BY_CENTER_MINUS_NEIGHBOUR[delta]
        except KeyError:
            raise InvariantViolation(f"no direction for index delta {delta}") from None


_BY_CENTER_MINUS_NEIGHBOUR = {-d.idx_delta: d for d in Direction}


class Strider:
    """Walks the board in a straight line away from `pos`, edge-bounded.

    Yields (Position, Disc) for every cell after `pos` in `direction` and
    stops at the board edge; it never wraps into the next row.
    """

    def __init__(self, board: "Board", pos: Position, direction: Direction) -> None:
        self.board = board
        self.pos = pos
        self.direction = direction

    @classmethod
    def through(cls, board: "Board", center: Position, neighbour: Position) -> "Strider":
        return cls(board, center, Direction.between(center, neighbour))

    def __iter__(self) -> Iterator[Tuple[Position, Disc]]:
        return self

    def __next__(self) -> Tuple[Position, Disc]:
        nxt = self.pos.offset(self.direction.drow, self.direction.dcol)
        if nxt is None:
            raise StopIteration
        self.pos = nxt
        return nxt, self.board[nxt]

    def __repr__(self) -> str:
        return f"Strider(pos={self.pos!r}, direction={self.direction.name})"
