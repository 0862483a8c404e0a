from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Iterator, Tuple

from .discs import Disc
from .position import Position
from .strider import Direction

if TYPE_CHECKING:
    from .board import Board


class Placement(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    TOP_EDGE = "top_edge"
    RIGHT_EDGE = "right_edge"
    BOTTOM_EDGE = "bottom_edge"
    LEFT_EDGE = "left_edge"
    INTERIOR = "interior"

    @staticmethod
    def of(pos: Position) -> "Placement":
        top, bottom = pos.row == 0, pos.row == 7
        left, right = pos.col == 0, pos.col == 7
        if top and left:
            return Placement.TOP_LEFT
        if top and right:
            return Placement.TOP_RIGHT
        if bottom and left:
            return Placement.BOTTOM_LEFT
        if bottom and right:
            return Placement.BOTTOM_RIGHT
        if top:
            return Placement.TOP_EDGE
        if right:
            return Placement.RIGHT_EDGE
        if bottom:
            return Placement.BOTTOM_EDGE
        if left:
            return Placement.LEFT_EDGE
        return Placement.INTERIOR


_D = Direction

# Visiting order per placement; every entry points into the board.
OFFSETS = {
    Placement.TOP_LEFT: (_D.RIGHT, _D.DOWN_RIGHT, _D.DOWN),
    Placement.TOP_RIGHT: (_D.DOWN, _D.DOWN_LEFT, _D.LEFT),
    Placement.BOTTOM_LEFT: (_D.UP, _D.UP_RIGHT, _D.RIGHT),
    Placement.BOTTOM_RIGHT: (_D.UP, _D.LEFT, _D.UP_LEFT),
    Placement.TOP_EDGE: (_D.RIGHT, _D.DOWN_RIGHT, _D.DOWN, _D.DOWN_LEFT, _D.LEFT),
    Placement.RIGHT_EDGE: (_D.UP, _D.DOWN, _D.DOWN_LEFT, _D.LEFT, _D.UP_LEFT),
    Placement.BOTTOM_EDGE: (_D.UP, _D.UP_RIGHT, _D.RIGHT, _D.LEFT, _D.UP_LEFT),
    Placement.LEFT_EDGE: (_D.UP, _D.UP_RIGHT, _D.RIGHT, _D.DOWN_RIGHT, _D.DOWN),
    Placement.INTERIOR: (
        _D.UP,
        _D.UP_RIGHT,
        _D.RIGHT,
        _D.DOWN_RIGHT,
        _D.DOWN,
        _D.DOWN_LEFT,
        _D.LEFT,
        _D.UP_LEFT,
    ),
}


class Neighbours:
    """Single-pass enumerator of the cells adjacent to `pos`.

    The state is just the placement of `pos` (corner, edge or interior) and
    how far through that placement's offset table we are. Corners yield 3
    cells, edges 5, interior cells 8.
    """

    def __init__(self, board: "Board", pos: Position) -> None:
        self.board = board
        self.pos = pos
        self.placement = Placement.of(pos)
        self.count = 0

    def __iter__(self) -> Iterator[Tuple[Position, Disc]]:
        return self

    def __next__(self) -> Tuple[Position, Disc]:
        _, cell, disc = self._step()
        return cell, disc

    def with_directions(self) -> Iterator[Tuple[Direction, Position, Disc]]:
        """Like iterating, but also yields the direction from `pos` to each cell."""
        while True:
            try:
                yield self._step()
            except StopIteration:
                return

    def _step(self) -> Tuple[Direction, Position, Disc]:
        table = OFFSETS[self.placement]
        if self.count >= len(table):
            raise StopIteration
        direction = table[self.count]
        self.count += 1
        cell = Position.at(self.pos.row + direction.drow, self.pos.col + direction.dcol)
        return direction, cell, self.board[cell]

    def __len__(self) -> int:
        return len(OFFSETS[self.placement]) - self.count

    def __repr__(self) -> str:
        return f"Neighbours(pos={self.pos!r}, placement={self.placement.name}, count={self.count})"
