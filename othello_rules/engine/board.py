from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterator, Sequence, Tuple, Union

from ..errors import IndexOutOfBounds, InvariantViolation
from .discs import Disc, Player
from .neighbours import Neighbours
from .position import MAX_VALID_IDX, Position, PositionLike
from .strider import Strider

logger = logging.getLogger(__name__)

FULL = 0xFFFFFFFFFFFFFFFF

# Starting layout: (3,4) and (4,3) for player 1, (3,3) and (4,4) for player 2
START_P1 = (1 << (3 * 8 + 4)) | (1 << (4 * 8 + 3))
START_P2 = (1 << (3 * 8 + 3)) | (1 << (4 * 8 + 4))

Grid = Union[Sequence[Disc], Sequence[Sequence[Disc]]]


@dataclass
class Board:
    """Full 8x8 state as two bit-planes, one bit per cell per player.

    Bit `Position.idx` of `p1` (resp. `p2`) is set when player 1 (resp. 2)
    occupies that cell. A cell is never set in both planes.
    """

    p1: int = 0
    p2: int = 0

    @staticmethod
    def empty() -> "Board":
        return Board(0, 0)

    @staticmethod
    def default() -> "Board":
        return Board(START_P1, START_P2)

    @staticmethod
    def from_grid(cells: Grid) -> "Board":
        """Build a board from 64 discs in row-major order or an 8x8 grid."""
        flat = _flatten(cells)
        board = Board.empty()
        for idx, disc in enumerate(flat):
            if not isinstance(disc, Disc):
                raise ValueError(f"cell {idx}: expected Disc, got {disc!r}")
            board.set_piece(Position(idx), disc)
        return board

    def copy(self) -> "Board":
        return replace(self)

    def __getitem__(self, pos: PositionLike) -> Disc:
        return self.get_piece(pos)

    def __setitem__(self, pos: PositionLike, disc: Disc) -> None:
        self.set_piece(pos, disc)

    def get_piece(self, pos: PositionLike) -> Disc:
        idx = _checked_idx(pos)
        p1 = (self.p1 >> idx) & 1
        p2 = (self.p2 >> idx) & 1
        if p1 and p2:
            raise InvariantViolation(f"cell {Position(idx)!r} is owned by both players")
        if p1:
            return Disc.PLAYER1
        if p2:
            return Disc.PLAYER2
        return Disc.EMPTY

    def set_piece(self, pos: PositionLike, disc: Disc) -> None:
        idx = _checked_idx(pos)
        bit = 1 << idx
        clear = ~bit & FULL
        if disc is Disc.EMPTY:
            self.p1 &= clear
            self.p2 &= clear
        elif disc is Disc.PLAYER1:
            self.p1 |= bit
            self.p2 &= clear
        elif disc is Disc.PLAYER2:
            self.p2 |= bit
            self.p1 &= clear
        else:
            raise ValueError(f"expected Disc, got {disc!r}")

    def __iter__(self) -> Iterator[Disc]:
        for idx in range(MAX_VALID_IDX + 1):
            yield self.get_piece(Position(idx))

    def cells(self) -> Iterator[Tuple[Position, Disc]]:
        for idx in range(MAX_VALID_IDX + 1):
            pos = Position(idx)
            yield pos, self.get_piece(pos)

    def rows(self) -> list[list[Disc]]:
        discs = list(self)
        return [discs[r * 8:(r + 1) * 8] for r in range(8)]

    def neighbours(self, pos: PositionLike) -> Neighbours:
        return Neighbours(self, Position.of(pos))

    def strider(self, center: PositionLike, neighbour: PositionLike) -> Strider:
        return Strider.through(self, Position.of(center), Position.of(neighbour))

    def is_legal_move(self, pos: PositionLike, player: Player) -> bool:
        """Sandwich rule: placing at `pos` must bracket at least one straight
        run of opponent discs with one of `player`'s own discs.
        """
        pos = Position.of(pos)
        if self.get_piece(pos) is not Disc.EMPTY:
            return False
        opponent = player.opponent()
        for direction, _, disc in self.neighbours(pos).with_directions():
            if not opponent.owns(disc):
                continue
            for _, cell in Strider(self, pos, direction):
                if cell is Disc.EMPTY:
                    break
                if player.owns(cell):
                    logger.debug("%r legal for %s via %s", pos, player.name, direction.name)
                    return True
        return False


def _checked_idx(pos: PositionLike) -> int:
    idx = Position.of(pos).idx
    if not (0 <= idx <= MAX_VALID_IDX):
        raise IndexOutOfBounds(f"Index out of bounds: {idx}")
    return idx


def _flatten(cells: Grid) -> list:
    rows = list(cells)
    if len(rows) == 64:
        return rows
    if len(rows) == 8 and all(not isinstance(r, Disc) for r in rows):
        flat = []
        for r, row in enumerate(rows):
            try:
                row = list(row)
            except TypeError:
                raise ValueError(f"row {r}: expected 8 cells, got {row!r}") from None
            if len(row) != 8:
                raise ValueError(f"row {r}: expected 8 cells, got {len(row)}")
            flat.extend(row)
        return flat
    raise ValueError(f"expected 64 cells or an 8x8 grid, got {len(rows)} entries")
