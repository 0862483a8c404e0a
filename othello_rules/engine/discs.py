from __future__ import annotations

from enum import Enum
from typing import Optional


class Disc(Enum):
    EMPTY = 0
    PLAYER1 = 1
    PLAYER2 = 2

    @property
    def owner(self) -> Optional["Player"]:
        if self is Disc.PLAYER1:
            return Player.PLAYER1
        if self is Disc.PLAYER2:
            return Player.PLAYER2
        return None


class Player(Enum):
    PLAYER1 = 1
    PLAYER2 = 2

    def opponent(self) -> "Player":
        return Player.PLAYER2 if self is Player.PLAYER1 else Player.PLAYER1

    @property
    def disc(self) -> Disc:
        return Disc.PLAYER1 if self is Player.PLAYER1 else Disc.PLAYER2

    def owns(self, disc: Disc) -> bool:
        """True when `disc` is this player's colour (never for EMPTY)."""
        return disc is self.disc
