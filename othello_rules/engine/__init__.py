"""Board representation and move legality for 8x8 Othello"""

from .board import Board
from .discs import Disc, Player
from .neighbours import Neighbours, Placement
from .position import Position
from .strider import Direction, Strider

__all__ = [
    'Board',
    'Disc',
    'Player',
    'Neighbours',
    'Placement',
    'Position',
    'Direction',
    'Strider',
]
