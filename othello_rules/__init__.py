"""Board representation and move-legality rules for 8x8 Othello"""

__version__ = "0.1.0"
