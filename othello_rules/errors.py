"""Exception types raised by the rules engine and its tools"""

from __future__ import annotations


class OthelloRulesError(Exception):
    """Base class for all othello_rules errors"""


class IndexOutOfBounds(OthelloRulesError, IndexError):
    """A coordinate or packed cell index fell outside the 8x8 board"""


class InvariantViolation(OthelloRulesError, RuntimeError):
    """Internal state is corrupt (e.g. a cell owned by both players)"""


class ConfigError(OthelloRulesError):
    """A configuration file could not be parsed or validated"""
