"""
Exception types raised by the minefield engine.

Only malformed input is an error. Moves that make no sense in the current
game state (revealing a flagged cell, acting after the game ended) are
reported by returning False instead.
"""


class MinefieldError(Exception):
    """Base class for all engine errors."""


class OutOfBoundsError(MinefieldError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(
            f"Position ({x}, {y}) is outside the {width}x{height} board"
        )
        self.x = x
        self.y = y


class InvalidDimensionsError(MinefieldError, ValueError):
    """Board width or height is not positive."""
