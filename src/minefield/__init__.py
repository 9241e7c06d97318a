"""
Minesweeper board engine.

Provides mine field generation, cell state tracking and the reveal/flag
rules that drive a game to a win or a loss.
"""
import random
from typing import Optional

from .cell import Cell, CellState, CellView, Content
from .board import (
    Board,
    BoardConfig,
    Outcome,
    Position,
    mine_budget,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .errors import InvalidDimensionsError, MinefieldError, OutOfBoundsError
from .render import render_board


def new_board(
    width: int, height: int, rng: Optional[random.Random] = None
) -> Board:
    """Start a new game on a randomly mined width x height board."""
    return Board.generate(width, height, rng)


__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Content",
    "Board",
    "BoardConfig",
    "Outcome",
    "Position",
    "mine_budget",
    "new_board",
    "render_board",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "MinefieldError",
    "OutOfBoundsError",
    "InvalidDimensionsError",
]
