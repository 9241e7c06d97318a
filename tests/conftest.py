"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src and the repository root (for main.py) to path for imports
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))
sys.path.insert(0, str(ROOT))

from minefield import Board, BoardConfig, Cell, Content


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 16x16 board with a seeded layout."""
    return Board(BoardConfig(), random.Random(1234))


@pytest.fixture
def beginner_board() -> Board:
    """Create a seeded beginner board (9x9, 12 mines)."""
    return Board.generate(9, 9, random.Random(42))


@pytest.fixture
def center_mine_board() -> Board:
    """Create a 3x3 board with its only mine in the center."""
    return Board.from_mines(3, 3, [(1, 1)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a wall of mines in column 2.

    The left two columns form a zero region bordered by counted cells;
    the right two columns are only reachable by clicking them.
    """
    return Board.from_mines(5, 5, [(2, y) for y in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden clear cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(Content.MINE)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(Content.clear(3))
    cell.reveal()
    return cell
