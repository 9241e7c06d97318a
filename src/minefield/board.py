"""
Board module for the minefield engine.

Implements mine placement, cell revealing with flood fill, flagging and
the win/lose bookkeeping of a single game.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import (
    Deque, FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple
)

import numpy as np

from .cell import Cell, CellState, CellView, Content
from .errors import InvalidDimensionsError, OutOfBoundsError
from .render import render_board

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

MINE_PERCENT = 15


class Outcome(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


def mine_budget(width: int, height: int) -> int:
    """Number of mines for a board: 15% of the cells, rounded down."""
    return width * height * MINE_PERCENT // 100


@dataclass(frozen=True)
class BoardConfig:
    """
    Dimensions of a board.

    The mine count is derived from the size, see ``mine_budget``.

    Attributes:
        width: Number of columns.
        height: Number of rows.
    """

    width: int = 16
    height: int = 16

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensionsError(
                f"Board dimensions must be positive, got "
                f"{self.width}x{self.height}"
            )

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def num_mines(self) -> int:
        return mine_budget(self.width, self.height)


# Preset sizes
BEGINNER = BoardConfig(9, 9)
INTERMEDIATE = BoardConfig(16, 16)
EXPERT = BoardConfig(30, 16)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells, the mine and flag sets, the count of clear
    cells still to reveal and the game outcome. Coordinates are ``(x, y)``
    with ``x`` the column and ``y`` the row.

    Pass ``mines`` to lay out a fixed field instead of a random one; see
    also ``Board.generate`` and ``Board.from_mines``.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )
    mines: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(init=False, default_factory=list, repr=False)
    _mines: Set[Position] = field(init=False, default_factory=set, repr=False)
    _flags: Set[Position] = field(init=False, default_factory=set)
    _remaining_clear: int = field(init=False, default=0)
    _outcome: Outcome = field(init=False, default=Outcome.IN_PROGRESS)

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Lay out the field after dataclass creation."""
        if mines is None:
            self._generate()
        else:
            self._layout(set(mines))

    @classmethod
    def generate(
        cls, width: int, height: int, rng: Optional[random.Random] = None
    ) -> "Board":
        """Create a board with randomly placed mines."""
        config = BoardConfig(width, height)
        if rng is None:
            return cls(config)
        return cls(config, rng)

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """Create a board with mines at exactly the given positions."""
        return cls(BoardConfig(width, height), mines=mines)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _generate(self) -> None:
        """Place ``num_mines`` mines by rejection sampling."""
        width, height = self.config.width, self.config.height
        budget = self.config.num_mines
        counts = [[0] * width for _ in range(height)]
        mines: Set[Position] = set()
        while len(mines) < budget:
            position = (self.rng.randrange(width), self.rng.randrange(height))
            if position in mines:
                continue
            mines.add(position)
            for neighbor in self._get_neighbors(*position):
                if neighbor not in mines:
                    counts[neighbor[1]][neighbor[0]] += 1
        self._build_grid(mines, counts)
        logger.debug(
            "Generated %dx%d board with %d mines", width, height, budget
        )

    def _layout(self, mines: Set[Position]) -> None:
        """Lay out a fixed set of mines."""
        for x, y in mines:
            self._check_bounds(x, y)
        if len(mines) >= self.config.total_cells:
            raise ValueError("A board needs at least one clear cell")
        counts = [[0] * self.config.width for _ in range(self.config.height)]
        for x, y in mines:
            for neighbor_x, neighbor_y in self._get_neighbors(x, y):
                counts[neighbor_y][neighbor_x] += 1
        self._build_grid(mines, counts)

    def _build_grid(self, mines: Set[Position], counts: List[List[int]]) -> None:
        """Freeze mine positions and neighbour counts into cells."""
        self._grid = [
            [
                Cell(Content.MINE if (x, y) in mines else Content.clear(count))
                for x, count in enumerate(row)
            ]
            for y, row in enumerate(counts)
        ]
        self._mines = mines
        self._flags = set()
        self._remaining_clear = self.config.total_cells - len(mines)
        self._outcome = Outcome.IN_PROGRESS

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighbouring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the clamped 8-neighbourhood.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_bounds(self, x: int, y: int) -> None:
        if not self._is_valid_position(x, y):
            raise OutOfBoundsError(x, y, self.config.width, self.config.height)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> bool:
        """
        Reveal the cell at the given position.

        A mine loses the game and shows every mine. A clear cell with no
        neighbouring mines flood-reveals its region.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            True if the board changed, False if the move was a no-op
            (flagged or revealed cell, or game already over).

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._check_bounds(x, y)
        if self._outcome != Outcome.IN_PROGRESS:
            return False
        cell = self._grid[y][x]
        if not cell.is_hidden:
            return False

        if cell.is_mine:
            self._lose()
        elif cell.adjacent_mines > 0:
            cell.reveal()
            self._remaining_clear -= 1
            self._update_outcome()
        else:
            self._flood_reveal(x, y)
        return True

    def _lose(self) -> None:
        """Show every mine, flagged or not, and end the game."""
        for x, y in self._mines:
            self._grid[y][x].expose()
        self._flags -= self._mines
        self._outcome = Outcome.LOST
        logger.info("Game lost with %d cells left", self._remaining_clear)

    def _flood_reveal(self, x: int, y: int) -> None:
        """Breadth-first reveal of the zero region around (x, y)."""
        queue: Deque[Position] = deque([(x, y)])
        enqueued = {(x, y)}
        while queue:
            current_x, current_y = queue.popleft()
            cell = self._grid[current_y][current_x]
            cell.reveal()
            self._remaining_clear -= 1
            if cell.adjacent_mines > 0:
                continue
            for neighbor in self._get_neighbors(current_x, current_y):
                if neighbor in enqueued:
                    continue
                neighbor_cell = self._grid[neighbor[1]][neighbor[0]]
                if neighbor_cell.is_hidden and not neighbor_cell.is_mine:
                    enqueued.add(neighbor)
                    queue.append(neighbor)
        self._update_outcome()

    def _update_outcome(self) -> None:
        """Win once every clear cell is revealed."""
        if self._remaining_clear == 0:
            self._outcome = Outcome.WON
            logger.info("Game won")

    def flag(self, x: int, y: int) -> bool:
        """
        Flag a hidden cell.

        Returns:
            True if the flag was placed, False otherwise.

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._check_bounds(x, y)
        if self._outcome != Outcome.IN_PROGRESS:
            return False
        if not self._grid[y][x].flag():
            return False
        self._flags.add((x, y))
        return True

    def unflag(self, x: int, y: int) -> bool:
        """
        Remove a flag, returning the cell to hidden.

        Returns:
            True if a flag was removed, False otherwise.

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._check_bounds(x, y)
        if self._outcome != Outcome.IN_PROGRESS:
            return False
        if not self._grid[y][x].unflag():
            return False
        self._flags.discard((x, y))
        return True

    def toggle_flag(self, x: int, y: int) -> bool:
        """Flag a hidden cell or unflag a flagged one."""
        self._check_bounds(x, y)
        if self._grid[y][x].is_flagged:
            return self.unflag(x, y)
        return self.flag(x, y)

    def reset(self) -> None:
        """Lay out a fresh random field of the same size for a new game."""
        self._generate()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def outcome(self) -> Outcome:
        """Get current outcome."""
        return self._outcome

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._outcome == Outcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._outcome == Outcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._outcome == Outcome.LOST

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return len(self._mines)

    @property
    def remaining_clear(self) -> int:
        """Clear cells not yet revealed."""
        return self._remaining_clear

    @property
    def flags(self) -> FrozenSet[Position]:
        return frozenset(self._flags)

    @property
    def flags_left(self) -> int:
        """Mines minus flags placed, as shown on a mine counter."""
        return len(self._mines) - len(self._flags)

    @property
    def mine_positions(self) -> FrozenSet[Position]:
        """
        Positions of every mine.

        For debugging and tests; renderers should go through ``view``.
        """
        return frozenset(self._mines)

    def view(self, x: int, y: int) -> CellView:
        """
        Get the visible state of a cell.

        Raises:
            OutOfBoundsError: If the position is off the board.
        """
        self._check_bounds(x, y)
        return self._grid[y][x].view()

    def views(self) -> Iterator[List[CellView]]:
        """Iterate rows of cell views, top to bottom."""
        for row in self._grid:
            yield [cell.view() for cell in row]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                obs[y, x] = self._grid[y][x].to_observation()
        return obs

    def hidden_positions(self) -> List[Position]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (x, y) positions whose cell is hidden.
        """
        positions = []
        for y in range(self.config.height):
            for x in range(self.config.width):
                if self._grid[y][x].state == CellState.HIDDEN:
                    positions.append((x, y))
        return positions

    def __str__(self) -> str:
        return render_board(self)
