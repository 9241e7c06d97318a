"""
Cell module for the minefield engine.

A cell pairs a visibility state (hidden/flagged/revealed) with its
content (mine or clear with a neighbour count). Content is fixed when the
board is generated; only the visibility state ever changes.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import ClassVar, NamedTuple, Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Content
# ============================================================================

@dataclass(frozen=True)
class Content:
    """
    What a cell holds: a mine, or a clear square with a neighbour count.

    Use ``Content.MINE`` and ``Content.clear(n)`` rather than the
    constructor.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighbouring cells (0-8).
            Always 0 for a mine.
    """

    is_mine: bool = False
    adjacent_mines: int = 0

    MINE: ClassVar["Content"]

    def __post_init__(self) -> None:
        if not 0 <= self.adjacent_mines <= 8:
            raise ValueError(
                f"Adjacent mine count must be 0-8, got {self.adjacent_mines}"
            )
        if self.is_mine and self.adjacent_mines:
            raise ValueError("A mine carries no adjacent mine count")

    @classmethod
    def clear(cls, adjacent_mines: int = 0) -> "Content":
        """Clear content with the given neighbour count."""
        return cls(is_mine=False, adjacent_mines=adjacent_mines)

    def __str__(self) -> str:
        if self.is_mine:
            return "Mine"
        return f"Clear({self.adjacent_mines})"


Content.MINE = Content(is_mine=True)


class CellView(NamedTuple):
    """
    Read-only projection of a cell for presentation layers.

    ``content`` is None unless the cell is revealed, so a renderer
    working from views cannot leak mine positions.
    """

    state: CellState
    content: Optional[Content]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single square of the grid.

    Attributes:
        content: Mine or clear content, fixed at generation.
        state: Current visual state (hidden, flagged or revealed).
    """

    content: Content = Content()
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or
            flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def expose(self) -> None:
        """Reveal unconditionally, flagged or not. Used for mines on loss."""
        self.state = CellState.REVEALED

    def flag(self) -> bool:
        """Mark a hidden cell. Returns False for any other state."""
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.FLAGGED
        return True

    def unflag(self) -> bool:
        """Remove a flag. Returns False if the cell is not flagged."""
        if self.state != CellState.FLAGGED:
            return False
        self.state = CellState.HIDDEN
        return True

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self.content.is_mine

    @property
    def adjacent_mines(self) -> int:
        """Neighbour mine count of the content."""
        return self.content.adjacent_mines

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def view(self) -> CellView:
        """Project the cell, hiding content until it is revealed."""
        if self.state == CellState.REVEALED:
            return CellView(self.state, self.content)
        return CellView(self.state, None)

    def to_observation(self) -> int:
        """
        Convert cell to a single integer code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return HIDDEN_OBSERVATION
        if self.state == CellState.FLAGGED:
            return FLAGGED_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
