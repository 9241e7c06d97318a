"""
Plain-text rendering of a board for terminals and debug output.
"""
from typing import TYPE_CHECKING

from .cell import FLAGGED_OBSERVATION, HIDDEN_OBSERVATION, MINE_OBSERVATION

if TYPE_CHECKING:
    from .board import Board


HIDDEN_CHAR = "."
FLAG_CHAR = "F"
MINE_CHAR = "*"


def render_board(board: "Board", reveal_all: bool = False) -> str:
    """
    Render the board as an ASCII grid under a state header.

    Args:
        board: Board to draw.
        reveal_all: Also draw hidden and flagged mines. Debugging only.

    Returns:
        Multi-line string, one line per row.
    """
    lines = [f"State: {board.outcome.name}"]
    obs = board.get_observation()
    mines = board.mine_positions if reveal_all else frozenset()

    for y in range(board.height):
        row_str = ""
        for x in range(board.width):
            val = obs[y, x]
            if (x, y) in mines or val == MINE_OBSERVATION:
                row_str += MINE_CHAR
            elif val == HIDDEN_OBSERVATION:
                row_str += HIDDEN_CHAR
            elif val == FLAGGED_OBSERVATION:
                row_str += FLAG_CHAR
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)

    return "\n".join(lines)
