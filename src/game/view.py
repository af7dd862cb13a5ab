"""
Text rendering for Lights Out.

Draws the sign, the grid of lights and either the instructions or the
win banner, depending on the game state.
"""
from typing import List

from .board import Board


TITLE = "Lights Out"

INSTRUCTIONS = (
    "Instructions:\n"
    "Select a box to switch it.\n"
    "Surrounding boxes will also switch.\n"
    "Switch all the boxes off to win!"
)

WIN_MESSAGE = "You Win!"
PLAY_AGAIN = "Play Again!"


def render_board(board: Board, show_coordinates: bool = False) -> str:
    """
    Render the grid as rows of cell symbols.

    Args:
        board: Board to draw.
        show_coordinates: Prefix rows and columns with their indices.

    Returns:
        Multi-line string, one line per row.
    """
    lines: List[str] = []
    if show_coordinates:
        width = len(str(board.config.n_rows - 1))
        header = " ".join(str(col % 10) for col in range(board.config.n_cols))
        lines.append(" " * (width + 1) + header)

    for row in board.cells():
        row_str = " ".join(cell.symbol for cell in row)
        if show_coordinates:
            width = len(str(board.config.n_rows - 1))
            row_str = f"{row[0].row:>{width}} {row_str}"
        lines.append(row_str)

    return "\n".join(lines)


def render_screen(board: Board) -> str:
    """
    Render the full game screen.

    While playing this shows the grid and the instructions. Once won the
    grid is hidden and only the win banner and restart prompt remain.
    """
    parts = [TITLE, ""]
    if board.is_won:
        parts.extend([WIN_MESSAGE, PLAY_AGAIN])
    else:
        parts.extend([render_board(board, show_coordinates=True), "", INSTRUCTIONS])
    return "\n".join(parts)
