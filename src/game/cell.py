"""
Cell module for Lights Out.

A cell is a read-only view of one grid position handed to whatever
renders the board. It knows whether its light is on and how to forward
a click back to the board.
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Callable


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    ON = auto()
    OFF = auto()


LIT_SYMBOL = "O"
UNLIT_SYMBOL = "."


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell as seen by the presentation layer.

    Attributes:
        row: Row index on the board.
        col: Column index on the board.
        is_lit: Whether the light is on.
        on_click: Callback that toggles this cell and its neighbors.
    """

    row: int
    col: int
    is_lit: bool
    on_click: Callable[[], bool] = field(
        default=lambda: False, repr=False, compare=False
    )

    def click(self) -> bool:
        """
        Forward a click to the board.

        Returns:
            True if the board applied the toggle.
        """
        return self.on_click()

    @property
    def state(self) -> CellState:
        """Get visual state of the cell."""
        return CellState.ON if self.is_lit else CellState.OFF

    @property
    def symbol(self) -> str:
        """Text glyph for this cell."""
        return LIT_SYMBOL if self.is_lit else UNLIT_SYMBOL

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            1 if lit, 0 otherwise.
        """
        return 1 if self.is_lit else 0
