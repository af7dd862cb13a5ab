"""
Board module for Lights Out.

Implements the game board with random light placement, toggle
propagation to orthogonal neighbors, and win detection.
"""
import numbers
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()


# Center first, then up, down, left, right
TOGGLE_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (0, 0),
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
)


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Lights Out board.

    Attributes:
        n_rows: Number of rows.
        n_cols: Number of columns.
        chance_light_starts_on: Probability that any cell starts lit.
    """

    n_rows: int = 5
    n_cols: int = 5
    chance_light_starts_on: float = 0.25

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for dimension in (self.n_rows, self.n_cols):
            if isinstance(dimension, bool) or not isinstance(
                dimension, numbers.Integral
            ):
                raise ValueError(
                    f"Board dimensions must be integers, got {dimension!r}"
                )
        if self.n_rows < 1 or self.n_cols < 1:
            raise ValueError("Board dimensions must be positive")
        if not 0.0 <= self.chance_light_starts_on <= 1.0:
            raise ValueError(
                "Chance a light starts on must be between 0 and 1, "
                f"got {self.chance_light_starts_on}"
            )

    @property
    def total_cells(self) -> int:
        return self.n_rows * self.n_cols


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Lights Out game board.

    Owns the grid of lights and the win flag. The grid is indexed
    ``grid[row][col]`` and ``True`` means the light is on.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    _grid: List[List[bool]] = field(default_factory=list, repr=False)
    _game_state: GameState = GameState.PLAYING
    _rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._grid:
            self._init_grid()
        self._check_win_condition()

    @classmethod
    def from_grid(
        cls,
        grid: Sequence[Sequence[bool]],
        chance_light_starts_on: float = 0.25,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Create a board with an explicit starting grid.

        The configuration's dimensions are taken from the grid; the
        chance is only used if the board is later reset.

        Args:
            grid: Rows of light states.
            chance_light_starts_on: Chance used on reset.
            rng: Generator for later resets (default: a fresh one).

        Returns:
            Board holding a copy of ``grid``.
        """
        rows = [[bool(light) for light in row] for row in grid]
        if not rows or not rows[0]:
            raise ValueError("Grid must have at least one row and column")
        n_cols = len(rows[0])
        if any(len(row) != n_cols for row in rows):
            raise ValueError("Every row must have the same number of columns")

        config = BoardConfig(len(rows), n_cols, chance_light_starts_on)
        if rng is None:
            return cls(config, rows)
        return cls(config, rows, _rng=rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid with each light on at the configured chance."""
        chance = self.config.chance_light_starts_on
        self._grid = [
            [self._rng.random() < chance for _ in range(self.config.n_cols)]
            for _ in range(self.config.n_rows)
        ]

    @property
    def rng(self) -> random.Random:
        """Generator used to light the grid."""
        return self._rng

    def seed(self, seed: Optional[int] = None) -> None:
        """Reseed the generator used to light the grid."""
        self._rng.seed(seed)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_toggle_positions(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get the cell and its orthogonal neighbors that lie on the board.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples, center first.
        """
        positions = []
        for delta_row, delta_col in TOGGLE_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self._is_valid_position(new_row, new_col):
                positions.append((new_row, new_col))
        return positions

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.n_rows and 0 <= col < self.config.n_cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def toggle_around(self, row: int, col: int) -> bool:
        """
        Flip the light at the given position and its neighbors.

        Neighbors that fall off the edge of the board are skipped, so a
        corner flips 3 lights, an edge 4 and an interior cell 5.

        Args:
            row: Row index of the clicked cell.
            col: Column index of the clicked cell.

        Returns:
            True if the toggle was applied, False if the game is already
            won or the position is off the board.
        """
        if not self._can_toggle(row, col):
            return False

        for toggle_row, toggle_col in self._get_toggle_positions(row, col):
            self._flip(toggle_row, toggle_col)

        self._check_win_condition()
        return True

    def _can_toggle(self, row: int, col: int) -> bool:
        """Check if a cell can be clicked."""
        if self._game_state != GameState.PLAYING:
            return False
        return self._is_valid_position(row, col)

    def _flip(self, row: int, col: int) -> None:
        self._grid[row][col] = not self._grid[row][col]

    def _check_win_condition(self) -> None:
        """Game is won exactly when every light is off."""
        if any(any(row) for row in self._grid):
            self._game_state = GameState.PLAYING
        else:
            self._game_state = GameState.WON

    def reset(self) -> None:
        """Restart with a freshly lit grid from the same configuration."""
        self._init_grid()
        self._check_win_condition()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if every light is off."""
        return self._game_state == GameState.WON

    @property
    def grid(self) -> List[List[bool]]:
        """Copy of the current grid."""
        return [list(row) for row in self._grid]

    @property
    def lit_count(self) -> int:
        """Number of lights currently on."""
        return sum(sum(row) for row in self._grid)

    def get_cell(self, row: int, col: int) -> Optional[bool]:
        """Get light state at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def cells(self) -> List[List[Cell]]:
        """
        Get cell views for rendering.

        Each cell's click is bound to ``toggle_around`` at its position.
        """
        return [
            [
                Cell(
                    row=row,
                    col=col,
                    is_lit=self._grid[row][col],
                    on_click=lambda r=row, c=col: self.toggle_around(r, c),
                )
                for col in range(self.config.n_cols)
            ]
            for row in range(self.config.n_rows)
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D int8 array where 1 = lit and 0 = off.
        """
        return np.array(self._grid, dtype=np.int8)

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can be clicked.

        Returns:
            Every (row, col) position while playing, nothing once won.
        """
        if not self.is_playing:
            return []
        return [
            (row, col)
            for row in range(self.config.n_rows)
            for col in range(self.config.n_cols)
        ]
