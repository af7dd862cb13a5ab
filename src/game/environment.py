"""
Gymnasium environment wrapper for Lights Out.

Provides a standard RL interface for agents to play the board.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .view import render_board


WIN_REWARD = 10.0
TOGGLE_REWARD = -0.1
INVALID_REWARD = -1.0


# ============================================================================
# Lights Out Environment
# ============================================================================

class LightsOutEnv(gym.Env):
    """
    Gymnasium environment for Lights Out.

    Observation:
        2D int8 array where 1 = lit and 0 = off.

    Actions:
        Discrete action space of size n_rows * n_cols.
        Action i toggles around cell (i // n_cols, i % n_cols).

    Rewards:
        - +10 for the toggle that turns the last light off
        - -0.1 for any other toggle
        - -1 for a refused action (board already won)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Lights Out environment.

        Args:
            config: Board configuration (default: 5x5, 25% lit).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0,
            high=1,
            shape=(self.config.n_rows, self.config.n_cols),
            dtype=np.int8,
        )

        # One action per cell
        self.action_space = spaces.Discrete(self.config.total_cells)

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: ``{"grid": rows}`` starts from an explicit grid of the
                configured shape instead of a random one.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.board.seed(seed)

        grid = (options or {}).get("grid")
        if grid is not None:
            self.board = self._board_from_grid(grid)
        else:
            self.board.reset()

        return self.board.get_observation(), self._get_info()

    def _board_from_grid(self, grid) -> Board:
        board = Board.from_grid(
            grid, self.config.chance_light_starts_on, rng=self.board.rng
        )
        if board.config != self.config:
            raise ValueError(
                f"Grid shape ({board.config.n_rows}, {board.config.n_cols}) "
                f"does not match ({self.config.n_rows}, {self.config.n_cols})"
            )
        return board

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to toggle around (row * n_cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        reward = self._calculate_reward(row, col)

        observation = self.board.get_observation()
        terminated = self.board.is_won
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = int(action) // self.config.n_cols
        col = int(action) % self.config.n_cols
        return row, col

    def _calculate_reward(self, row: int, col: int) -> float:
        """Apply the toggle and score its result."""
        if not self.board.toggle_around(row, col):
            return INVALID_REWARD
        if self.board.is_won:
            return WIN_REWARD
        return TOGGLE_REWARD

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "lit": self.board.lit_count,
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.board.get_valid_actions():
            mask[row * self.config.n_cols + col] = True
        return mask
