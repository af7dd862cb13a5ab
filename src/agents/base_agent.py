"""
Base agent interface for Lights Out players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Lights Out agents.

    All agents must implement the select_action method to choose
    which cell to press based on the current observation.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of lights (1 = lit).
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index (row * width + col).
        """
        pass

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        row = action // self.board_width
        col = action % self.board_width
        return row, col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Every cell can be pressed while any light is on; a dark board
        accepts nothing.

        Args:
            observation: 2D array of lights.

        Returns:
            Boolean mask where True = valid action.
        """
        playing = bool(np.any(observation))
        return np.full(self.total_cells, playing, dtype=bool)

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass

