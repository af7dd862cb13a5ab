"""
Solver agent for Lights Out.

Pressing a cell adds a fixed pattern of toggles to the board modulo 2,
and presses commute, so clearing the board is the linear system
``A x = b`` over GF(2): ``A`` maps presses to toggled cells and ``b`` is
the flattened grid of lit cells. The agent solves it once per episode
and plays the presses in order.
"""
import itertools
from collections import deque
from typing import Deque, List, Optional, Tuple

import numpy as np

from .base_agent import BaseAgent
from .random_agent import RandomAgent


# Null spaces up to this dimension are searched for the fewest presses
MAX_NULLITY_SEARCH = 12


# ============================================================================
# GF(2) Linear Algebra
# ============================================================================

def build_toggle_matrix(n_rows: int, n_cols: int) -> np.ndarray:
    """
    Build the press-to-toggle matrix for a board.

    Column j marks the cells flipped by pressing cell j; cells are
    numbered row-major.

    Returns:
        (n_rows * n_cols) square uint8 matrix.
    """
    total = n_rows * n_cols
    matrix = np.zeros((total, total), dtype=np.uint8)
    for row in range(n_rows):
        for col in range(n_cols):
            press = row * n_cols + col
            for delta_row, delta_col in ((0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)):
                new_row = row + delta_row
                new_col = col + delta_col
                if 0 <= new_row < n_rows and 0 <= new_col < n_cols:
                    matrix[new_row * n_cols + new_col, press] = 1
    return matrix


def _gf2_rref(
    matrix: np.ndarray, target: np.ndarray
) -> Tuple[np.ndarray, List[int]]:
    """Reduce ``[matrix | target]`` to row echelon form over GF(2)."""
    augmented = np.concatenate(
        [matrix.astype(np.uint8) % 2, target.astype(np.uint8).reshape(-1, 1) % 2],
        axis=1,
    )
    n_eqs, n_vars = matrix.shape
    pivot_cols: List[int] = []
    pivot_row = 0

    for col in range(n_vars):
        candidates = np.nonzero(augmented[pivot_row:, col])[0]
        if len(candidates) == 0:
            continue
        swap = pivot_row + candidates[0]
        if swap != pivot_row:
            augmented[[pivot_row, swap]] = augmented[[swap, pivot_row]]

        # Gauss-Jordan: clear the column everywhere else
        for other in np.nonzero(augmented[:, col])[0]:
            if other != pivot_row:
                augmented[other] ^= augmented[pivot_row]

        pivot_cols.append(col)
        pivot_row += 1
        if pivot_row == n_eqs:
            break

    return augmented, pivot_cols


def gf2_solve(
    matrix: np.ndarray, target: np.ndarray
) -> Tuple[Optional[np.ndarray], List[np.ndarray]]:
    """
    Solve ``matrix @ x == target`` over GF(2).

    Returns:
        Tuple of (one solution or None if inconsistent, null space basis).
    """
    n_vars = matrix.shape[1]
    reduced, pivot_cols = _gf2_rref(matrix, target)
    lhs = reduced[:, :n_vars]
    rhs = reduced[:, n_vars]

    if np.any((lhs.sum(axis=1) == 0) & (rhs == 1)):
        return None, []

    # Free variables set to 0; each pivot row then reads its value directly
    solution = np.zeros(n_vars, dtype=np.uint8)
    for pivot_index, pivot_col in enumerate(pivot_cols):
        solution[pivot_col] = rhs[pivot_index]

    basis = []
    pivots = set(pivot_cols)
    for free_col in range(n_vars):
        if free_col in pivots:
            continue
        vector = np.zeros(n_vars, dtype=np.uint8)
        vector[free_col] = 1
        for pivot_index, pivot_col in enumerate(pivot_cols):
            vector[pivot_col] = lhs[pivot_index, free_col]
        basis.append(vector)

    return solution, basis


def solve_presses(lights: np.ndarray) -> Optional[np.ndarray]:
    """
    Find the presses that turn every light off.

    Args:
        lights: 2D array, nonzero = lit.

    Returns:
        2D uint8 array of the same shape with 1 where a cell must be
        pressed, or None if the board cannot be cleared.
    """
    n_rows, n_cols = lights.shape
    matrix = build_toggle_matrix(n_rows, n_cols)
    target = (np.asarray(lights).reshape(-1) != 0).astype(np.uint8)

    solution, basis = gf2_solve(matrix, target)
    if solution is None:
        return None

    if len(basis) <= MAX_NULLITY_SEARCH:
        solution = _fewest_presses(solution, basis)
    return solution.reshape(n_rows, n_cols)


def _fewest_presses(
    solution: np.ndarray, basis: List[np.ndarray]
) -> np.ndarray:
    """Pick the lightest solution in ``solution + span(basis)``."""
    best = solution
    best_weight = int(solution.sum())
    for size in range(1, len(basis) + 1):
        for combo in itertools.combinations(basis, size):
            candidate = solution.copy()
            for vector in combo:
                candidate ^= vector
            weight = int(candidate.sum())
            if weight < best_weight:
                best, best_weight = candidate, weight
    return best


# ============================================================================
# Solver Agent
# ============================================================================

class SolverAgent(BaseAgent):
    """
    Agent that clears the board by solving the toggle system.

    The press plan is computed from the first observation of an episode.
    Boards outside the reachable set (common on 5x5 with random starts)
    have no plan; the agent then presses at random and reports
    ``solvable = False``.
    """

    def __init__(
        self,
        board_height: int = 5,
        board_width: int = 5,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the solver agent.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for fallback presses.
        """
        super().__init__(board_height, board_width)
        self.fallback = RandomAgent(board_height, board_width, seed)
        self.solvable: Optional[bool] = None
        self._plan: Optional[Deque[int]] = None

    def plan(self, observation: np.ndarray) -> Optional[List[int]]:
        """
        Compute the press order for a board.

        Returns:
            Action indices to press, or None if the board is unsolvable.
        """
        presses = solve_presses(np.asarray(observation))
        if presses is None:
            return None
        return [int(action) for action in np.flatnonzero(presses)]

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the next planned press.

        Args:
            observation: 2D array of lights.
            valid_actions: Optional mask of valid actions.

        Returns:
            Action index to press.
        """
        if self._plan is None:
            actions = self.plan(observation)
            self.solvable = actions is not None
            self._plan = deque(actions or [])

        if self._plan:
            return self._plan.popleft()

        return self.fallback.select_action(observation, valid_actions)

    def reset(self) -> None:
        """Forget the plan so the next observation is solved afresh."""
        self._plan = None
        self.solvable = None
