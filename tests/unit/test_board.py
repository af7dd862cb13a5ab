"""
Unit tests for Board class.

Tests board initialization, toggle propagation, win detection,
restart and observation generation.
"""
from typing import List, Set, Tuple

import pytest
import numpy as np
from game import Board, BoardConfig, GameState


def changed_positions(
    before: List[List[bool]], after: List[List[bool]]
) -> Set[Tuple[int, int]]:
    """Positions whose light differs between two grids."""
    return {
        (row, col)
        for row, values in enumerate(before)
        for col, value in enumerate(values)
        if after[row][col] != value
    }


def all_off(board: Board) -> bool:
    return not any(any(row) for row in board.grid)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.n_rows == 5
        assert valid_config.n_cols == 5
        assert valid_config.chance_light_starts_on == 0.25

    def test_default_config(self) -> None:
        """Defaults should be a 5x5 board with 25% of lights on."""
        config = BoardConfig()
        assert (config.n_rows, config.n_cols) == (5, 5)
        assert config.chance_light_starts_on == 0.25

    def test_zero_rows_raises_error(self) -> None:
        """Zero rows should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(0, 5, 0.25)

    def test_zero_cols_raises_error(self) -> None:
        """Zero columns should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(5, 0, 0.25)

    @pytest.mark.parametrize("chance", [-0.1, 1.5])
    def test_chance_out_of_range_raises_error(self, chance: float) -> None:
        """Chance outside [0, 1] should raise ValueError."""
        with pytest.raises(ValueError, match="between 0 and 1"):
            BoardConfig(5, 5, chance)

    @pytest.mark.parametrize("chance", [0.0, 1.0])
    def test_chance_bounds_are_valid(self, chance: float) -> None:
        """Chance of exactly 0 or 1 should be accepted."""
        assert BoardConfig(5, 5, chance).chance_light_starts_on == chance

    @pytest.mark.parametrize("n_rows,n_cols", [(2.5, 3), (3, 4.0), ("3", 3), (True, 3)])
    def test_non_integer_dimensions_raise_error(self, n_rows, n_cols) -> None:
        """Dimensions must be whole numbers."""
        with pytest.raises(ValueError, match="must be integers"):
            BoardConfig(n_rows, n_cols, 0.25)

    def test_numpy_integer_dimensions_are_valid(self) -> None:
        """Integer types other than int should be accepted."""
        config = BoardConfig(np.int64(3), np.int32(4), 0.5)
        assert Board(config).get_observation().shape == (3, 4)

    def test_config_is_immutable(self, valid_config: BoardConfig) -> None:
        """Configuration cannot change once created."""
        with pytest.raises(AttributeError):
            valid_config.n_rows = 7


# ============================================================================
# Board Initialization Tests
# ============================================================================

class TestBoardInitialization:
    """Test board creation and initial state."""

    @pytest.mark.parametrize("n_rows,n_cols", [(1, 1), (5, 5), (3, 7), (8, 2)])
    def test_board_has_correct_dimensions(
        self, n_rows: int, n_cols: int
    ) -> None:
        """Grid should have n_rows rows of n_cols lights each."""
        board = Board(BoardConfig(n_rows, n_cols, 0.5))
        grid = board.grid
        assert len(grid) == n_rows
        assert all(len(row) == n_cols for row in grid)

    def test_zero_chance_starts_won(self, dark_board: Board) -> None:
        """No lights on at the start means the game is already won."""
        assert all_off(dark_board)
        assert dark_board.game_state == GameState.WON
        assert dark_board.is_won is True

    def test_full_chance_starts_fully_lit(self, lit_board: Board) -> None:
        """Chance 1 should light every cell and leave the game playing."""
        assert all(all(row) for row in lit_board.grid)
        assert lit_board.is_playing is True
        assert lit_board.lit_count == 25

    def test_win_flag_matches_grid(self, default_board: Board) -> None:
        """Win state should agree with the grid after initialization."""
        assert default_board.is_won == all_off(default_board)

    def test_same_seed_gives_same_grid(self) -> None:
        """Seeding should make the initial draw reproducible."""
        first = Board(BoardConfig(6, 6, 0.5))
        second = Board(BoardConfig(6, 6, 0.5))
        first.seed(7)
        second.seed(7)
        first.reset()
        second.reset()
        assert first.grid == second.grid

    def test_grid_copy_is_detached(self, lit_board: Board) -> None:
        """Mutating the returned grid should not touch the board."""
        grid = lit_board.grid
        grid[0][0] = False
        assert lit_board.get_cell(0, 0) is True


# ============================================================================
# From Grid Tests
# ============================================================================

class TestFromGrid:
    """Test building boards from explicit grids."""

    def test_from_grid_copies_lights(self) -> None:
        """Board should hold the given lights."""
        board = Board.from_grid([[True, False, False], [False, False, True]])
        assert board.grid == [[True, False, False], [False, False, True]]
        assert (board.config.n_rows, board.config.n_cols) == (2, 3)

    def test_from_grid_all_off_is_won(self) -> None:
        """A dark grid should start won."""
        board = Board.from_grid([[0, 0], [0, 0]])
        assert board.is_won is True

    def test_from_grid_ragged_raises_error(self) -> None:
        """Rows of different lengths should be rejected."""
        with pytest.raises(ValueError, match="same number of columns"):
            Board.from_grid([[True, False], [True]])

    def test_from_grid_empty_raises_error(self) -> None:
        """Empty grids should be rejected."""
        with pytest.raises(ValueError, match="at least one row"):
            Board.from_grid([])


# ============================================================================
# Toggle Tests
# ============================================================================

class TestToggleAround:
    """Test toggle propagation to orthogonal neighbors."""

    def test_corner_flips_three_cells(self, lit_board: Board) -> None:
        """Corner (0, 0) should flip itself, right and below."""
        before = lit_board.grid
        assert lit_board.toggle_around(0, 0) is True
        assert changed_positions(before, lit_board.grid) == {
            (0, 0), (0, 1), (1, 0),
        }

    def test_edge_flips_four_cells(self, lit_board: Board) -> None:
        """Edge (0, 2) should flip itself, left, right and below."""
        before = lit_board.grid
        lit_board.toggle_around(0, 2)
        assert changed_positions(before, lit_board.grid) == {
            (0, 2), (0, 1), (0, 3), (1, 2),
        }

    def test_interior_flips_five_cells(self, lit_board: Board) -> None:
        """Interior (2, 2) should flip itself and all four neighbors."""
        before = lit_board.grid
        lit_board.toggle_around(2, 2)
        assert changed_positions(before, lit_board.grid) == {
            (2, 2), (1, 2), (3, 2), (2, 1), (2, 3),
        }

    def test_opposite_corner_flips_three_cells(self, lit_board: Board) -> None:
        """Corner (4, 4) should flip itself, left and above."""
        before = lit_board.grid
        lit_board.toggle_around(4, 4)
        assert changed_positions(before, lit_board.grid) == {
            (4, 4), (3, 4), (4, 3),
        }

    def test_non_square_corner(self, wide_board: Board) -> None:
        """Bounds should use rows and columns consistently."""
        before = wide_board.grid
        wide_board.toggle_around(1, 3)
        assert changed_positions(before, wide_board.grid) == {
            (1, 3), (0, 3), (1, 2),
        }

    def test_toggle_twice_restores_grid(self, lit_board: Board) -> None:
        """Toggling the same cell twice should be a no-op overall."""
        before = lit_board.grid
        lit_board.toggle_around(2, 3)
        lit_board.toggle_around(2, 3)
        assert lit_board.grid == before

    def test_toggle_off_board_returns_false(self, lit_board: Board) -> None:
        """Primary position off the board should change nothing."""
        before = lit_board.grid
        assert lit_board.toggle_around(-1, 0) is False
        assert lit_board.toggle_around(0, 5) is False
        assert lit_board.grid == before

    def test_toggle_flips_lit_and_unlit(self) -> None:
        """Off lights turn on and on lights turn off."""
        board = Board.from_grid([
            [True, False, True],
            [False, True, False],
        ])
        board.toggle_around(0, 1)
        assert board.grid == [
            [False, True, False],
            [False, False, False],
        ]


# ============================================================================
# Win Condition Tests
# ============================================================================

class TestWinCondition:
    """Test win detection after toggles."""

    def test_clearing_last_lights_wins(self, one_move_board: Board) -> None:
        """Turning every light off should win the game."""
        one_move_board.toggle_around(1, 1)
        assert all_off(one_move_board)
        assert one_move_board.game_state == GameState.WON

    def test_cannot_toggle_after_win(self, one_move_board: Board) -> None:
        """A won board should refuse further toggles."""
        one_move_board.toggle_around(1, 1)
        assert one_move_board.toggle_around(0, 0) is False
        assert all_off(one_move_board)

    def test_win_flag_tracks_every_toggle(self, default_board: Board) -> None:
        """Win state should agree with the grid after each toggle."""
        for row, col in [(0, 0), (1, 3), (4, 4), (2, 2), (3, 0)]:
            default_board.toggle_around(row, col)
            assert default_board.is_won == all_off(default_board)

    def test_non_square_win(self) -> None:
        """Win check should scan a non-square grid fully."""
        board = Board.from_grid([
            [False, False, False, True],
            [False, False, True, True],
        ])
        board.toggle_around(1, 3)
        assert board.is_won is True

    def test_partial_clear_keeps_playing(self) -> None:
        """A light left on should keep the game in progress."""
        board = Board.from_grid([
            [False, False, False, True],
            [False, False, True, True],
        ])
        board.toggle_around(0, 3)
        assert board.is_playing is True


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array for agents."""

    def test_observation_shape_matches_board(
        self, wide_board: Board
    ) -> None:
        """Observation should match board dimensions."""
        obs = wide_board.get_observation()
        assert obs.shape == (2, 4)

    def test_observation_dtype_is_int8(self, default_board: Board) -> None:
        """Observation should be int8."""
        assert default_board.get_observation().dtype == np.int8

    def test_observation_matches_grid(self, default_board: Board) -> None:
        """Observation should be 1 where lit and 0 elsewhere."""
        obs = default_board.get_observation()
        expected = np.array(default_board.grid, dtype=np.int8)
        assert np.array_equal(obs, expected)

    def test_lit_board_observation_all_ones(self, lit_board: Board) -> None:
        """Fully lit board observation should be all 1."""
        assert np.all(lit_board.get_observation() == 1)


# ============================================================================
# Valid Actions and Cell Tests
# ============================================================================

class TestValidActions:
    """Test valid action enumeration."""

    def test_playing_board_has_all_cells_as_valid(
        self, lit_board: Board
    ) -> None:
        """Every cell can be pressed while playing."""
        actions = lit_board.get_valid_actions()
        assert len(actions) == 25
        assert (4, 4) in actions

    def test_won_board_has_no_valid_actions(self, dark_board: Board) -> None:
        """Nothing can be pressed once won."""
        assert dark_board.get_valid_actions() == []

    def test_get_cell_out_of_bounds_is_none(self, lit_board: Board) -> None:
        """Positions off the board should return None."""
        assert lit_board.get_cell(5, 0) is None
        assert lit_board.get_cell(0, -1) is None

    def test_cells_match_grid(self, default_board: Board) -> None:
        """Cell views should mirror the grid."""
        grid = default_board.grid
        for row in default_board.cells():
            for cell in row:
                assert cell.is_lit == grid[cell.row][cell.col]

    def test_cell_click_toggles_board(self, lit_board: Board) -> None:
        """Clicking a cell view should toggle around its position."""
        before = lit_board.grid
        assert lit_board.cells()[0][0].click() is True
        assert changed_positions(before, lit_board.grid) == {
            (0, 0), (0, 1), (1, 0),
        }


# ============================================================================
# Reset Tests
# ============================================================================

class TestReset:
    """Test board restart."""

    def test_reset_after_win_restores_playing(self) -> None:
        """Restart of a won board should draw a fresh lit grid."""
        board = Board.from_grid(
            [[False, True], [True, True]], chance_light_starts_on=1.0
        )
        board.toggle_around(1, 1)
        assert board.is_won is True

        board.reset()
        assert board.is_playing is True
        assert board.lit_count == 4

    def test_reset_keeps_dimensions(self, wide_board: Board) -> None:
        """Restart should keep the configured shape."""
        wide_board.toggle_around(0, 0)
        wide_board.reset()
        assert len(wide_board.grid) == 2
        assert all(len(row) == 4 for row in wide_board.grid)

    def test_reset_draws_new_grid(self) -> None:
        """Consecutive restarts should produce different draws."""
        board = Board(BoardConfig(10, 10, 0.5))
        board.seed(42)
        board.reset()
        first = board.grid
        board.reset()
        assert board.grid != first

    def test_reset_win_flag_matches_grid(self) -> None:
        """Win state should agree with the grid after every restart."""
        board = Board(BoardConfig(2, 2, 0.3))
        board.seed(3)
        for _ in range(50):
            board.reset()
            assert board.is_won == all_off(board)

    def test_reset_zero_chance_is_won(self, dark_board: Board) -> None:
        """Restart with chance 0 should immediately be won."""
        dark_board.reset()
        assert dark_board.is_won is True
