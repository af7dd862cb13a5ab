"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
# Repository root for the command line scripts
sys.path.append(str(Path(__file__).parent.parent))

from game import Board, BoardConfig, LightsOutEnv


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 5x5 board with 25% of lights on."""
    board = Board()
    board.seed(1234)
    board.reset()
    return board


@pytest.fixture
def lit_board() -> Board:
    """Create a 5x5 board with every light on."""
    return Board(BoardConfig(5, 5, 1.0))


@pytest.fixture
def dark_board() -> Board:
    """Create a 5x5 board with every light off (already won)."""
    return Board(BoardConfig(5, 5, 0.0))


@pytest.fixture
def wide_board() -> Board:
    """Create a non-square 2x4 board with every light on."""
    return Board(BoardConfig(2, 4, 1.0))


@pytest.fixture
def one_move_board() -> Board:
    """Create a 3x3 board cleared by pressing the center."""
    return Board.from_grid([
        [False, True, False],
        [True, True, True],
        [False, True, False],
    ])


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(5, 5, 0.25)


@pytest.fixture
def small_config() -> BoardConfig:
    """3x3 configuration with half the lights on."""
    return BoardConfig(3, 3, 0.5)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def env() -> LightsOutEnv:
    """Create a default environment."""
    return LightsOutEnv()


@pytest.fixture
def small_env(small_config: BoardConfig) -> LightsOutEnv:
    """Create a 3x3 environment rendering to text."""
    return LightsOutEnv(config=small_config, render_mode="ansi")
