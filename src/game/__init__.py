"""
Lights Out game module.

Provides core game logic including board management and cell views.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, GameState
from .view import render_board, render_screen
from .environment import LightsOutEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "GameState",
    "render_board",
    "render_screen",
    "LightsOutEnv",
]
