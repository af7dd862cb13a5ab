"""
Lights Out agents module.

Provides agents that play Lights Out from observations:
- RandomAgent: Baseline random presses
- SolverAgent: Press plan from a GF(2) linear solve
"""
from .base_agent import BaseAgent
from .random_agent import RandomAgent
from .solver_agent import SolverAgent, build_toggle_matrix, gf2_solve, solve_presses

__all__ = [
    "BaseAgent",
    "RandomAgent",
    "SolverAgent",
    "build_toggle_matrix",
    "gf2_solve",
    "solve_presses",
]
