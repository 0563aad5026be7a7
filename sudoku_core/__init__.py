"""
Sudoku Solver - backtracking search for 9x9 puzzles

This package contains modules for:
- Board validation and formatting
- Puzzle file loading and saving
- Sudoku puzzle solving
- Rendering solved boards as images
"""

from .board import InvalidGridError, as_board, find_conflicts, format_board, is_solved
from .solver import solve, solve_puzzle

__version__ = "1.0.0"
