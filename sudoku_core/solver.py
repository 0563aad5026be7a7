"""
Simple backtracking Sudoku solver with basic safety checks.
"""

import numpy as np
from typing import List, Optional, Tuple

from .board import as_board, find_conflicts


def _find_empty(board: np.ndarray):
    positions = np.argwhere(board == 0)
    if positions.size == 0:
        return None
    return tuple(positions[0])


def _is_valid(board: np.ndarray, row: int, col: int, val: int) -> bool:
    if val in board[row, :]:
        return False
    if val in board[:, col]:
        return False

    r0 = (row // 3) * 3
    c0 = (col // 3) * 3
    if val in board[r0:r0 + 3, c0:c0 + 3]:
        return False

    return True


def solve_board(board: np.ndarray, step_counter: List[int],
                max_steps: Optional[int] = None) -> bool:
    """In-place backtracking solver. Returns True if solved."""
    if max_steps is not None and step_counter[0] > max_steps:
        return False

    empty = _find_empty(board)
    if empty is None:
        return True

    r, c = empty
    for val in range(1, 10):
        if _is_valid(board, r, c, val):
            board[r, c] = val
            step_counter[0] += 1
            if solve_board(board, step_counter, max_steps):
                return True
            board[r, c] = 0

    return False


def solve(grid) -> Optional[np.ndarray]:
    """
    Solve a 9x9 puzzle without touching the caller's grid.

    Cells are filled in row-major order trying digits 1-9 ascending, so the
    same input always yields the same solution.

    Args:
        grid: 9x9 nested sequence or array, 0 = empty

    Returns:
        np.ndarray: the solved board, or None if no solution exists

    Raises:
        InvalidGridError: grid is not 9x9 or holds values outside 0-9
    """
    working = as_board(grid)
    if find_conflicts(working):
        return None
    if solve_board(working, [0]):
        return working
    return None


def solve_puzzle(grid, max_steps: Optional[int] = None) -> Tuple[Optional[np.ndarray], str]:
    """
    Return a solved copy of the board, or (None, reason) if unsolvable or invalid.
    Optionally limits the search to max_steps placements.
    """
    working = as_board(grid)

    conflicts = find_conflicts(working)
    if conflicts:
        return None, conflicts[0]

    steps = [0]
    solved = solve_board(working, steps, max_steps)
    if solved:
        return working, f"Solved in {steps[0]} steps"
    if max_steps is not None and steps[0] > max_steps:
        return None, f"Stopped after {steps[0]} steps (limit {max_steps})"
    return None, "No solution found"
