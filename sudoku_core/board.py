"""
Board helpers shared by the solver, the puzzle loaders and the CLI.

A board is a 9x9 integer numpy array where 0 marks an empty cell.
"""

import numpy as np
from typing import List


class InvalidGridError(ValueError):
    """Raised when a grid is not a 9x9 matrix of integers in 0..9."""


def as_board(grid) -> np.ndarray:
    """
    Copy a grid into a fresh 9x9 integer array, checking shape and range.

    Args:
        grid: nested sequence of ints or a numpy array

    Returns:
        np.ndarray: independent 9x9 int copy of the grid

    Raises:
        InvalidGridError: wrong dimensions, non-integer or out-of-range values
    """
    if isinstance(grid, np.ndarray):
        raw = grid
    else:
        try:
            rows = [list(row) for row in grid]
        except TypeError:
            raise InvalidGridError("Grid must be a sequence of 9 rows") from None
        if len(rows) != 9 or any(len(row) != 9 for row in rows):
            raise InvalidGridError("Grid must have 9 rows of 9 cells")
        raw = np.array(rows, dtype=object)

    if raw.shape != (9, 9):
        raise InvalidGridError(f"Grid must be 9x9, got shape {raw.shape}")

    board = np.zeros((9, 9), dtype=int)
    for r in range(9):
        for c in range(9):
            val = raw[r, c]
            if isinstance(val, (bool, np.bool_)) or not isinstance(val, (int, np.integer)):
                raise InvalidGridError(f"Cell ({r+1},{c+1}) is not an integer: {val!r}")
            if not 0 <= val <= 9:
                raise InvalidGridError(f"Cell ({r+1},{c+1}) out of range 0-9: {val}")
            board[r, c] = val
    return board


def _duplicates(values) -> List[int]:
    seen = set()
    dups = set()
    for v in values:
        if v == 0:
            continue
        if v in seen:
            dups.add(int(v))
        seen.add(v)
    return sorted(dups)


def find_conflicts(board: np.ndarray) -> List[str]:
    """Describe every row, column and 3x3 block holding a repeated digit."""
    notes: List[str] = []
    for i in range(9):
        for v in _duplicates(board[i, :]):
            notes.append(f"Row {i+1} has duplicate given digit {v}")
    for i in range(9):
        for v in _duplicates(board[:, i]):
            notes.append(f"Column {i+1} has duplicate given digit {v}")
    for br in range(3):
        for bc in range(3):
            block = board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel()
            for v in _duplicates(block):
                notes.append(f"3x3 block ({br+1},{bc+1}) has duplicate given digit {v}")
    return notes


def is_solved(board: np.ndarray) -> bool:
    """True when every row, column and block holds 1-9 exactly once."""
    digits = set(range(1, 10))
    for i in range(9):
        if set(board[i, :].tolist()) != digits:
            return False
        if set(board[:, i].tolist()) != digits:
            return False
    for br in range(3):
        for bc in range(3):
            if set(board[br*3:(br+1)*3, bc*3:(bc+1)*3].ravel().tolist()) != digits:
                return False
    return True


def filled_mask(original: np.ndarray, solved: np.ndarray) -> np.ndarray:
    """Boolean mask of cells the solver filled (empty in the original)."""
    original = np.asarray(original)
    solved = np.asarray(solved)
    return (original == 0) & (solved != 0)


def format_board(board: np.ndarray) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(board):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
