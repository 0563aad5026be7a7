"""
Reading and writing puzzle files.

Text puzzles are 81 cells in row-major order; digits 1-9 are givens and
'0' or '.' mark empty cells. Whitespace and the box separators produced by
format_board ('|', '-', '+') are ignored, so a printed board reads back.

JSON puzzles hold {"board": [[...], ...]} or a bare 9x9 list.
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

from .board import InvalidGridError, as_board, format_board

_SEPARATORS = set("|-+ \t\r\n")


def parse_board(text: str) -> np.ndarray:
    cells = []
    for ch in text:
        if ch in _SEPARATORS:
            continue
        if ch == ".":
            cells.append(0)
        elif ch in "0123456789":
            cells.append(int(ch))
        else:
            raise InvalidGridError(f"Unexpected character in puzzle: {ch!r}")

    if len(cells) != 81:
        raise InvalidGridError(f"Puzzle must have 81 cells, found {len(cells)}")

    return as_board(np.array(cells, dtype=int).reshape(9, 9))


def load_board(path) -> np.ndarray:
    """
    Load a puzzle from a .json or text file.

    Raises:
        InvalidGridError: the file is missing, unreadable or not a 9x9 puzzle
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidGridError(f"Could not read puzzle from {path}: {e}") from e

    if path.suffix.lower() != ".json":
        return parse_board(text)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidGridError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        if "board" not in data:
            raise InvalidGridError(f"{path} has no 'board' entry")
        data = data["board"]
    return as_board(data)


def save_board(board: np.ndarray, path) -> Path:
    path = Path(path)
    if path.suffix.lower() == ".json":
        payload = {"board": np.asarray(board).tolist()}
        path.write_text(json.dumps(payload) + "\n", encoding="utf-8")
    else:
        path.write_text(format_board(board) + "\n", encoding="utf-8")
    return path
