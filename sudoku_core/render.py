"""
Draw boards as images with OpenCV.

Given digits are drawn dark, digits filled by the solver are drawn green.
"""

import cv2
import numpy as np
from typing import Optional

GIVEN_COLOR = (40, 40, 40)
FILLED_COLOR = (0, 160, 0)


def draw_grid_lines(canvas: np.ndarray) -> np.ndarray:
    """
    Draw the 9x9 grid on a square canvas.

    Args:
        canvas: 3-channel image to draw on (modified in place)

    Returns:
        The same canvas, for chaining
    """
    size = canvas.shape[0]
    cell_size = size // 9
    last = cell_size * 9 - 1

    for i in range(10):
        pos = min(i * cell_size, last)
        thickness = 3 if i % 3 == 0 else 1
        cv2.line(canvas, (0, pos), (last, pos), (0, 0, 0), thickness)
        cv2.line(canvas, (pos, 0), (pos, last), (0, 0, 0), thickness)

    return canvas


def render_board(board: np.ndarray, size: int = 450,
                 original: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Render a board on a blank white canvas.

    When original is given, cells that were empty there are drawn in the
    filled color.
    """
    if size < 9:
        raise ValueError(f"Image size must be at least 9 pixels, got {size}")

    board = np.asarray(board)
    canvas = np.full((size, size, 3), 255, dtype=np.uint8)
    draw_grid_lines(canvas)

    cell = size // 9
    font = cv2.FONT_HERSHEY_SIMPLEX
    scale = cell / 55.0

    for r in range(9):
        for c in range(9):
            val = int(board[r, c])
            if val == 0:
                continue
            given = original is None or original[r, c] != 0
            color = GIVEN_COLOR if given else FILLED_COLOR
            text = str(val)
            (tw, th), _ = cv2.getTextSize(text, font, scale, 2)
            x = c * cell + (cell - tw) // 2
            y = r * cell + (cell + th) // 2
            cv2.putText(canvas, text, (x, y), font, scale, color, 2, cv2.LINE_AA)

    return canvas


def render_solution(solved: np.ndarray, original: np.ndarray, size: int = 450) -> np.ndarray:
    return render_board(solved, size=size, original=np.asarray(original))
