"""A character grid for plotting points, and the plot's fixed geometry."""

from __future__ import annotations

import math

WIDTH = 80
HEIGHT = 25
START_X = 0.0
END_X = 4 * math.pi
START_Y = -1
END_Y = 1
STEP_X = END_X / (WIDTH - 1)

_MARK = "*"
_BLANK = "."


class Canvas:
    """A grid of cells, each marked or blank; row 0 is the bottom."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._cells = [[False] * width for _ in range(height)]

    def _check(self, row: int, col: int) -> None:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"cell ({row}, {col}) is outside the canvas")

    def set(self, row: int, col: int) -> None:
        """Mark the cell at ``row``, ``col``."""
        self._check(row, col)
        self._cells[row][col] = True

    def is_set(self, row: int, col: int) -> bool:
        """Whether the cell at ``row``, ``col`` is marked."""
        self._check(row, col)
        return self._cells[row][col]

    def clear(self) -> None:
        """Blank every cell."""
        for row in self._cells:
            row[:] = [False] * self.width

    def render(self) -> str:
        """Draw the grid top row first, one line per row; row 0 is not drawn."""
        return "".join(
            "".join(_MARK if cell else _BLANK for cell in self._cells[row]) + "\n"
            for row in range(self.height - 1, 0, -1)
        )