"""The cell grid and its update rule."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterator


class CellState(IntEnum):
    DEAD = 0
    ALIVE = 1


class Board:
    """A grid of cells that keeps a running count of live cells.

    Cells are updated in place while a generation is computed, so later cells
    see the new state of earlier ones. The neighbourhood that is counted
    includes the cell itself.
    """

    def __init__(self, cols: int, rows: int) -> None:
        if cols < 0 or rows < 0:
            raise ValueError("board dimensions must not be negative")
        self.cols = cols
        self.rows = rows
        self.scaling_factor = 1
        self.population = 0
        self.generation = 0
        self._cells = [[CellState.DEAD] * cols for _ in range(rows)]

    @classmethod
    def from_window(cls, width: int, height: int, scaling_factor: int) -> "Board":
        """Build a board whose cells are ``scaling_factor`` pixels square."""
        if scaling_factor <= 0:
            raise ValueError("scaling factor must be positive")
        if width % scaling_factor != 0:
            raise ValueError(
                f"window width {width} is not a multiple of {scaling_factor}"
            )
        if height % scaling_factor != 0:
            raise ValueError(
                f"window height {height} is not a multiple of {scaling_factor}"
            )
        board = cls(width // scaling_factor, height // scaling_factor)
        board.scaling_factor = scaling_factor
        return board

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def get(self, x: int, y: int) -> CellState:
        self._check(x, y)
        return self._cells[y][x]

    def set(self, x: int, y: int, state: CellState | bool | int) -> None:
        """Set a cell, keeping the population count in step."""
        self._check(x, y)
        new = CellState(int(state))
        previous = self._cells[y][x]
        self._cells[y][x] = new
        if previous is CellState.ALIVE and new is CellState.DEAD:
            self.population -= 1
        elif previous is CellState.DEAD and new is CellState.ALIVE:
            self.population += 1

    def population_count(self, x: int, y: int) -> int:
        """Live cells in the 3x3 block centred on (x, y), clipped to the board."""
        return sum(
            1
            for ny in range(max(y - 1, 0), min(y + 2, self.rows))
            for nx in range(max(x - 1, 0), min(x + 2, self.cols))
            if self._cells[ny][nx] is CellState.ALIVE
        )

    def step(self) -> None:
        """Advance one generation, updating cells in row-major order."""
        for y in range(self.rows):
            for x in range(self.cols):
                count = self.population_count(x, y)
                if count < 2 or count >= 4:
                    self.set(x, y, CellState.DEAD)
                if count == 3:
                    self.set(x, y, CellState.ALIVE)
        self.generation += 1

    def seed_checkerboard(self) -> None:
        """Bring to life every cell whose row-major index is even."""
        for y in range(self.rows):
            for x in range(self.cols):
                if (x + y * self.cols) % 2 == 0:
                    self.set(x, y, CellState.ALIVE)

    def alive_cells(self) -> Iterator[tuple[int, int]]:
        """Yield the (x, y) of each live cell in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell is CellState.ALIVE:
                    yield x, y