"""Bounded Game of Life board made of two-state cells."""

from typing import Iterator, List, Optional, Tuple
import logging

import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell

logger = logging.getLogger(__name__)

# Moore neighborhood, centre excluded
_NEIGHBOR_KERNEL = torch.tensor(
    [[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32
).unsqueeze(0).unsqueeze(0)


class Board:
    """A fixed-size grid of cells with non-wrapping edges.

    Cells are stored row-major and addressed as ``(row, col)``. The board
    never resizes after construction. Cells outside the board are treated as
    absent, so corner cells have at most 3 neighbors and edge cells at most 5.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """Create a board of dead cells.

        Args:
            rows: Number of rows
            cols: Number of columns

        Raises:
            ValueError: If either dimension is negative
        """
        if rows < 0 or cols < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {rows}x{cols}")

        self.rows = rows
        self.cols = cols
        self._cells: List[List[Cell]] = [[Cell() for _ in range(cols)] for _ in range(rows)]
        self._generation = 0

    @property
    def shape(self) -> Tuple[int, int]:
        """Board dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def generation(self) -> int:
        """Number of generations advanced since creation or the last clear."""
        return self._generation

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

    def is_alive(self, row: int, col: int) -> bool:
        """Get the published state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return self._cells[row][col].alive

    def set_alive(self, row: int, col: int, alive: bool = True) -> None:
        """Set the published state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        self._cells[row][col].alive = bool(alive)

    def initialize_random(self, density: float, rng: Optional[np.random.Generator] = None) -> None:
        """Seed every cell independently.

        A cell is alive when its uniform draw ``v`` in [0, 1) satisfies
        ``v >= 1 - density``. The density is not validated here.

        Args:
            density: Approximate fraction of live cells, 0.0 to 1.0
            rng: Random generator to draw from (a fresh one when omitted)
        """
        if rng is None:
            rng = np.random.default_rng()

        draws = rng.random((self.rows, self.cols))
        threshold = 1.0 - density
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                cell.alive = bool(draws[r, c] >= threshold)

        logger.debug("Random seed at density %.3f produced %d live cells", density, self.alive_count())

    def clear(self) -> None:
        """Kill every cell."""
        for row in self._cells:
            for cell in row:
                cell.alive = False
        self._generation = 0

    def neighbor_count(self, row: int, col: int) -> int:
        """Count live in-bounds neighbors of a single cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        count = 0
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.rows and 0 <= nc < self.cols and self._cells[nr][nc].alive:
                    count += 1
        return count

    def neighbor_counts(self) -> np.ndarray:
        """Count live neighbors for every cell at once.

        Zero padding keeps the count bounded at the edges, matching
        :meth:`neighbor_count`.

        Returns:
            int8 array of shape (rows, cols)
        """
        if self.rows == 0 or self.cols == 0:
            return np.zeros((self.rows, self.cols), dtype=np.int8)

        state = torch.from_numpy(self.to_array().astype(np.float32))
        counts = F.conv2d(state.reshape(1, 1, self.rows, self.cols), _NEIGHBOR_KERNEL, padding=1)
        return counts[0, 0].numpy().astype(np.int8)

    def advance(self) -> None:
        """Advance the whole board by one generation.

        Every cell decides its next state from the previous generation
        before any cell commits. Interrupting between the two passes leaves
        the board inconsistent.
        """
        counts = self.neighbor_counts()

        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                cell.update(int(counts[r, c]))

        for row in self._cells:
            for cell in row:
                cell.commit()

        self._generation += 1

    def alive_count(self) -> int:
        """Number of live cells."""
        return sum(cell.alive for row in self._cells for cell in row)

    def iterate_cells(self) -> Iterator[Tuple[Tuple[int, int], bool]]:
        """Yield ``((row, col), alive)`` for every cell in row-major order."""
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                yield (r, c), cell.alive

    def to_array(self) -> np.ndarray:
        """Snapshot the board as an int8 array of shape (rows, cols)."""
        snapshot = np.zeros((self.rows, self.cols), dtype=np.int8)
        for (r, c), alive in self.iterate_cells():
            if alive:
                snapshot[r, c] = 1
        return snapshot

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return "\n".join("".join("*" if cell.alive else "." for cell in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, alive={self.alive_count()})"
