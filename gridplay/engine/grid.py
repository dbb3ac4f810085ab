"""Grid representation and helper utilities."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, Sequence, Tuple, TypeVar

from ..core.constants import Bounds
from ..core.exceptions import InvalidInputError, OutOfBoundsError
from ..core.models import Coord

T = TypeVar("T")


class Grid(Generic[T]):
    """Fixed-size 2D array of cells indexed by ``(row, col)``.

    The grid owns its cell values and is mutated in place. Every read or write
    is bounds-checked and raises :class:`OutOfBoundsError` when the coordinate
    falls outside the grid.
    """

    def __init__(self, rows: int, cols: int, fill: T) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidInputError(f"Grid dimensions must be positive, got {rows}x{cols}")
        self.bounds = Bounds(rows=rows, cols=cols)
        self.cells: List[List[T]] = [[fill for _ in range(cols)] for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> "Grid[T]":
        if not rows or not rows[0]:
            raise InvalidInputError("Grid needs at least one row and one column")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidInputError("All grid rows must have the same length")
        grid: Grid[T] = cls(len(rows), width, rows[0][0])
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                grid.cells[r][c] = value
        return grid

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def in_bounds(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def _check(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def get(self, row: int, col: int) -> T:
        self._check(row, col)
        return self.cells[row][col]

    def set(self, row: int, col: int, value: T) -> None:
        self._check(row, col)
        self.cells[row][col] = value

    def __getitem__(self, coord: Coord) -> T:
        return self.get(*coord)

    def __setitem__(self, coord: Coord, value: T) -> None:
        self.set(coord[0], coord[1], value)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------
    def coords(self) -> Iterator[Coord]:
        """Iterate over every coordinate in row-major order."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def neighbors(self, coord: Coord, steps: Iterable[Tuple[int, int]]) -> Iterator[Coord]:
        """Yield the in-bounds cells reached from ``coord`` by each step, in order."""
        self._check(*coord)
        row, col = coord
        for dr, dc in steps:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc):
                yield (nr, nc)

    def to_rows(self) -> List[List[T]]:
        return [list(row) for row in self.cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.bounds == other.bounds and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.cols})"
