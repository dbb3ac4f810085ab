"""Data models shared by the grid engines."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Wall:
    """A removable boundary between two orthogonally adjacent cells.

    The pair is unordered: ``Wall.between(a, b) == Wall.between(b, a)``.
    The endpoints are stored in sorted order however the wall is built.
    """

    one: Coord
    two: Coord

    def __post_init__(self) -> None:
        if self.two < self.one:
            one, two = self.two, self.one
            object.__setattr__(self, "one", one)
            object.__setattr__(self, "two", two)

    @classmethod
    def between(cls, first: Coord, second: Coord) -> "Wall":
        return cls(one=first, two=second)

    def is_orthogonal(self) -> bool:
        return abs(self.one[0] - self.two[0]) + abs(self.one[1] - self.two[1]) == 1

    def cells(self) -> Tuple[Coord, Coord]:
        return self.one, self.two


@dataclass(frozen=True)
class WordPath:
    """A word together with the board cells that spell it."""

    word: str
    cells: Tuple[Coord, ...]

    def __len__(self) -> int:
        return len(self.cells)
