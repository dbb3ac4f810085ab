"""Shared constants and step tables for grid traversal."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Player(str, Enum):
    """Who found a word in a Boggle round."""

    HUMAN = "HUMAN"
    COMPUTER = "COMPUTER"


ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))

# Row-major order over the 3x3 block around a cell, centre excluded.
KING_STEPS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

# Maze walls are stored once per cell, toward the east then the south neighbour.
WALL_STEPS: Tuple[Tuple[int, int], ...] = ((0, 1), (1, 0))

MIN_WORD_LENGTH = 4
MAX_AGE = 20


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols
