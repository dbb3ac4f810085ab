"""Game of Life with cell ages and stabilization detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from ..core.constants import Bounds, KING_STEPS, MAX_AGE
from ..core.exceptions import InvalidInputError, OutOfBoundsError
from ..core.models import Coord
from ..io.display import LifeDisplay
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LifeConfig:
    """Rule constants for the simulation."""

    max_age: int = MAX_AGE

    def __post_init__(self) -> None:
        if self.max_age < 1:
            raise InvalidInputError(f"max_age must be at least 1, got {self.max_age}")


class LifeBoard:
    """Grid of integer cell ages; 0 is dead, a positive value is the age."""

    def __init__(self, ages: np.ndarray) -> None:
        ages = np.asarray(ages)
        if not np.issubdtype(ages.dtype, np.integer):
            raise InvalidInputError(f"Cell ages must be integers, got dtype {ages.dtype}")
        if ages.ndim != 2 or ages.size == 0:
            raise InvalidInputError(f"Life board needs a non-empty 2D array, got shape {ages.shape}")
        if (ages < 0).any():
            raise InvalidInputError("Cell ages cannot be negative")
        self.ages = np.array(ages, dtype=np.int64, copy=True)
        self.bounds = Bounds(rows=ages.shape[0], cols=ages.shape[1])

    @classmethod
    def empty(cls, rows: int, cols: int) -> "LifeBoard":
        if rows <= 0 or cols <= 0:
            raise InvalidInputError(f"Board dimensions must be positive, got {rows}x{cols}")
        return cls(np.zeros((rows, cols), dtype=np.int64))

    @classmethod
    def from_coords(cls, rows: int, cols: int, alive: Iterable[Coord]) -> "LifeBoard":
        board = cls.empty(rows, cols)
        for row, col in alive:
            board.set_age(row, col, 1)
        return board

    @property
    def rows(self) -> int:
        return self.bounds.rows

    @property
    def cols(self) -> int:
        return self.bounds.cols

    @property
    def population(self) -> int:
        return int(np.count_nonzero(self.ages))

    def _check(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def age(self, row: int, col: int) -> int:
        self._check(row, col)
        return int(self.ages[row, col])

    def set_age(self, row: int, col: int, age: int) -> None:
        self._check(row, col)
        if age < 0:
            raise InvalidInputError(f"Cell age cannot be negative, got {age}")
        self.ages[row, col] = age

    def is_alive(self, row: int, col: int) -> bool:
        return self.age(row, col) > 0

    def count_neighbors(self, row: int, col: int) -> int:
        """Number of live cells among the in-bounds 8 neighbours of ``(row, col)``."""
        self._check(row, col)
        return sum(
            1
            for dr, dc in KING_STEPS
            if self.bounds.contains(row + dr, col + dc) and self.ages[row + dr, col + dc] > 0
        )

    def neighbor_counts(self) -> np.ndarray:
        """Live-neighbour count for every cell; cells past the edge count as dead."""
        alive = (self.ages > 0).astype(np.int64)
        padded = np.pad(alive, 1)
        counts = np.zeros_like(alive)
        for dr, dc in KING_STEPS:
            counts += padded[1 + dr : 1 + dr + self.rows, 1 + dc : 1 + dc + self.cols]
        return counts

    def alive_cells(self) -> List[Coord]:
        return [(int(r), int(c)) for r, c in zip(*np.nonzero(self.ages))]

    def copy(self) -> "LifeBoard":
        return LifeBoard(self.ages)

    def to_rows(self) -> List[List[int]]:
        return self.ages.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LifeBoard):
            return NotImplemented
        return np.array_equal(self.ages, other.ages)

    def __repr__(self) -> str:
        return f"LifeBoard({self.rows}x{self.cols}, population={self.population})"


@dataclass
class StepResult:
    board: LifeBoard
    stabilized: bool


class LifeStepper:
    """Computes one synchronous generation from the previous board only."""

    def __init__(self, config: Optional[LifeConfig] = None) -> None:
        self.config = config or LifeConfig()

    def step(self, board: LifeBoard) -> StepResult:
        """Return the next generation and whether the simulation has settled.

        The board counts as still changing when a previously live cell dies, a
        cell is born, or a resulting age is nonzero and below ``max_age``.
        All three are read off the arrays that build the new board; no
        comparison against the old board is made afterwards.
        """

        max_age = self.config.max_age
        prior = board.ages
        counts = board.neighbor_counts()
        alive = prior > 0

        survives = alive & ((counts == 2) | (counts == 3))
        deaths = alive & ~survives
        births = ~alive & (counts == 3)

        ages = np.where(survives, np.minimum(prior + 1, max_age), 0)
        ages[births] = 1

        still_changing = bool(
            deaths.any() or births.any() or ((ages > 0) & (ages < max_age)).any()
        )
        return StepResult(board=LifeBoard(ages), stabilized=not still_changing)


class LifeSimulation:
    """Owns the current board and advances it one generation at a time."""

    def __init__(
        self,
        board: LifeBoard,
        stepper: Optional[LifeStepper] = None,
        display: Optional[LifeDisplay] = None,
    ) -> None:
        self.board = board
        self.stepper = stepper or LifeStepper()
        self.display = display
        self.generation = 0
        self.stabilized = False
        if self.display is not None:
            self.display.set_dimensions(board.rows, board.cols)
            self._redraw()

    def advance(self) -> StepResult:
        result = self.stepper.step(self.board)
        self.board = result.board
        self.generation += 1
        self.stabilized = result.stabilized
        LOGGER.debug(
            "Generation %d: population=%d stabilized=%s",
            self.generation,
            self.board.population,
            result.stabilized,
        )
        self._redraw()
        return result

    def run(self, max_generations: int) -> int:
        """Advance until stabilized or ``max_generations`` steps; return steps taken."""
        if max_generations < 0:
            raise InvalidInputError(f"max_generations cannot be negative, got {max_generations}")
        taken = 0
        while taken < max_generations and not self.stabilized:
            self.advance()
            taken += 1
        if self.stabilized:
            LOGGER.info("Simulation stabilized after %d generations", self.generation)
        return taken

    def _redraw(self) -> None:
        if self.display is None:
            return
        for row in range(self.board.rows):
            for col in range(self.board.cols):
                self.display.draw_cell(row, col, int(self.board.ages[row, col]))
