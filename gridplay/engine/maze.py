"""Maze generation by randomized wall removal (Kruskal's algorithm).

Every cell starts as its own chamber. Walls are visited in a uniformly random
order; a wall is knocked down only when the cells on either side belong to
different chambers, which merges the two. The removed walls form a spanning
tree: exactly one route joins any two cells.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from ..core.constants import Bounds, WALL_STEPS
from ..core.exceptions import InvalidInputError
from ..core.models import Coord, Wall
from ..core.random_source import RandomSource
from ..io.display import MazeDisplay
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class MazeConfig:
    """Limits applied to interactively requested mazes."""

    min_dimension: int = 7
    max_dimension: int = 50
    seed: Optional[int] = None

    def validate_dimension(self, dimension: int) -> int:
        if not self.min_dimension <= dimension <= self.max_dimension:
            raise InvalidInputError(
                f"Maze dimension must be between {self.min_dimension} and "
                f"{self.max_dimension}, inclusive; got {dimension}"
            )
        return dimension


def grid_walls(rows: int, cols: int) -> List[Wall]:
    """Every interior wall of a ``rows x cols`` grid, row-major, east before south."""
    bounds = Bounds(rows=rows, cols=cols)
    walls: List[Wall] = []
    for r in range(rows):
        for c in range(cols):
            for dr, dc in WALL_STEPS:
                if bounds.contains(r + dr, c + dc):
                    walls.append(Wall.between((r, c), (r + dr, c + dc)))
    return walls


def shuffle_walls(walls: Sequence[Wall], random_source: RandomSource) -> List[Wall]:
    """Return a uniform random permutation of ``walls``.

    Repeatedly draws one of the remaining walls and appends it to the output.
    """
    remaining = list(walls)
    shuffled: List[Wall] = []
    while remaining:
        index = random_source.uniform_int(0, len(remaining) - 1)
        shuffled.append(remaining.pop(index))
    return shuffled


class ComponentTracker:
    """Tracks which cells are already joined by removed walls.

    Cells begin in the ``unmerged`` set and belong to no component. Merging
    creates, grows or unions components; components never overlap.
    """

    def __init__(self, cells: Iterable[Coord]) -> None:
        self.unmerged: Set[Coord] = set(cells)
        self._components: Dict[int, Set[Coord]] = {}
        self._owner: Dict[Coord, int] = {}
        self._next_id = 0

    @property
    def components(self) -> List[FrozenSet[Coord]]:
        return [frozenset(members) for members in self._components.values()]

    def component_of(self, cell: Coord) -> FrozenSet[Coord]:
        self._require_known(cell)
        owner = self._owner.get(cell)
        if owner is None:
            return frozenset({cell})
        return frozenset(self._components[owner])

    def connected(self, first: Coord, second: Coord) -> bool:
        if first == second:
            return True
        owner = self._owner.get(first)
        return owner is not None and owner == self._owner.get(second)

    def merge(self, first: Coord, second: Coord) -> None:
        """Join the components of two cells that are not yet connected."""
        self._require_known(first)
        self._require_known(second)
        if self.connected(first, second):
            raise InvalidInputError(f"{first} and {second} are already connected")

        first_free = first in self.unmerged
        second_free = second in self.unmerged
        if first_free and second_free:
            self._create(first, second)
        elif second_free:
            self._adopt(self._owner[first], second)
        elif first_free:
            self._adopt(self._owner[second], first)
        else:
            self._union(self._owner[first], self._owner[second])

    def _create(self, first: Coord, second: Coord) -> None:
        component_id = self._next_id
        self._next_id += 1
        self._components[component_id] = {first, second}
        for cell in (first, second):
            self.unmerged.discard(cell)
            self._owner[cell] = component_id

    def _adopt(self, component_id: int, cell: Coord) -> None:
        self._components[component_id].add(cell)
        self._owner[cell] = component_id
        self.unmerged.discard(cell)

    def _union(self, keep: int, evict: int) -> None:
        if len(self._components[keep]) < len(self._components[evict]):
            keep, evict = evict, keep
        moved = self._components.pop(evict)
        self._components[keep] |= moved
        for cell in moved:
            self._owner[cell] = keep

    def knows(self, cell: Coord) -> bool:
        return cell in self.unmerged or cell in self._owner

    def _require_known(self, cell: Coord) -> None:
        if not self.knows(cell):
            raise InvalidInputError(f"Unknown cell {cell}")


@dataclass
class MazeResult:
    rows: int
    cols: int
    removed: List[Wall] = field(default_factory=list)
    kept: List[Wall] = field(default_factory=list)
    components: List[FrozenSet[Coord]] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def passages(self, cell: Coord) -> List[Coord]:
        """Cells reachable from ``cell`` in one move through a removed wall."""
        reachable: List[Coord] = []
        for wall in self.removed:
            if wall.one == cell:
                reachable.append(wall.two)
            elif wall.two == cell:
                reachable.append(wall.one)
        return sorted(reachable)

    def is_spanning_tree(self) -> bool:
        """True when the removed walls connect every cell without a cycle."""
        if len(self.removed) != self.cell_count - 1:
            return False
        adjacency: Dict[Coord, List[Coord]] = {}
        for wall in self.removed:
            adjacency.setdefault(wall.one, []).append(wall.two)
            adjacency.setdefault(wall.two, []).append(wall.one)
        start = (0, 0)
        seen = {start}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for nxt in adjacency.get(cell, []):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        # n cells, n - 1 edges and connected implies acyclic.
        return len(seen) == self.cell_count


class UnionFindMazeBuilder:
    """Carves a maze out of a grid by merging chambers across shuffled walls."""

    def __init__(self, display: Optional[MazeDisplay] = None) -> None:
        self.display = display

    def build(self, rows: int, cols: int, random_source: RandomSource) -> MazeResult:
        """Generate every wall of the grid, shuffle them and carve."""
        walls = grid_walls(rows, cols) if rows > 0 and cols > 0 else []
        self._validate(rows, cols, walls)
        if self.display is not None:
            self.display.set_dimensions(rows, cols)
            for wall in walls:
                self.display.draw_wall(wall)
        result = self.carve(rows, cols, shuffle_walls(walls, random_source))
        LOGGER.info(
            "Built %dx%d maze: %d walls removed, %d kept",
            rows,
            cols,
            len(result.removed),
            len(result.kept),
        )
        return result

    def carve(self, rows: int, cols: int, walls: Sequence[Wall]) -> MazeResult:
        """Process ``walls`` in the given order over a ``rows x cols`` grid."""
        self._validate(rows, cols, walls)
        tracker = ComponentTracker((r, c) for r in range(rows) for c in range(cols))
        on_remove = self.display.remove_wall if self.display is not None else None
        removed, kept = remove_separating_walls(walls, tracker, on_remove)
        LOGGER.debug("Carved %d of %d walls", len(removed), len(walls))
        return MazeResult(
            rows=rows,
            cols=cols,
            removed=removed,
            kept=kept,
            components=tracker.components,
        )

    @staticmethod
    def _validate(rows: int, cols: int, walls: Sequence[Wall]) -> None:
        if rows <= 0 or cols <= 0:
            raise InvalidInputError(f"Maze dimensions must be positive, got {rows}x{cols}")
        if not walls:
            raise InvalidInputError(f"No walls to process for a {rows}x{cols} maze")
        bounds = Bounds(rows=rows, cols=cols)
        for wall in walls:
            if not (bounds.contains(*wall.one) and bounds.contains(*wall.two)):
                raise InvalidInputError(f"Wall {wall} lies outside the {rows}x{cols} grid")
            if not wall.is_orthogonal():
                raise InvalidInputError(f"Wall {wall} does not join adjacent cells")


def remove_separating_walls(
    walls: Iterable[Wall],
    tracker: ComponentTracker,
    on_remove: Optional[Callable[[Wall], None]] = None,
) -> Tuple[List[Wall], List[Wall]]:
    """Knock down each wall whose cells are not yet connected, in order.

    Returns ``(removed, kept)``. A wall between cells already in the same
    component is kept; any other wall is removed and its cells merged.
    """
    walls = list(walls)
    for wall in walls:
        for cell in wall.cells():
            if not tracker.knows(cell):
                raise InvalidInputError(f"Wall {wall} references unknown cell {cell}")
    removed: List[Wall] = []
    kept: List[Wall] = []
    for wall in walls:
        if tracker.connected(wall.one, wall.two):
            kept.append(wall)
            continue
        tracker.merge(wall.one, wall.two)
        removed.append(wall)
        if on_remove is not None:
            on_remove(wall)
    return removed, kept
