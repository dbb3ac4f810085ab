"""Display collaborators notified by the engines.

Displays are purely observational: the engines call them after each state
change and never read anything back. A front end implements whichever
protocol it needs; :class:`NullDisplay` implements all of them as no-ops.
"""

from __future__ import annotations

from typing import Protocol

from ..core.constants import Player
from ..core.models import Wall


class BoardDisplay(Protocol):
    def label_cell(self, row: int, col: int, letter: str) -> None:
        ...

    def highlight_cell(self, row: int, col: int, on: bool) -> None:
        ...

    def record_word(self, word: str, player: Player) -> None:
        ...


class LifeDisplay(Protocol):
    def set_dimensions(self, rows: int, cols: int) -> None:
        ...

    def draw_cell(self, row: int, col: int, age: int) -> None:
        ...


class MazeDisplay(Protocol):
    def set_dimensions(self, rows: int, cols: int) -> None:
        ...

    def draw_wall(self, wall: Wall) -> None:
        ...

    def remove_wall(self, wall: Wall) -> None:
        ...


class NullDisplay:
    """Accepts every notification and ignores it."""

    def set_dimensions(self, rows: int, cols: int) -> None:
        pass

    def label_cell(self, row: int, col: int, letter: str) -> None:
        pass

    def highlight_cell(self, row: int, col: int, on: bool) -> None:
        pass

    def record_word(self, word: str, player: Player) -> None:
        pass

    def draw_cell(self, row: int, col: int, age: int) -> None:
        pass

    def draw_wall(self, wall: Wall) -> None:
        pass

    def remove_wall(self, wall: Wall) -> None:
        pass
