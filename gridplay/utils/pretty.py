"""Plain-text renderers for boards, Life generations and mazes."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, Set, TextIO

from ..core.constants import MAX_AGE
from ..core.models import Wall

if TYPE_CHECKING:
    from ..engine.grid import Grid
    from ..engine.life import LifeBoard
    from ..engine.maze import MazeResult


DEAD_SYMBOL = "."
MATURE_SYMBOL = "@"


def format_letter_board(board: Grid[str]) -> str:
    header_cells = [f"{c:>2}" for c in range(board.cols)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * board.cols - 1))
    for r in range(board.rows):
        row_render = " ".join(f"{board.get(r, c):>2}" for c in range(board.cols))
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def age_symbol(age: int, max_age: int = MAX_AGE) -> str:
    """``.`` for dead, ``@`` once mature, otherwise a base-36 age digit."""
    if age <= 0:
        return DEAD_SYMBOL
    if age >= max_age:
        return MATURE_SYMBOL
    return "0123456789abcdefghijklmnopqrstuvwxyz"[min(age, 35)]


def format_life_board(board: LifeBoard, max_age: int = MAX_AGE) -> str:
    return "\n".join(
        "".join(age_symbol(board.age(r, c), max_age) for c in range(board.cols))
        for r in range(board.rows)
    )


def format_maze(maze: MazeResult) -> str:
    """Draw the maze with ``+``, ``-`` and ``|`` borders; removed walls are gaps."""
    open_walls: Set[Wall] = set(maze.removed)
    lines = ["+" + "---+" * maze.cols]
    for r in range(maze.rows):
        row = "|"
        floor = "+"
        for c in range(maze.cols):
            east_open = c + 1 < maze.cols and Wall.between((r, c), (r, c + 1)) in open_walls
            south_open = r + 1 < maze.rows and Wall.between((r, c), (r + 1, c)) in open_walls
            row += "   " + (" " if east_open else "|")
            floor += ("   " if south_open else "---") + "+"
        lines.append(row)
        lines.append(floor)
    return "\n".join(lines)


def pretty_print(text: str, *, label: Optional[str] = None, stream: Optional[TextIO] = None) -> None:
    """Print ``text`` under an optional label."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(text, file=stream)
