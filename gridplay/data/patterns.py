"""Plain-text loader for initial Life configurations.

Format::

    # any number of leading comment lines
    5          <- rows
    7          <- columns
    .......
    ..X....    <- one line per row, X marks a live cell
    ...X...
    .XXX...
    .......

Characters other than ``X`` are dead cells. Rows shorter than the column
count are padded with dead cells; characters past it are ignored.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List

from ..core.exceptions import PatternLoadError
from ..core.models import Coord
from ..engine.life import LifeBoard
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

COMMENT_MARKER = "#"
LIVE_MARKER = "X"


@dataclass(frozen=True)
class LifePattern:
    rows: int
    cols: int
    alive: FrozenSet[Coord] = field(default_factory=frozenset)

    def to_board(self) -> LifeBoard:
        return LifeBoard.from_coords(self.rows, self.cols, self.alive)


def parse_pattern(text: str) -> LifePattern:
    lines = text.splitlines()
    index = 0
    while index < len(lines) and lines[index].startswith(COMMENT_MARKER):
        index += 1

    rows = _parse_dimension(lines, index, "row")
    cols = _parse_dimension(lines, index + 1, "column")
    body: List[str] = lines[index + 2 : index + 2 + rows]
    if len(body) < rows:
        raise PatternLoadError(f"Pattern declares {rows} rows but only {len(body)} follow")

    alive = set()
    for r, line in enumerate(body):
        for c, char in enumerate(line[:cols]):
            if char == LIVE_MARKER:
                alive.add((r, c))
    return LifePattern(rows=rows, cols=cols, alive=frozenset(alive))


def load_pattern(path: Path | str) -> LifePattern:
    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise PatternLoadError(f"Cannot read pattern file {source}: {exc}") from exc
    pattern = parse_pattern(text)
    LOGGER.info(
        "Loaded %dx%d pattern with %d live cells from %s",
        pattern.rows,
        pattern.cols,
        len(pattern.alive),
        source,
    )
    return pattern


def _parse_dimension(lines: List[str], index: int, label: str) -> int:
    if index >= len(lines):
        raise PatternLoadError(f"Pattern is missing its {label} count")
    try:
        value = int(lines[index].strip())
    except ValueError as exc:
        raise PatternLoadError(f"Invalid {label} count: {lines[index]!r}") from exc
    if value <= 0:
        raise PatternLoadError(f"The {label} count must be positive, got {value}")
    return value
