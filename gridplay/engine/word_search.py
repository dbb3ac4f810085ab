"""Depth-first word search over a letter board.

Both searches walk simple paths of king-move adjacent cells (no cell used
twice). The walk keeps an explicit stack of ``(cell, neighbour iterator)``
frames together with a visited set, so the depth of the search is bounded by
the board size rather than by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, List, Optional, Set, Tuple

from ..core.constants import KING_STEPS, MIN_WORD_LENGTH
from ..core.exceptions import InvalidInputError
from ..core.models import Coord, WordPath
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger
from .grid import Grid

LOGGER = get_logger(__name__)


class GridPathSearch:
    """Finds words spelled by simple paths on a :class:`Grid` of letters."""

    def __init__(self, board: Grid[str], min_length: int = MIN_WORD_LENGTH) -> None:
        self.board = board
        self.min_length = min_length

    # ------------------------------------------------------------------
    # Single target
    # ------------------------------------------------------------------
    def find_path(self, target: str) -> Optional[WordPath]:
        """Return one path spelling ``target`` exactly, or ``None``.

        Start cells are tried in row-major order and neighbours in
        :data:`KING_STEPS` order; the first complete match wins.
        """

        target = target.upper()
        if not target or len(target) < self.min_length:
            raise InvalidInputError(
                f"Search target must have at least {self.min_length} letters, got {target!r}"
            )

        def descend(prefix: str) -> bool:
            return len(prefix) < len(target) and target.startswith(prefix)

        for start in self.board.coords():
            for prefix, cells in self._walk(start, descend):
                if prefix == target:
                    LOGGER.debug("Found %s starting at %s", target, start)
                    return WordPath(word=target, cells=cells)
        LOGGER.debug("%s is not on the board", target)
        return None

    def contains_word(self, target: str) -> bool:
        return self.find_path(target) is not None

    # ------------------------------------------------------------------
    # Exhaustive enumeration
    # ------------------------------------------------------------------
    def iter_word_paths(
        self,
        dictionary: WordDictionary,
        exclude: Iterable[str] = (),
    ) -> Iterator[WordPath]:
        """Yield the first path found for every dictionary word on the board.

        Words listed in ``exclude`` are skipped. Branches are pruned as soon as
        the dictionary reports no word continues the current prefix.
        """

        seen: Set[str] = {word.upper() for word in exclude}
        for start in self.board.coords():
            for prefix, cells in self._walk(start, dictionary.contains_prefix):
                if len(prefix) < self.min_length or prefix in seen:
                    continue
                if dictionary.contains(prefix):
                    seen.add(prefix)
                    yield WordPath(word=prefix, cells=cells)

    def find_all_words(
        self,
        dictionary: WordDictionary,
        exclude: Iterable[str] = (),
    ) -> List[str]:
        """Return every dictionary word on the board, sorted, each once."""

        words = sorted(path.word for path in self.iter_word_paths(dictionary, exclude))
        LOGGER.debug("Exhaustive search found %d words", len(words))
        return words

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------
    def _walk(
        self,
        start: Coord,
        descend: Callable[[str], bool],
    ) -> Iterator[Tuple[str, Tuple[Coord, ...]]]:
        """Yield ``(prefix, cells)`` for every simple path from ``start``.

        A path is extended only while ``descend(prefix)`` holds for it. The
        visited set is owned by this walk and rolled back on every pop.
        """

        board = self.board
        path: List[Coord] = [start]
        prefixes: List[str] = [board[start].upper()]
        visited: Set[Coord] = {start}

        yield prefixes[-1], tuple(path)
        if not descend(prefixes[-1]):
            return
        stack: List[Iterator[Coord]] = [board.neighbors(start, KING_STEPS)]

        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                visited.discard(path.pop())
                prefixes.pop()
                continue
            if step in visited:
                continue
            prefix = prefixes[-1] + board[step].upper()
            path.append(step)
            prefixes.append(prefix)
            visited.add(step)
            yield prefix, tuple(path)
            if descend(prefix):
                stack.append(board.neighbors(step, KING_STEPS))
            else:
                visited.discard(path.pop())
                prefixes.pop()

