"""Word list loading with whole-word and prefix lookups."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Set

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .normalization import clean_word

LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading and filtering."""

    path: Optional[Path | str] = None
    min_length: int = 1
    max_length: int = 25
    encoding: str = "utf-8"


class WordDictionary:
    """Case-insensitive word set answering ``contains`` and ``contains_prefix``.

    Words are stored normalized (see :func:`clean_word`) in a sorted list so a
    prefix query is a single binary search.
    """

    def __init__(self, config: DictionaryConfig, words: Optional[Iterable[str]] = None) -> None:
        self.config = config
        self._words: Set[str] = set()
        self._sorted: List[str] = []
        if words is not None:
            self._hydrate(words)
        elif config.path is not None:
            self._load()
        else:
            raise DictionaryLoadError("DictionaryConfig needs a path when no words are given")

    @classmethod
    def from_words(cls, words: Iterable[str], min_length: int = 1) -> "WordDictionary":
        return cls(DictionaryConfig(min_length=min_length), words=words)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def _load(self) -> None:
        source = Path(self.config.path)  # type: ignore[arg-type]
        if not source.exists():
            raise DictionaryLoadError(f"Missing word list: {source}")
        try:
            text = source.read_text(encoding=self.config.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Cannot read word list {source}: {exc}") from exc
        self._hydrate(_iter_entries(text.splitlines()))
        LOGGER.info("Loaded %d words from %s", len(self._words), source)

    def _hydrate(self, words: Iterable[str]) -> None:
        for raw in words:
            word = clean_word(raw)
            if not self.config.min_length <= len(word) <= self.config.max_length:
                continue
            self._words.add(word)
        self._sorted = sorted(self._words)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def sanitize(self, text: str) -> str:
        return clean_word(text)

    def contains(self, word: str) -> bool:
        return self.sanitize(word) in self._words

    def contains_prefix(self, prefix: str) -> bool:
        """Return True when some word starts with ``prefix`` (a word is its own prefix)."""
        key = self.sanitize(prefix)
        if not key:
            return bool(self._sorted)
        index = bisect_left(self._sorted, key)
        return index < len(self._sorted) and self._sorted[index].startswith(key)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._sorted)


def _iter_entries(lines: Iterable[str]) -> Iterator[str]:
    """Yield word entries, skipping blank lines and ``#`` comments."""
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line
