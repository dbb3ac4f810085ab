"""Boggle rounds: board setup, human guesses and the computer's sweep."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import MIN_WORD_LENGTH, Player
from ..core.exceptions import InvalidInputError
from ..core.models import WordPath
from ..core.random_source import RandomSource
from ..data.cubes import BIG_CUBES, STANDARD_CUBES
from ..data.dictionary import WordDictionary
from ..data.normalization import is_alphabetic
from ..io.display import BoardDisplay
from ..utils.logger import get_logger
from .grid import Grid
from .word_search import GridPathSearch

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class BoggleConfig:
    """Game constants; one instance is shared by every round."""

    min_word_length: int = MIN_WORD_LENGTH
    standard_dimension: int = 4
    big_dimension: int = 5
    standard_cubes: Tuple[str, ...] = STANDARD_CUBES
    big_cubes: Tuple[str, ...] = BIG_CUBES

    def cubes_for(self, dimension: int) -> Tuple[str, ...]:
        if dimension == self.standard_dimension:
            return self.standard_cubes
        if dimension == self.big_dimension:
            return self.big_cubes
        raise InvalidInputError(
            f"No cube set for a {dimension}x{dimension} board "
            f"(expected {self.standard_dimension} or {self.big_dimension})"
        )


class GuessOutcome(str, Enum):
    ACCEPTED = "ACCEPTED"
    TOO_SHORT = "TOO_SHORT"
    NOT_A_WORD = "NOT_A_WORD"
    ALREADY_FOUND = "ALREADY_FOUND"
    NOT_ON_BOARD = "NOT_ON_BOARD"


@dataclass
class GuessResult:
    word: str
    outcome: GuessOutcome
    path: Optional[WordPath] = None

    @property
    def accepted(self) -> bool:
        return self.outcome is GuessOutcome.ACCEPTED


def roll_board(
    dimension: int,
    random_source: RandomSource,
    config: Optional[BoggleConfig] = None,
) -> Grid[str]:
    """Shuffle the cube set for ``dimension`` and roll one face per cube."""

    config = config or BoggleConfig()
    cubes = list(config.cubes_for(dimension))
    for i in range(len(cubes)):
        swap = random_source.uniform_int(i, len(cubes) - 1)
        cubes[i], cubes[swap] = cubes[swap], cubes[i]
    faces = [cube[random_source.uniform_int(0, len(cube) - 1)] for cube in cubes]
    return _fill_board(dimension, faces)


def board_from_string(text: str, dimension: int) -> Grid[str]:
    """Build a board from ``dimension * dimension`` letters given row by row."""

    letters = text.strip()
    if len(letters) != dimension * dimension:
        raise InvalidInputError(
            f"Board string must include {dimension * dimension} characters, got {len(letters)}"
        )
    if not is_alphabetic(letters):
        raise InvalidInputError("All characters in the board string must be alphabetic")
    return _fill_board(dimension, list(letters.upper()))


def _fill_board(dimension: int, letters: Sequence[str]) -> Grid[str]:
    board: Grid[str] = Grid(dimension, dimension, "")
    for (row, col), letter in zip(board.coords(), letters):
        board.set(row, col, letter)
    return board


class BoggleGame:
    """One round: the human guesses first, then the computer takes the rest."""

    def __init__(
        self,
        board: Grid[str],
        dictionary: WordDictionary,
        config: Optional[BoggleConfig] = None,
        display: Optional[BoardDisplay] = None,
    ) -> None:
        self.board = board
        self.dictionary = dictionary
        self.config = config or BoggleConfig()
        self.display = display
        self.search = GridPathSearch(board, min_length=self.config.min_word_length)
        self.found: Dict[Player, List[str]] = {Player.HUMAN: [], Player.COMPUTER: []}
        if self.display is not None:
            for row, col in board.coords():
                self.display.label_cell(row, col, board.get(row, col))

    def guess(self, word: str) -> GuessResult:
        candidate = self.dictionary.sanitize(word)
        if len(candidate) < self.config.min_word_length:
            return GuessResult(candidate, GuessOutcome.TOO_SHORT)
        if not self.dictionary.contains(candidate):
            return GuessResult(candidate, GuessOutcome.NOT_A_WORD)
        if candidate in self.found[Player.HUMAN]:
            return GuessResult(candidate, GuessOutcome.ALREADY_FOUND)

        path = self.search.find_path(candidate)
        if path is None:
            LOGGER.debug("Rejected %s: not on the board", candidate)
            return GuessResult(candidate, GuessOutcome.NOT_ON_BOARD)

        self._flash(path)
        self._record(candidate, Player.HUMAN)
        return GuessResult(candidate, GuessOutcome.ACCEPTED, path)

    def computer_turn(self) -> List[str]:
        """Find every remaining word the human missed."""
        words = self.search.find_all_words(self.dictionary, exclude=self.found[Player.HUMAN])
        for word in words:
            self._record(word, Player.COMPUTER)
        LOGGER.info("Computer found %d words", len(words))
        return words

    def score(self, player: Player) -> int:
        return sum(self.word_score(word) for word in self.found[player])

    def word_score(self, word: str) -> int:
        """A minimum-length word scores 1; each extra letter adds 1."""
        return max(0, len(word) - self.config.min_word_length + 1)

    def _record(self, word: str, player: Player) -> None:
        self.found[player].append(word)
        if self.display is not None:
            self.display.record_word(word, player)

    def _flash(self, path: WordPath) -> None:
        if self.display is None:
            return
        for row, col in path.cells:
            self.display.highlight_cell(row, col, True)
        for row, col in path.cells:
            self.display.highlight_cell(row, col, False)
