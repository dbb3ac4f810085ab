"""CLI entrypoint for the Boggle, Life and maze engines."""

from __future__ import annotations

import argparse
import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from gridplay.core.constants import MAX_AGE, Player
from gridplay.core.exceptions import GridPlayError
from gridplay.core.random_source import SeededRandomSource
from gridplay.data.dictionary import DictionaryConfig, WordDictionary
from gridplay.data.patterns import load_pattern
from gridplay.engine.boggle import BoggleConfig, BoggleGame, board_from_string, roll_board
from gridplay.engine.life import LifeConfig, LifeSimulation, LifeStepper
from gridplay.engine.maze import MazeConfig, UnionFindMazeBuilder
from gridplay.utils.logger import configure_logging
from gridplay.utils.pretty import (
    format_letter_board,
    format_life_board,
    format_maze,
    pretty_print,
)

# Milliseconds between generations; 0 waits for the user to press enter.
SPEEDS: Dict[str, int] = {"slow": 1000, "medium": 250, "fast": 100, "manual": 0}
QUIT_COMMAND = "quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Word search, Game of Life and maze generation on rectangular grids",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format for the final result",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    boggle = commands.add_parser("boggle", help="Play a Boggle round against the computer")
    boggle.add_argument("--dictionary", type=Path, required=True, help="Word list, one word per line")
    boggle.add_argument("--board", type=str, help="Force the board letters, row by row")
    boggle.add_argument("--big", action="store_true", help="Use the 5x5 Big Boggle cube set")
    boggle.add_argument("--seed", type=int, default=None, help="Random seed for the dice")
    boggle.add_argument("--guess", nargs="*", default=[], metavar="WORD", help="Human guesses")

    life = commands.add_parser("life", help="Run a Game of Life simulation")
    life.add_argument("pattern", type=Path, help="Initial configuration file")
    life.add_argument("--max-generations", type=int, default=1000, help="Stop after this many steps")
    life.add_argument("--max-age", type=int, default=MAX_AGE, help="Age at which a cell is mature")
    life.add_argument(
        "--speed",
        choices=sorted(SPEEDS),
        default=None,
        help="Print every generation at this pace (manual waits for enter, 'quit' stops)",
    )

    maze = commands.add_parser("maze", help="Generate a maze")
    maze.add_argument("--dimension", type=int, required=True, help="Cells per side")
    maze.add_argument("--seed", type=int, default=None, help="Random seed for the wall order")
    return parser


def run_boggle(args: argparse.Namespace) -> Dict[str, Any]:
    config = BoggleConfig()
    dimension = config.big_dimension if args.big else config.standard_dimension
    if args.board:
        board = board_from_string(args.board, dimension)
    else:
        board = roll_board(dimension, SeededRandomSource(args.seed), config)

    dictionary = WordDictionary(DictionaryConfig(path=args.dictionary))
    game = BoggleGame(board, dictionary, config)
    guesses = [game.guess(word) for word in args.guess]
    computer_words = game.computer_turn()

    return {
        "board": board.to_rows(),
        "text": format_letter_board(board),
        "guesses": [{"word": g.word, "outcome": g.outcome.value} for g in guesses],
        "human_words": game.found[Player.HUMAN],
        "computer_words": computer_words,
        "scores": {player.value: game.score(player) for player in Player},
    }


def run_life(
    args: argparse.Namespace,
    prompt: Callable[[str], str] = input,
    sleep: Callable[[float], None] = time.sleep,
) -> Dict[str, Any]:
    config = LifeConfig(max_age=args.max_age)
    pattern = load_pattern(args.pattern)
    simulation = LifeSimulation(pattern.to_board(), LifeStepper(config))

    if args.speed is None:
        simulation.run(args.max_generations)
    else:
        pause_ms = SPEEDS[args.speed]
        while not simulation.stabilized and simulation.generation < args.max_generations:
            if pause_ms == 0 and _read_command(prompt) == QUIT_COMMAND:
                break
            simulation.advance()
            print(format_life_board(simulation.board, config.max_age), end="\n\n")
            if pause_ms:
                sleep(pause_ms / 1000)

    return {
        "rows": simulation.board.rows,
        "cols": simulation.board.cols,
        "generation": simulation.generation,
        "stabilized": simulation.stabilized,
        "population": simulation.board.population,
        "ages": simulation.board.to_rows(),
        "text": format_life_board(simulation.board, config.max_age),
    }


def _read_command(prompt: Callable[[str], str]) -> str:
    """Read one manual-mode command; a closed input stream counts as quit."""
    try:
        return prompt("").strip()
    except EOFError:
        return QUIT_COMMAND


def run_maze(args: argparse.Namespace) -> Dict[str, Any]:
    config = MazeConfig(seed=args.seed)
    dimension = config.validate_dimension(args.dimension)
    result = UnionFindMazeBuilder().build(dimension, dimension, SeededRandomSource(config.seed))
    return {
        "rows": result.rows,
        "cols": result.cols,
        "removed": [[list(w.one), list(w.two)] for w in result.removed],
        "kept": [[list(w.one), list(w.two)] for w in result.kept],
        "text": format_maze(result),
    }


COMMANDS: Dict[str, Callable[[argparse.Namespace], Dict[str, Any]]] = {
    "boggle": run_boggle,
    "life": run_life,
    "maze": run_maze,
}


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    try:
        payload = COMMANDS[args.command](args)
    except GridPlayError as exc:
        parser.error(str(exc))

    if args.format == "text":
        pretty_print(payload["text"])
    else:
        print(json.dumps(payload, ensure_ascii=False, indent=2))


if __name__ == "__main__":  # pragma: no cover
    main()
