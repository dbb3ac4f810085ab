import io
import tempfile
import unittest
from pathlib import Path

from gridplay.core.exceptions import InvalidInputError, PatternLoadError
from gridplay.core.models import Wall
from gridplay.data.dictionary import WordDictionary
from gridplay.data.patterns import load_pattern, parse_pattern
from gridplay.engine.boggle import BoggleGame, board_from_string
from gridplay.engine.grid import Grid
from gridplay.engine.life import LifeBoard, LifeSimulation
from gridplay.engine.maze import UnionFindMazeBuilder, grid_walls
from gridplay.io.display import NullDisplay
from gridplay.utils.pretty import (
    age_symbol,
    format_letter_board,
    format_life_board,
    format_maze,
    pretty_print,
)

GLIDER = """# Glider
# travels down and to the right
5
6
.X....
..X...
XXX...
......
......
"""


class PatternParsingTests(unittest.TestCase):
    def test_parses_comments_dimensions_and_cells(self) -> None:
        pattern = parse_pattern(GLIDER)
        self.assertEqual((pattern.rows, pattern.cols), (5, 6))
        self.assertEqual(pattern.alive, frozenset({(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)}))
        board = pattern.to_board()
        self.assertEqual(board.population, 5)
        self.assertEqual(board.age(2, 2), 1)

    def test_short_rows_are_padded_with_dead_cells(self) -> None:
        pattern = parse_pattern("2\n4\nX\n..X\n")
        self.assertEqual(pattern.alive, frozenset({(0, 0), (1, 2)}))

    def test_characters_past_the_last_column_are_ignored(self) -> None:
        pattern = parse_pattern("2\n2\nXXX\n.XXXX\n")
        self.assertEqual(pattern.alive, frozenset({(0, 0), (0, 1), (1, 1)}))

    def test_malformed_patterns_raise(self) -> None:
        bad_inputs = [
            "",
            "# only comments\n",
            "three\n4\n....\n",
            "2\n0\n",
            "3\n3\n...\n...\n",
        ]
        for text in bad_inputs:
            with self.subTest(text=text):
                with self.assertRaises(PatternLoadError):
                    parse_pattern(text)

    def test_pattern_errors_are_input_errors(self) -> None:
        with self.assertRaises(InvalidInputError):
            parse_pattern("x\n")

    def test_load_pattern_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "glider.txt"
            path.write_text(GLIDER, encoding="utf-8")
            self.assertEqual(load_pattern(path), parse_pattern(GLIDER))
            with self.assertRaises(PatternLoadError):
                load_pattern(Path(tmpdir) / "missing.txt")


class PrettyTests(unittest.TestCase):
    def test_letter_board_has_header_and_row_labels(self) -> None:
        text = format_letter_board(Grid.from_rows([["A", "B"], ["C", "D"]]))
        lines = text.splitlines()
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[2].startswith(" 0 |"))
        self.assertIn("D", lines[3])

    def test_age_symbols(self) -> None:
        self.assertEqual(age_symbol(0), ".")
        self.assertEqual(age_symbol(1), "1")
        self.assertEqual(age_symbol(11), "b")
        self.assertEqual(age_symbol(20), "@")
        self.assertEqual(age_symbol(3, max_age=3), "@")

    def test_life_board_rendering(self) -> None:
        board = LifeBoard.from_coords(2, 3, [(0, 1), (1, 2)])
        board.set_age(1, 2, 20)
        self.assertEqual(format_life_board(board), ".1.\n..@")

    def test_reversed_wall_renders_open(self) -> None:
        result = UnionFindMazeBuilder().carve(1, 2, [Wall((0, 1), (0, 0))])
        self.assertEqual(format_maze(result).splitlines()[1], "|       |")

    def test_maze_rendering_opens_removed_walls(self) -> None:
        result = UnionFindMazeBuilder().carve(2, 2, grid_walls(2, 2))
        self.assertEqual(
            format_maze(result),
            "\n".join([
                "+---+---+",
                "|       |",
                "+   +   +",
                "|   |   |",
                "+---+---+",
            ]),
        )


class NullDisplayTests(unittest.TestCase):
    def test_engines_accept_the_null_display(self) -> None:
        display = NullDisplay()
        simulation = LifeSimulation(LifeBoard.from_coords(3, 3, [(1, 1)]), display=display)
        self.assertEqual(simulation.run(5), 2)
        maze = UnionFindMazeBuilder(display=display).carve(2, 2, grid_walls(2, 2))
        self.assertTrue(maze.is_spanning_tree())
        game = BoggleGame(
            board_from_string("CATSORDEWNILQQQQ", 4),
            WordDictionary.from_words(["CATS"]),
            display=display,
        )
        self.assertTrue(game.guess("CATS").accepted)

    def test_pretty_print_writes_label_then_text(self) -> None:
        stream = io.StringIO()
        pretty_print("abc", label="Board", stream=stream)
        self.assertEqual(stream.getvalue(), "Board\nabc\n")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
