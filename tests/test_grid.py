import unittest

from gridplay.core.constants import KING_STEPS, ORTHOGONAL_STEPS, Bounds
from gridplay.core.exceptions import InvalidInputError, OutOfBoundsError
from gridplay.core.models import Wall
from gridplay.engine.grid import Grid


class GridAccessTests(unittest.TestCase):
    def test_get_and_set_round_trip_in_place(self) -> None:
        grid = Grid(2, 3, 0)
        grid.set(1, 2, 7)
        grid[(0, 1)] = 4
        self.assertEqual(grid.get(1, 2), 7)
        self.assertEqual(grid[(0, 1)], 4)
        self.assertEqual(grid.to_rows(), [[0, 4, 0], [0, 0, 7]])

    def test_out_of_bounds_access_raises(self) -> None:
        grid = Grid(2, 2, "A")
        for row, col in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
            with self.assertRaises(OutOfBoundsError):
                grid.get(row, col)
        with self.assertRaises(OutOfBoundsError):
            grid.set(5, 5, "B")

    def test_out_of_bounds_is_an_index_error(self) -> None:
        grid = Grid(1, 1, 0)
        with self.assertRaises(IndexError):
            grid[(3, 3)]

    def test_dimensions_must_be_positive(self) -> None:
        with self.assertRaises(InvalidInputError):
            Grid(0, 3, 0)

    def test_from_rows_rejects_ragged_input(self) -> None:
        with self.assertRaises(InvalidInputError):
            Grid.from_rows([["A", "B"], ["C"]])

    def test_rows_do_not_share_storage(self) -> None:
        grid = Grid(2, 2, 0)
        grid.set(0, 0, 1)
        self.assertEqual(grid.get(1, 0), 0)

    def test_equality_by_content(self) -> None:
        self.assertEqual(Grid.from_rows([[1, 2]]), Grid.from_rows([[1, 2]]))
        self.assertNotEqual(Grid.from_rows([[1, 2]]), Grid.from_rows([[2, 1]]))


class GridIterationTests(unittest.TestCase):
    def test_coords_are_row_major(self) -> None:
        grid = Grid(2, 2, None)
        self.assertEqual(list(grid.coords()), [(0, 0), (0, 1), (1, 0), (1, 1)])

    def test_king_neighbors_in_corner_and_centre(self) -> None:
        grid = Grid(3, 3, ".")
        self.assertEqual(list(grid.neighbors((0, 0), KING_STEPS)), [(0, 1), (1, 0), (1, 1)])
        centre = list(grid.neighbors((1, 1), KING_STEPS))
        self.assertEqual(len(centre), 8)
        self.assertEqual(centre[0], (0, 0))
        self.assertEqual(centre[-1], (2, 2))
        self.assertNotIn((1, 1), centre)

    def test_orthogonal_neighbors_on_edge(self) -> None:
        grid = Grid(3, 3, ".")
        self.assertEqual(sorted(grid.neighbors((0, 1), ORTHOGONAL_STEPS)), [(0, 0), (0, 2), (1, 1)])


class ModelTests(unittest.TestCase):
    def test_wall_is_unordered(self) -> None:
        self.assertEqual(Wall.between((0, 1), (0, 0)), Wall.between((0, 0), (0, 1)))
        self.assertEqual(len({Wall.between((1, 1), (1, 2)), Wall.between((1, 2), (1, 1))}), 1)

    def test_wall_constructor_normalises_endpoints(self) -> None:
        wall = Wall((0, 1), (0, 0))
        self.assertEqual((wall.one, wall.two), ((0, 0), (0, 1)))
        self.assertEqual(wall, Wall.between((0, 0), (0, 1)))
        self.assertEqual(hash(wall), hash(Wall((0, 0), (0, 1))))

    def test_wall_orthogonality(self) -> None:
        self.assertTrue(Wall.between((0, 0), (1, 0)).is_orthogonal())
        self.assertFalse(Wall.between((0, 0), (1, 1)).is_orthogonal())

    def test_bounds_contains(self) -> None:
        bounds = Bounds(rows=2, cols=3)
        self.assertTrue(bounds.contains(1, 2))
        self.assertFalse(bounds.contains(2, 0))
        self.assertEqual(bounds.size, 6)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
