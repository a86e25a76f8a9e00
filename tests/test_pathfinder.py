import random
import unittest

from pairlink.core.exceptions import CellStateError, OutOfBoundsError
from pairlink.core.models import Position
from pairlink.engine.generator import BoardGenerator, GeneratorConfig
from pairlink.engine.grid import Board
from pairlink.engine.pathfinder import count_turns, find_path, path_corners
from pairlink.engine.validator import validate_path

from helpers import brute_force_connectable, occupied_pairs


class PathShapeTests(unittest.TestCase):
    def test_adjacent_tiles_connect_directly(self) -> None:
        board = Board.from_rows([["A", "A"]])
        path = find_path(Position(1, 1), Position(2, 1), board)
        self.assertEqual(path, [Position(1, 1), Position(2, 1)])

    def test_straight_run_through_gap(self) -> None:
        board = Board.from_rows([["A", None, None, "A"]])
        path = find_path(Position(1, 1), Position(4, 1), board)
        self.assertIsNotNone(path)
        self.assertEqual(len(path), 4)
        self.assertEqual(count_turns(path), 0)

    def test_single_corner(self) -> None:
        board = Board.from_rows([["A", None], [None, "A"]])
        path = find_path(Position(1, 1), Position(2, 2), board)
        self.assertIsNotNone(path)
        self.assertEqual(len(path), 3)
        self.assertEqual(count_turns(path), 1)

    def test_prefers_fewest_turns(self) -> None:
        board = Board.from_rows([["A", None, "A"], [None, None, None]])
        path = find_path(Position(1, 1), Position(3, 1), board)
        self.assertEqual(count_turns(path), 0)

    def test_route_through_border(self) -> None:
        board = Board.from_rows([["A", "B", "A"]])
        path = find_path(Position(1, 1), Position(3, 1), board)
        self.assertIsNotNone(path)
        self.assertEqual(count_turns(path), 2)
        self.assertTrue(any(board.is_border(pos.x, pos.y) for pos in path))
        validate_path(board, path)

    def test_three_bends_needed_is_rejected(self) -> None:
        board = Board.from_rows([["A", "B"], ["B", "A"]])
        self.assertIsNone(find_path(Position(1, 1), Position(2, 2), board))
        self.assertIsNone(find_path(Position(2, 1), Position(1, 2), board))

    def test_alternating_row_end_tiles_connect(self) -> None:
        board = Board.from_rows([["A", "B", "A", "B", "A", "B"]])
        path = find_path(Position(1, 1), Position(5, 1), board)
        self.assertIsNotNone(path)
        validate_path(board, path)

    def test_values_are_not_compared(self) -> None:
        board = Board.from_rows([["A", "B"]])
        self.assertIsNotNone(find_path(Position(1, 1), Position(2, 1), board))

    def test_path_corners(self) -> None:
        board = Board.from_rows([["A", "B", "A"]])
        path = find_path(Position(1, 1), Position(3, 1), board)
        corners = path_corners(path)
        self.assertEqual(corners[0], Position(1, 1))
        self.assertEqual(corners[-1], Position(3, 1))
        self.assertEqual(len(corners), 4)
        self.assertEqual(path_corners([Position(1, 1), Position(2, 1)]), [Position(1, 1), Position(2, 1)])


class PathPreconditionTests(unittest.TestCase):
    def test_out_of_bounds_rejected(self) -> None:
        board = Board.from_rows([["A", "A"]])
        with self.assertRaises(OutOfBoundsError):
            find_path(Position(1, 1), Position(10, 10), board)
        with self.assertRaises(OutOfBoundsError):
            find_path(Position(-1, 0), Position(1, 1), board)

    def test_identical_endpoints_rejected(self) -> None:
        board = Board.from_rows([["A", "A"]])
        with self.assertRaises(CellStateError):
            find_path(Position(1, 1), Position(1, 1), board)

    def test_empty_endpoint_rejected(self) -> None:
        board = Board.from_rows([["A", None]])
        with self.assertRaises(CellStateError):
            find_path(Position(1, 1), Position(2, 1), board)


class PathPropertyTests(unittest.TestCase):
    def _boards(self):
        for seed in range(12):
            config = GeneratorConfig(rows=3, cols=4, palette=("A", "B", "C"))
            yield BoardGenerator(config, rng=random.Random(seed)).generate()

    def test_returned_paths_are_legal(self) -> None:
        for board in self._boards():
            for first, second in occupied_pairs(board):
                path = find_path(first.position, second.position, board)
                if path is None:
                    continue
                with self.subTest(start=first.position, end=second.position):
                    self.assertEqual(path[0], first.position)
                    self.assertEqual(path[-1], second.position)
                    self.assertLessEqual(count_turns(path), 2)
                    validate_path(board, path)

    def test_agrees_with_brute_force(self) -> None:
        for board in self._boards():
            for first, second in occupied_pairs(board):
                with self.subTest(start=first.position, end=second.position):
                    found = find_path(first.position, second.position, board) is not None
                    self.assertEqual(
                        found, brute_force_connectable(board, first.position, second.position)
                    )


if __name__ == "__main__":
    unittest.main()
