import random
import unittest

from pairlink.core.exceptions import CellStateError, OutOfBoundsError
from pairlink.core.models import Position
from pairlink.engine.generator import BoardGenerator, GeneratorConfig
from pairlink.engine.grid import Board
from pairlink.engine.shuffle import mark_matched, shuffle_board


class ShuffleTests(unittest.TestCase):
    def _board(self, seed: int = 3) -> Board:
        return BoardGenerator(GeneratorConfig(rows=4, cols=4, seed=seed)).generate("full")

    def test_preserves_positions_and_values(self) -> None:
        board = self._board()
        positions = [cell.position for cell in board.occupied_cells()]
        values = board.remaining_values()
        result = shuffle_board(board, random.Random(1))
        self.assertIs(result, board)
        self.assertEqual([cell.position for cell in board.occupied_cells()], positions)
        self.assertEqual(board.remaining_values(), values)

    def test_changes_assignment(self) -> None:
        board = self._board()
        before = board.to_rows()
        shuffle_board(board, random.Random(1))
        self.assertNotEqual(board.to_rows(), before)

    def test_seeded_shuffle_is_reproducible(self) -> None:
        first, second = self._board(), self._board()
        shuffle_board(first, random.Random(9))
        shuffle_board(second, random.Random(9))
        self.assertEqual(first.to_rows(), second.to_rows())

    def test_keeps_gaps_empty(self) -> None:
        board = Board.from_rows([["A", None, "B"], [None, "B", "A"]])
        shuffle_board(board, random.Random(4))
        self.assertTrue(board.is_empty(Position(2, 1)))
        self.assertTrue(board.is_empty(Position(1, 2)))
        self.assertEqual(board.remaining_values(), {"A": 2, "B": 2})

    def test_empty_board(self) -> None:
        board = Board(2, 2)
        shuffle_board(board, random.Random(0))
        self.assertTrue(board.is_cleared)


class MarkMatchedTests(unittest.TestCase):
    def test_clears_both_cells(self) -> None:
        board = Board.from_rows([["A", "B", "A"]])
        result = mark_matched(board, Position(1, 1), Position(3, 1))
        self.assertIs(result, board)
        self.assertEqual(board.to_rows(), [[None, "B", None]])

    def test_already_empty_cell_is_rejected_without_side_effects(self) -> None:
        board = Board.from_rows([["A", None, "B", "B"]])
        before = board.to_rows()
        with self.assertRaises(CellStateError):
            mark_matched(board, Position(1, 1), Position(2, 1))
        self.assertEqual(board.to_rows(), before)

    def test_same_cell_rejected(self) -> None:
        board = Board.from_rows([["A", "A"]])
        with self.assertRaises(CellStateError):
            mark_matched(board, Position(1, 1), Position(1, 1))
        self.assertEqual(board.occupied_count, 2)

    def test_out_of_bounds_rejected(self) -> None:
        board = Board.from_rows([["A", "A"]])
        with self.assertRaises(OutOfBoundsError):
            mark_matched(board, Position(1, 1), Position(7, 1))
        self.assertEqual(board.occupied_count, 2)


if __name__ == "__main__":
    unittest.main()
