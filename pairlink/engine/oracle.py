"""Solvability checks: hints and available-move scans."""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..core.models import Position
from .grid import Board
from .pathfinder import find_path


Move = Tuple[Position, Position]


def iter_moves(board: Board) -> Iterator[Move]:
    """Yield every connectable same-value pair in a stable order.

    Occupied cells are taken in row-major order and pairs in nested
    ``i < j`` order, so the same board always yields the same sequence.
    """

    tiles = board.occupied_cells()
    for i, first in enumerate(tiles):
        for second in tiles[i + 1:]:
            if first.value != second.value:
                continue
            if find_path(first.position, second.position, board) is not None:
                yield first.position, second.position


def find_hint(board: Board) -> Optional[Move]:
    return next(iter_moves(board), None)


def is_solvable(board: Board) -> bool:
    return find_hint(board) is not None


def count_moves(board: Board) -> int:
    return sum(1 for _ in iter_moves(board))
