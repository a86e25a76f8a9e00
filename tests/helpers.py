"""Shared test utilities."""

import random
from typing import Iterator, Tuple

from pairlink.core.constants import DIRECTION_STEPS
from pairlink.core.models import Cell, Position
from pairlink.engine.grid import Board


class FixedRandom(random.Random):
    """Random source whose ``random()`` always returns the same float."""

    def __init__(self, fixed: float, seed: int = 0) -> None:
        super().__init__(seed)
        self.fixed = fixed

    def random(self) -> float:
        return self.fixed

    def getrandbits(self, k: int) -> int:
        # Integer draws come from the seeded stream, not the fixed float.
        return super().getrandbits(k)


def brute_force_connectable(board: Board, start: Position, end: Position) -> bool:
    """Exhaustively try every route made of at most three straight runs."""

    def walk(x: int, y: int, heading, runs_left: int) -> bool:
        if runs_left == 0:
            return False
        for direction, (dx, dy) in DIRECTION_STEPS.items():
            if direction == heading:
                continue
            nx, ny = x + dx, y + dy
            while board.in_bounds(nx, ny):
                if (nx, ny) == (end.x, end.y):
                    return True
                if board.cell(nx, ny).occupied:
                    break
                if walk(nx, ny, direction, runs_left - 1):
                    return True
                nx, ny = nx + dx, ny + dy
        return False

    return walk(start.x, start.y, None, 3)


def occupied_pairs(board: Board) -> Iterator[Tuple[Cell, Cell]]:
    tiles = board.occupied_cells()
    for i, first in enumerate(tiles):
        for second in tiles[i + 1:]:
            yield first, second
