"""Board mutations: redistributing values and clearing matched pairs."""

from __future__ import annotations

import random
from typing import Optional

from ..core.exceptions import CellStateError
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import Board


LOGGER = get_logger(__name__)


def shuffle_board(board: Board, rng: Optional[random.Random] = None) -> Board:
    """Permute the values of the occupied cells in place.

    Occupied coordinates and the value multiset are preserved; only the
    assignment changes. The result is not guaranteed to be solvable.
    """

    rng = rng or random.Random()
    tiles = board.occupied_cells()
    values = [cell.value for cell in tiles]
    rng.shuffle(values)
    for cell, value in zip(tiles, values):
        cell.value = value
    LOGGER.debug("Shuffled %d tiles", len(tiles))
    return board


def mark_matched(board: Board, a: Position, b: Position) -> Board:
    """Clear two matched tiles.

    Both cells are checked before either is touched, so a rejected call
    leaves the board unchanged.
    """

    board.require_in_bounds(a)
    board.require_in_bounds(b)
    if a == b:
        raise CellStateError(f"Cannot match {(a.x, a.y)} with itself")
    for pos in (a, b):
        if board.is_empty(pos):
            raise CellStateError(f"Cell {(pos.x, pos.y)} is already empty")
    board.cell_at(a).clear()
    board.cell_at(b).clear()
    return board
