"""Bounded-turn connectivity search between two tiles.

Two tiles connect when a line of orthogonal steps joins them, passes only
through empty cells and bends at most ``MAX_TURNS`` times. The search runs
over ``(x, y, incoming direction)`` states ordered by turns taken, so the
first path that reaches the destination uses the fewest turns.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Dict, List, Optional, Sequence, Tuple

from ..core.constants import DIRECTION_STEPS, MAX_TURNS, Direction
from ..core.exceptions import CellStateError
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import Board


LOGGER = get_logger(__name__)

State = Tuple[int, int, Optional[Direction]]


def find_path(start: Position, end: Position, board: Board) -> Optional[List[Position]]:
    """Return a legal connecting path from ``start`` to ``end`` or ``None``.

    Both endpoints must be distinct occupied cells. Their values are not
    compared; callers check equality before asking for a path.
    """

    board.require_in_bounds(start)
    board.require_in_bounds(end)
    if start == end:
        raise CellStateError(f"Cannot connect {(start.x, start.y)} to itself")
    for pos in (start, end):
        if board.is_empty(pos):
            raise CellStateError(f"Endpoint {(pos.x, pos.y)} is empty")

    origin: State = (start.x, start.y, None)
    best_turns: Dict[State, int] = {origin: 0}
    parents: Dict[State, Optional[State]] = {origin: None}
    counter = itertools.count()
    frontier: List[Tuple[int, int, State]] = [(0, next(counter), origin)]

    while frontier:
        turns, _, state = heapq.heappop(frontier)
        if turns > best_turns.get(state, turns):
            continue
        x, y, heading = state
        if (x, y) == (end.x, end.y):
            path = _rebuild(parents, state)
            LOGGER.debug(
                "Connected (%s,%s)->(%s,%s) with %d turns over %d cells",
                start.x, start.y, end.x, end.y, turns, len(path),
            )
            return path

        for direction, (dx, dy) in DIRECTION_STEPS.items():
            nx, ny = x + dx, y + dy
            if not board.in_bounds(nx, ny):
                continue
            if (nx, ny) != (end.x, end.y) and board.cell(nx, ny).occupied:
                continue
            next_turns = turns if heading is None or heading == direction else turns + 1
            if next_turns > MAX_TURNS:
                continue
            next_state: State = (nx, ny, direction)
            if best_turns.get(next_state, MAX_TURNS + 1) <= next_turns:
                continue
            best_turns[next_state] = next_turns
            parents[next_state] = state
            heapq.heappush(frontier, (next_turns, next(counter), next_state))

    return None


def _rebuild(parents: Dict[State, Optional[State]], state: State) -> List[Position]:
    path: List[Position] = []
    current: Optional[State] = state
    while current is not None:
        path.append(Position(current[0], current[1]))
        current = parents[current]
    path.reverse()
    return path


def _step_direction(a: Position, b: Position) -> Tuple[int, int]:
    return b.x - a.x, b.y - a.y


def count_turns(path: Sequence[Position]) -> int:
    """Number of direction changes along a path."""

    turns = 0
    for previous, current, following in zip(path, path[1:], path[2:]):
        if _step_direction(previous, current) != _step_direction(current, following):
            turns += 1
    return turns


def path_corners(path: Sequence[Position]) -> List[Position]:
    """Collapse a path to its endpoints and bend points, for drawing."""

    if len(path) <= 2:
        return list(path)
    corners = [path[0]]
    for previous, current, following in zip(path, path[1:], path[2:]):
        if _step_direction(previous, current) != _step_direction(current, following):
            corners.append(current)
    corners.append(path[-1])
    return corners
