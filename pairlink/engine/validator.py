"""Deterministic rule validation for boards and connecting paths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import MAX_TURNS
from ..core.exceptions import PathValidationError, ValidationError
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import Board
from .pathfinder import count_turns


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class BoardValidator:
    """Runs structural checks over a board."""

    def validate(self, board: Board) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_border_empty(board)
            self._check_even_count(board)
            self._check_pair_balance(board)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_border_empty(self, board: Board) -> None:
        for cell in board.iter_cells():
            if cell.border and cell.occupied:
                raise ValidationError(f"Border cell ({cell.x},{cell.y}) holds {cell.value!r}")

    def _check_even_count(self, board: Board) -> None:
        count = board.occupied_count
        if count % 2:
            raise ValidationError(f"Odd number of tiles on the board: {count}")

    def _check_pair_balance(self, board: Board) -> None:
        for value, count in board.remaining_values().items():
            if count % 2:
                raise ValidationError(f"Value {value!r} appears {count} times")


def validate_path(board: Board, path: Sequence[Position]) -> None:
    """Raise :class:`PathValidationError` unless ``path`` is a legal connection."""

    if len(path) < 2:
        raise PathValidationError("A path needs at least two positions")
    for pos in path:
        if not board.in_bounds(pos.x, pos.y):
            raise PathValidationError(f"Path leaves the board at ({pos.x},{pos.y})")
    for previous, current in zip(path, path[1:]):
        if not previous.is_adjacent(current):
            raise PathValidationError(
                f"Steps ({previous.x},{previous.y}) -> ({current.x},{current.y}) are not adjacent"
            )
    for end in (path[0], path[-1]):
        if board.is_empty(end):
            raise PathValidationError(f"Endpoint ({end.x},{end.y}) is empty")
    for pos in path[1:-1]:
        if not board.is_empty(pos):
            raise PathValidationError(f"Path crosses occupied cell ({pos.x},{pos.y})")
    turns = count_turns(path)
    if turns > MAX_TURNS:
        raise PathValidationError(f"Path bends {turns} times (limit {MAX_TURNS})")
