"""Data models supporting the puzzle engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass(frozen=True, order=True)
class Position:
    """A board coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def is_adjacent(self, other: Position) -> bool:
        return abs(self.x - other.x) + abs(self.y - other.y) == 1

    def to_jsonable(self) -> dict:
        return {"x": self.x, "y": self.y}


@dataclass
class Cell:
    """Represents a board cell; coordinates never change once allocated."""

    x: int
    y: int
    value: Optional[Hashable] = None
    border: bool = False

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def occupied(self) -> bool:
        return self.value is not None

    def is_empty(self) -> bool:
        return self.value is None

    def clear(self) -> None:
        self.value = None
