"""Padded board representation and coordinate helpers."""

from __future__ import annotations

import copy
from collections import Counter
from typing import Hashable, Iterable, Iterator, List, Optional, Sequence

from ..core.constants import BOARD_PADDING, ORTHOGONAL_STEPS, Bounds
from ..core.exceptions import CellStateError, InvalidDimensionsError, OutOfBoundsError
from ..core.models import Cell, Position


def _check_dimension(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidDimensionsError(f"{name} must be a positive integer, got {value!r}")


class Board:
    """A playing field of ``rows x cols`` cells wrapped in an empty border.

    Coordinates are board coordinates: the border occupies index ``0`` and
    the last index on each axis, so the interior spans
    ``padding .. padding + cols - 1`` horizontally. Border cells never hold a
    value; paths may route through them.
    """

    def __init__(self, rows: int, cols: int, padding: int = BOARD_PADDING) -> None:
        _check_dimension("rows", rows)
        _check_dimension("cols", cols)
        if padding < 0:
            raise InvalidDimensionsError(f"padding must not be negative, got {padding}")
        self.rows = rows
        self.cols = cols
        self.padding = padding
        self.bounds = Bounds(width=cols + 2 * padding, height=rows + 2 * padding)
        self.pattern: Optional[str] = None
        self.cells: List[List[Cell]] = [
            [
                Cell(x=x, y=y, border=not self._is_interior(x, y))
                for x in range(self.bounds.width)
            ]
            for y in range(self.bounds.height)
        ]

    @classmethod
    def from_rows(
        cls, values: Sequence[Sequence[Optional[Hashable]]], padding: int = BOARD_PADDING
    ) -> Board:
        """Build a board from an interior matrix; ``None`` marks an empty cell."""

        rows = len(values)
        cols = len(values[0]) if rows else 0
        if any(len(row) != cols for row in values):
            raise InvalidDimensionsError("All interior rows must have the same length")
        board = cls(rows, cols, padding=padding)
        for iy, row in enumerate(values):
            for ix, value in enumerate(row):
                if value is not None:
                    board.place(Position(ix + padding, iy + padding), value)
        return board

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def _is_interior(self, x: int, y: int) -> bool:
        return (
            self.padding <= x < self.padding + self.cols
            and self.padding <= y < self.padding + self.rows
        )

    def in_bounds(self, x: int, y: int) -> bool:
        return self.bounds.contains(x, y)

    def is_border(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self._is_interior(x, y)

    def require_in_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos.x, pos.y):
            raise OutOfBoundsError(
                f"Position {(pos.x, pos.y)} outside board {self.width}x{self.height}"
            )

    def neighbors(self, x: int, y: int) -> Iterator[Position]:
        for dx, dy in ORTHOGONAL_STEPS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield Position(nx, ny)

    def interior_positions(self) -> Iterator[Position]:
        for y in range(self.padding, self.padding + self.rows):
            for x in range(self.padding, self.padding + self.cols):
                yield Position(x, y)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, x: int, y: int) -> Cell:
        return self.cell_at(Position(x, y))

    def cell_at(self, pos: Position) -> Cell:
        self.require_in_bounds(pos)
        return self.cells[pos.y][pos.x]

    def value_at(self, pos: Position) -> Optional[Hashable]:
        return self.cell_at(pos).value

    def is_empty(self, pos: Position) -> bool:
        return self.cell_at(pos).is_empty()

    def place(self, pos: Position, value: Hashable) -> None:
        cell = self.cell_at(pos)
        if cell.border:
            raise CellStateError(f"Cannot place a value on border cell {(pos.x, pos.y)}")
        cell.value = value

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def occupied_cells(self) -> List[Cell]:
        """Occupied cells in row-major order."""

        return [cell for cell in self.iter_cells() if cell.occupied]

    @property
    def occupied_count(self) -> int:
        return sum(1 for cell in self.iter_cells() if cell.occupied)

    @property
    def is_cleared(self) -> bool:
        return not any(cell.occupied for cell in self.iter_cells())

    def remaining_values(self) -> Counter:
        return Counter(cell.value for cell in self.iter_cells() if cell.occupied)

    # ------------------------------------------------------------------
    # Copy / serialisation
    # ------------------------------------------------------------------
    def copy(self) -> Board:
        return copy.deepcopy(self)

    def to_rows(self) -> List[List[Optional[Hashable]]]:
        """Interior values as a matrix, border stripped."""

        return [
            [self.cells[y][x].value for x in range(self.padding, self.padding + self.cols)]
            for y in range(self.padding, self.padding + self.rows)
        ]

    def to_jsonable(self) -> dict:
        return {
            "rows": self.rows,
            "cols": self.cols,
            "padding": self.padding,
            "pattern": self.pattern,
            "cells": [[cell.value for cell in row] for row in self.cells],
        }

    def __repr__(self) -> str:
        return (
            f"Board(rows={self.rows}, cols={self.cols}, pattern={self.pattern!r}, "
            f"occupied={self.occupied_count})"
        )


def positions_of(cells: Iterable[Cell]) -> List[Position]:
    return [cell.position for cell in cells]
