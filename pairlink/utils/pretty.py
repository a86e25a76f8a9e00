"""Pretty-print helpers for puzzle boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, Hashable, Iterable, Optional

if TYPE_CHECKING:
    from ..core.models import Position
    from ..engine.grid import Board


BORDER_SYMBOL = "+"
EMPTY_SYMBOL = "."
PATH_SYMBOL = "*"
LEGEND_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def build_legend(board: Board) -> Dict[Hashable, str]:
    """Map each value to a single ASCII letter, in row-major order of appearance."""

    legend: Dict[Hashable, str] = {}
    for cell in board.occupied_cells():
        if cell.value not in legend:
            index = len(legend)
            legend[cell.value] = LEGEND_ALPHABET[index] if index < len(LEGEND_ALPHABET) else "?"
    return legend


def format_board(
    board: Board,
    *,
    path: Optional[Iterable[Position]] = None,
    legend: Optional[Dict[Hashable, str]] = None,
) -> str:
    legend = legend if legend is not None else build_legend(board)
    on_path = {(pos.x, pos.y) for pos in path or ()}
    header_cells = [f"{x:>2}" for x in range(board.width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * board.width - 1))
    for y in range(board.height):
        symbols = []
        for x in range(board.width):
            cell = board.cell(x, y)
            if cell.occupied:
                symbols.append(legend.get(cell.value, "?"))
            elif (x, y) in on_path:
                symbols.append(PATH_SYMBOL)
            elif cell.border:
                symbols.append(BORDER_SYMBOL)
            else:
                symbols.append(EMPTY_SYMBOL)
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_board(
    board: Board,
    *,
    label: str | None = None,
    path: Optional[Iterable[Position]] = None,
    stream=None,
) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board, path=path), file=stream)
