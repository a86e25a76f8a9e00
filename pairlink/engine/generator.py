"""Board layout generation.

A board is produced in three steps:
  1. Shape: evaluate a registered predicate over the interior to select the
     active coordinates, dropping one if the count is odd.
  2. Values: pick distinct icons from the palette (capped), cycling them when
     more pairs are needed than icons are available.
  3. Deal: shuffle the value multiset and place it on the active cells.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Hashable, List, Optional, Sequence, Tuple, Union

from ..core.constants import BOARD_PADDING, DEFAULT_PALETTE, MAX_DISTINCT_VALUES
from ..core.exceptions import GenerationError
from ..core.models import Position
from ..utils.logger import get_logger
from .grid import Board
from .patterns import ShapePattern, predicate_for, resolve_pattern


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    rows: int
    cols: int
    seed: Optional[int] = None
    palette: Sequence[Hashable] = DEFAULT_PALETTE
    max_distinct_values: int = MAX_DISTINCT_VALUES
    patterns: Tuple[ShapePattern, ...] = field(default_factory=lambda: tuple(ShapePattern))
    padding: int = BOARD_PADDING


class BoardGenerator:
    """Builds freshly laid-out boards from a seedable random source."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        if not config.palette:
            raise GenerationError("Palette must contain at least one value")
        if config.max_distinct_values < 1:
            raise GenerationError("max_distinct_values must be at least 1")
        if not config.patterns:
            raise GenerationError("At least one shape pattern must be allowed")
        self.config = config
        self.patterns = tuple(resolve_pattern(name) for name in config.patterns)
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, pattern: Union[str, ShapePattern, None] = None) -> Board:
        board = Board(self.config.rows, self.config.cols, padding=self.config.padding)
        chosen = resolve_pattern(pattern) if pattern is not None else self.rng.choice(self.patterns)
        active = self._active_positions(board, chosen)
        if len(active) < 2 and chosen != ShapePattern.FULL:
            LOGGER.warning(
                "Pattern '%s' left %d active cells on %dx%d; falling back to full",
                chosen.value, len(active), board.rows, board.cols,
            )
            chosen = ShapePattern.FULL
            active = self._active_positions(board, chosen)

        if len(active) % 2:
            dropped = active.pop(self.rng.randrange(len(active)))
            LOGGER.debug("Dropped (%s,%s) to keep the tile count even", dropped.x, dropped.y)

        board.pattern = chosen.value
        if not active:
            LOGGER.warning("Board %dx%d cannot hold a single pair", board.rows, board.cols)
            return board

        self.deal(board, active)
        LOGGER.info(
            "Generated %dx%d board with pattern '%s' (%d tiles, %d distinct values)",
            board.rows, board.cols, chosen.value, len(active), len(board.remaining_values()),
        )
        return board

    def deal(self, board: Board, positions: Sequence[Position]) -> Board:
        """Place freshly drawn value pairs on ``positions`` (must be even)."""

        if len(positions) % 2:
            raise GenerationError(f"Cannot deal pairs onto {len(positions)} cells")
        values = self._pair_values(len(positions) // 2)
        self.rng.shuffle(values)
        for pos, value in zip(positions, values):
            board.place(pos, value)
        return board

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------
    def _active_positions(self, board: Board, pattern: ShapePattern) -> List[Position]:
        predicate = predicate_for(pattern)
        rows, cols, pad = board.rows, board.cols, board.padding
        return [
            Position(x + pad, y + pad)
            for y in range(rows)
            for x in range(cols)
            if predicate(x, y, rows, cols, self.rng)
        ]

    def _pair_values(self, pair_count: int) -> List[Hashable]:
        palette = list(dict.fromkeys(self.config.palette))
        distinct = min(pair_count, self.config.max_distinct_values, len(palette))
        chosen = self.rng.sample(palette, distinct) if distinct else []
        values: List[Hashable] = []
        for index in range(pair_count):
            value = chosen[index % distinct]
            values.extend((value, value))
        return values


def generate_board(
    rows: int,
    cols: int,
    rng: Optional[random.Random] = None,
    pattern: Union[str, ShapePattern, None] = None,
) -> Board:
    """Generate a board of ``rows x cols`` interior cells with a random shape."""

    return BoardGenerator(GeneratorConfig(rows=rows, cols=cols), rng=rng).generate(pattern)
