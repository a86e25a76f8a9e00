"""Match resolution and deadlock recovery for an active board.

The engine primitives never loop on their own: this module is the caller
side that owns one board, applies matches and decides how many shuffles to
spend before dealing fresh values onto the remaining tiles.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..core.exceptions import UnsolvableBoardError
from ..core.models import Position
from ..utils.logger import get_logger
from .generator import BoardGenerator, GeneratorConfig
from .grid import Board, positions_of
from .oracle import Move, find_hint, is_solvable
from .pathfinder import find_path
from .patterns import ShapePattern
from .shuffle import mark_matched, shuffle_board


LOGGER = get_logger(__name__)


@dataclass
class SessionConfig:
    max_shuffle_attempts: int = 5
    regenerate_on_exhaustion: bool = True
    max_board_attempts: int = 10
    seed: Optional[int] = None


@dataclass
class DeadlockOutcome:
    resolved: bool
    shuffles: int


@dataclass
class MatchResult:
    matched: bool
    path: Optional[List[Position]] = None
    shuffles: int = 0
    regenerated: bool = False
    cleared: bool = False

    @property
    def auto_shuffled(self) -> bool:
        return self.shuffles > 0 or self.regenerated


def ensure_solvable(board: Board, rng: random.Random, max_attempts: int) -> DeadlockOutcome:
    """Shuffle ``board`` until a move exists, at most ``max_attempts`` times."""

    if board.is_cleared or is_solvable(board):
        return DeadlockOutcome(resolved=True, shuffles=0)
    for attempt in range(1, max_attempts + 1):
        shuffle_board(board, rng)
        if is_solvable(board):
            LOGGER.info("Deadlock cleared after %d shuffle(s)", attempt)
            return DeadlockOutcome(resolved=True, shuffles=attempt)
    LOGGER.warning(
        "Board still deadlocked after %d shuffles (%d tiles left)",
        max_attempts, board.occupied_count,
    )
    return DeadlockOutcome(resolved=False, shuffles=max_attempts)


class PuzzleSession:
    """Owns a board for one level attempt and keeps it playable."""

    def __init__(
        self,
        board: Board,
        config: Optional[SessionConfig] = None,
        generator: Optional[BoardGenerator] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.board = board
        self.config = config or SessionConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.generator = generator or BoardGenerator(
            GeneratorConfig(rows=board.rows, cols=board.cols, padding=board.padding),
            rng=self.rng,
        )
        self.matches = 0
        self.shuffles = 0
        self.regenerations = 0

    @classmethod
    def new(
        cls,
        rows: int,
        cols: int,
        config: Optional[SessionConfig] = None,
        pattern: Union[str, ShapePattern, None] = None,
    ) -> PuzzleSession:
        """Generate a playable board, drawing a whole new layout if a deal stays stuck.

        Generation and shuffling share one seeded stream, so a seed
        reproduces the full session.
        """

        config = config or SessionConfig()
        rng = random.Random(config.seed)
        generator = BoardGenerator(GeneratorConfig(rows=rows, cols=cols), rng=rng)
        attempts = max(1, config.max_board_attempts)
        for attempt in range(1, attempts + 1):
            session = cls(generator.generate(pattern), config=config, generator=generator, rng=rng)
            try:
                session.stabilize()
            except UnsolvableBoardError as exc:
                LOGGER.warning("Discarding stuck board (attempt %d/%d): %s", attempt, attempts, exc)
                continue
            return session
        raise UnsolvableBoardError(f"No playable {rows}x{cols} board after {attempts} layouts")

    @property
    def cleared(self) -> bool:
        return self.board.is_cleared

    def hint(self) -> Optional[Move]:
        return find_hint(self.board)

    def shuffle(self) -> Board:
        self.shuffles += 1
        return shuffle_board(self.board, self.rng)

    def try_match(self, a: Position, b: Position) -> MatchResult:
        """Connect two selected tiles and keep the board playable afterwards."""

        if self.board.value_at(a) != self.board.value_at(b):
            return MatchResult(matched=False)
        path = find_path(a, b, self.board)
        if path is None:
            return MatchResult(matched=False)

        mark_matched(self.board, a, b)
        self.matches += 1
        if self.board.is_cleared:
            LOGGER.info("Board cleared after %d matches", self.matches)
            return MatchResult(matched=True, path=path, cleared=True)

        shuffles, regenerated = self.stabilize()
        return MatchResult(matched=True, path=path, shuffles=shuffles, regenerated=regenerated)

    def stabilize(self) -> Tuple[int, bool]:
        """Run the deadlock policy; returns ``(shuffles, regenerated)``."""

        outcome = ensure_solvable(self.board, self.rng, self.config.max_shuffle_attempts)
        self.shuffles += outcome.shuffles
        if outcome.resolved:
            return outcome.shuffles, False
        if not self.config.regenerate_on_exhaustion:
            raise UnsolvableBoardError(
                f"No move after {outcome.shuffles} shuffles with {self.board.occupied_count} tiles left"
            )
        self._regenerate()
        return outcome.shuffles, True

    def _regenerate(self) -> None:
        positions = positions_of(self.board.occupied_cells())
        for attempt in range(1, max(1, self.config.max_shuffle_attempts) + 1):
            for pos in positions:
                self.board.cell_at(pos).clear()
            self.generator.deal(self.board, positions)
            self.regenerations += 1
            if is_solvable(self.board):
                LOGGER.info(
                    "Dealt fresh values onto %d tiles (attempt %d)", len(positions), attempt
                )
                return
        raise UnsolvableBoardError(
            f"Fresh deals left {len(positions)} tiles without a move"
        )
