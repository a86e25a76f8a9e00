"""Shape predicates deciding which interior cells start with a tile.

Each predicate receives interior coordinates (``0 <= x < cols``,
``0 <= y < rows``) and returns ``True`` for cells that should be occupied.
The ``rng`` argument is only consulted by the noisy shapes, so a seeded
generator reproduces the exact silhouette.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Dict, Union

from ..core.exceptions import PatternError


ShapePredicate = Callable[[int, int, int, int, random.Random], bool]


class ShapePattern(str, Enum):
    """Registered board silhouettes."""

    FULL = "full"
    CONCAVE = "concave"
    FRAME = "frame"
    DIAMOND = "diamond"
    CHECKER = "checker"
    SWISS_CHEESE = "swiss_cheese"


def full(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    return True


def concave(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    # Notch cut into the top middle third, half the board deep.
    middle_start = cols // 3
    middle_end = (cols * 2) // 3
    top_depth = rows // 2
    return not (y < top_depth and middle_start <= x < middle_end)


def frame(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    on_ring = x == 0 or x == cols - 1 or y == 0 or y == rows - 1
    in_core = 2 <= x <= cols - 3 and 2 <= y <= rows - 3
    return on_ring or in_core


def diamond(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    dx = abs(x - cols / 2 + 0.5) / (cols / 2)
    dy = abs(y - rows / 2 + 0.5) / (rows / 2)
    return dx + dy <= 1.2


def checker(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    # One draw per cell regardless of parity.
    keep = rng.random() > 0.3
    return (x + y) % 2 == 0 or keep


def swiss_cheese(x: int, y: int, rows: int, cols: int, rng: random.Random) -> bool:
    return rng.random() > 0.15


PATTERNS: Dict[ShapePattern, ShapePredicate] = {
    ShapePattern.FULL: full,
    ShapePattern.CONCAVE: concave,
    ShapePattern.FRAME: frame,
    ShapePattern.DIAMOND: diamond,
    ShapePattern.CHECKER: checker,
    ShapePattern.SWISS_CHEESE: swiss_cheese,
}


def resolve_pattern(name: Union[str, ShapePattern]) -> ShapePattern:
    """Map a pattern name onto the registry, rejecting unknown shapes."""

    try:
        return ShapePattern(name)
    except ValueError:
        known = ", ".join(pattern.value for pattern in ShapePattern)
        raise PatternError(f"Unknown shape pattern {name!r} (known: {known})") from None


def predicate_for(name: Union[str, ShapePattern]) -> ShapePredicate:
    return PATTERNS[resolve_pattern(name)]
