"""Puzzle engine for a connect-two tile-matching game.

Two tiles with the same icon can be matched when a line of at most two
right-angle turns joins them through empty cells. This package exposes:

- ``pairlink.engine.generator``: shaped board layouts (``generate_board``).
- ``pairlink.engine.pathfinder``: the bounded-turn search (``find_path``).
- ``pairlink.engine.oracle``: hints and solvability (``find_hint``, ``is_solvable``).
- ``pairlink.engine.shuffle``: ``shuffle_board`` and ``mark_matched``.
- ``pairlink.engine.session``: a caller-side session with deadlock recovery.
"""

from .core.models import Cell, Position
from .engine.generator import BoardGenerator, GeneratorConfig, generate_board
from .engine.grid import Board
from .engine.oracle import find_hint, is_solvable
from .engine.pathfinder import find_path
from .engine.session import MatchResult, PuzzleSession, SessionConfig
from .engine.shuffle import mark_matched, shuffle_board

shuffle = shuffle_board

__all__ = [
    "Board",
    "BoardGenerator",
    "Cell",
    "GeneratorConfig",
    "MatchResult",
    "Position",
    "PuzzleSession",
    "SessionConfig",
    "find_hint",
    "find_path",
    "generate_board",
    "is_solvable",
    "mark_matched",
    "shuffle",
    "shuffle_board",
]

__version__ = "0.1.0"
