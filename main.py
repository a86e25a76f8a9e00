"""CLI entrypoint for generating and auto-playing connect-two boards."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from pairlink.core.exceptions import UnsolvableBoardError
from pairlink.engine.oracle import count_moves, find_hint
from pairlink.engine.patterns import ShapePattern
from pairlink.engine.session import PuzzleSession, SessionConfig
from pairlink.engine.validator import BoardValidator
from pairlink.utils.logger import configure_logging
from pairlink.utils.pretty import build_legend, format_board


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate connect-two puzzle boards and optionally auto-play them",
    )
    parser.add_argument("--rows", type=int, required=True, help="Interior rows")
    parser.add_argument("--cols", type=int, required=True, help="Interior columns")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--pattern",
        type=str,
        choices=[p.value for p in ShapePattern],
        default=None,
        help="Force a board silhouette instead of picking one at random",
    )
    parser.add_argument(
        "--autoplay",
        action="store_true",
        help="Repeatedly play the hinted pair until the board is cleared",
    )
    parser.add_argument(
        "--max-shuffles",
        type=int,
        default=5,
        help="Shuffle attempts before fresh values are dealt on a deadlock",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def autoplay(session: PuzzleSession) -> List[Dict[str, Any]]:
    moves: List[Dict[str, Any]] = []
    while not session.cleared:
        hint = session.hint()
        if hint is None:
            session.stabilize()
            continue
        first, second = hint
        result = session.try_match(first, second)
        moves.append(
            {
                "pair": [first.to_jsonable(), second.to_jsonable()],
                "path": [pos.to_jsonable() for pos in result.path or []],
                "shuffles": result.shuffles,
                "regenerated": result.regenerated,
            }
        )
    return moves


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.rows <= 0 or args.cols <= 0:
        parser.error("--rows and --cols must be positive")
    if args.max_shuffles < 0:
        parser.error("--max-shuffles must not be negative")
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    config = SessionConfig(max_shuffle_attempts=args.max_shuffles, seed=args.seed)
    try:
        session = PuzzleSession.new(args.rows, args.cols, config=config, pattern=args.pattern)
    except UnsolvableBoardError as exc:
        parser.exit(1, f"error: {exc}\n")
    board = session.board
    legend = build_legend(board)
    validation = BoardValidator().validate(board)
    hint = find_hint(board)

    payload: Dict[str, Any] = {
        "board": board.to_jsonable(),
        "rendered": format_board(board, legend=legend),
        "legend": {symbol: value for value, symbol in legend.items()},
        "available_moves": count_moves(board),
        "hint": [pos.to_jsonable() for pos in hint] if hint else None,
        "validation": validation.messages,
    }

    if args.autoplay:
        try:
            payload["moves"] = autoplay(session)
        except UnsolvableBoardError as exc:
            parser.exit(1, f"error: {exc}\n")
        payload["stats"] = {
            "matches": session.matches,
            "shuffles": session.shuffles,
            "regenerations": session.regenerations,
        }

    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
