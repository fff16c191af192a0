"""Entry point for inspecting and seeding the local scoreboard.

The game calls :func:`record_game_over` when a board fills up; the command
line exposes the same board for ``show`` and ``add``.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from pydantic import ValidationError

from blocktui.config import Settings
from blocktui.errors import LeaderboardError
from blocktui.logging_config import setup_logging
from blocktui.scoreboard import LocalLeaderboard
from blocktui.scoreboard.highscore import INT64_MAX, INT64_MIN

logger = logging.getLogger(__name__)

DEFAULT_PLAYER = "player"


def current_player(environ=None) -> str:
    environ = os.environ if environ is None else environ
    for key in ("USER", "USERNAME"):
        name = (environ.get(key) or "").strip()
        if name:
            return name
    return DEFAULT_PLAYER


def record_game_over(board, player: str, score: int) -> bool:
    """Put a finished game on the board.

    A scoreboard failure must not end the session, so it is logged and
    reported as "not added".
    """
    try:
        added = board.add(player, score)
    except LeaderboardError:
        logger.exception("could not record score %d for %s", score, player)
        return False
    if added:
        logger.info("%s made the board with %d", player, score)
    return added


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blocktui-scores", description="Local block puzzle high scores.")
    parser.add_argument("--db", dest="db_path", help="Path to the scoreboard database file.")
    parser.add_argument("--capacity", type=int, help="Number of scores kept on the board.")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, ...).")

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print the board as JSON lines, best first.")
    show.add_argument("--limit", type=int, default=None)

    add = sub.add_parser("add", help="Record a score.")
    add.add_argument("score", type=int)
    add.add_argument("--name", default=None, help="Player name (defaults to the current user).")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env(
            db_path=args.db_path, capacity=args.capacity, log_level=args.log_level
        )
    except ValidationError as exc:
        parser.error(str(exc))

    if args.command == "add" and not INT64_MIN <= args.score <= INT64_MAX:
        parser.error(f"score must fit in a signed 64-bit integer, got {args.score}")

    setup_logging(getattr(logging, settings.log_level))

    try:
        with LocalLeaderboard.from_settings(settings) as board:
            if args.command == "show":
                for entry in board.ranked(args.limit):
                    print(json.dumps(entry.model_dump()))
            else:
                name = args.name or current_player()
                added = record_game_over(board, name, args.score)
                print(json.dumps({"name": name, "score": args.score, "added": added}))
    except LeaderboardError as exc:
        logger.error("scoreboard unavailable: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
