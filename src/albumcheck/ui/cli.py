# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from albumcheck.app import check_missing_albums
from albumcheck.config import ConfigurationError, configure_logging, get_albumcheck_config
from albumcheck.config.reconcile import DEFAULT_HISTORY_LIMIT, DEFAULT_MAX_RECOMMENDATIONS

from .report import format_error_stats, format_recommendations

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from albumcheck.config import AlbumCheckConfig

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recommend top Last.fm albums that are missing from a Subsonic library"
    )
    parser.add_argument(
        "--ignore-file",
        type=Path,
        help="File with one Last.fm album URL per line to never recommend (env: IGNORE_FILE)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        default=None,
        help="Log every failed library lookup (env: VERBOSE=true)",
    )
    parser.add_argument(
        "--history-limit",
        type=_positive_int,
        help=f"Number of top albums to read from Last.fm (default: {DEFAULT_HISTORY_LIMIT})",
    )
    parser.add_argument(
        "--max-recommendations",
        type=_positive_int,
        help=f"Stop after this many missing albums (default: {DEFAULT_MAX_RECOMMENDATIONS})",
    )
    parser.add_argument(
        "--deadline",
        type=_positive_float,
        help="Seconds the whole run may take (env: ALBUMCHECK_DEADLINE_SECONDS)",
    )
    return parser.parse_args(list(argv))


def _apply_overrides(config: AlbumCheckConfig, args: argparse.Namespace) -> AlbumCheckConfig:
    settings = config.reconcile
    overrides: dict[str, object] = {}
    if args.ignore_file is not None:
        overrides["ignore_file"] = args.ignore_file
    if args.verbose is not None:
        overrides["verbose"] = args.verbose
    if args.history_limit is not None:
        overrides["history_limit"] = args.history_limit
    if args.max_recommendations is not None:
        overrides["max_recommendations"] = args.max_recommendations
    if args.deadline is not None:
        overrides["deadline_seconds"] = args.deadline
    if not overrides:
        return config
    return replace(config, reconcile=replace(settings, **overrides))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = _apply_overrides(get_albumcheck_config(), parsed_args)
    except ConfigurationError as exc:
        configure_logging()
        log.error("Configuration error: %s", exc)  # noqa: TRY400
        sys.exit(1)

    configure_logging(level=logging.DEBUG if config.reconcile.verbose else logging.INFO)

    try:
        result = check_missing_albums(config=config)
    except Exception:
        log.exception("Fatal error during album check")
        sys.exit(1)

    stats_report = format_error_stats(result.stats)
    if stats_report is not None:
        print(stats_report)
    print(format_recommendations(result.recommendations))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
