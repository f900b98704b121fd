#!/usr/bin/env python3
"""Command line entry point: report links to local files that do not exist."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from config.settings import Settings
from core.exceptions import ConfigurationError, DocumentReadError, SourceError
from mdlinks.checker import LinkChecker
from mdlinks.report import ConsoleReporter
from utils.logging_config import get_logger, setup_logging

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_MISSING = 1
EXIT_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdlinks",
        description="Check Markdown documents for links to local files that do not exist.",
    )
    parser.add_argument(
        "src",
        help=(
            "Source file or directory to parse. If a directory, validates every "
            "Markdown file found within it."
        ),
    )
    parser.add_argument(
        "--images",
        action="store_true",
        help="Also check that image sources exist.",
    )
    parser.add_argument(
        "--strip-fragments",
        action="store_true",
        help="Ignore '#fragment' suffixes and skip in-page anchors.",
    )
    parser.add_argument(
        "--follow-symlinks",
        action="store_true",
        help="Descend into symlinked directories.",
    )
    parser.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        help="When to colour the output.",
    )
    parser.add_argument(
        "--exit-zero",
        action="store_true",
        help="Exit with status 0 even when missing links are found.",
    )
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING, ERROR or CRITICAL.")
    parser.add_argument("--log-format", choices=["standard", "json"])
    parser.add_argument("--log-file", help="Also write logs to this file.")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge command line overrides on top of environment settings."""
    overrides: Dict[str, Any] = {}
    if args.images:
        overrides["check_images"] = True
    if args.strip_fragments:
        overrides["strip_fragments"] = True
    if args.follow_symlinks:
        overrides["follow_symlinks"] = True
    if args.color:
        overrides["color"] = args.color
    if args.exit_zero:
        overrides["fail_on_missing"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_format:
        overrides["log_format"] = args.log_format
    if args.log_file:
        overrides["log_file"] = args.log_file

    try:
        return Settings(**overrides)
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = load_settings(args)
    except ConfigurationError as exc:
        ConsoleReporter().error(str(exc))
        return EXIT_ERROR

    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_format=settings.log_format,
    )
    reporter = ConsoleReporter(color=settings.color)
    checker = LinkChecker(settings)
    logger.debug("Checking %s", args.src)

    try:
        summary = checker.check_path(args.src)
    except SourceError as exc:
        reporter.notice(f"`{exc.path}` {exc.reason}")
        return EXIT_ERROR
    except DocumentReadError as exc:
        reporter.unreadable(exc.path, exc.reason)
        return EXIT_ERROR

    # directory mode names the document above each missing link
    reporter.summary(summary, show_source=Path(args.src).is_dir())

    if summary.unreadable:
        return EXIT_ERROR
    if summary.has_missing and settings.fail_on_missing:
        return EXIT_MISSING
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
