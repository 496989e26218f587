"""CLI entrypoint for the descriptive-statistics programs."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from src.common.console import fail
from src.common.logging import configure_structlog, get_json_file_logger
from src.describe.errors import StatsError
from src.describe.report import run_file, run_literal


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Mean, median, variance and standard deviation of a sample.",
        epilog=(
            "Literal: %(prog)s  |  "
            "File: %(prog)s numbers.txt  |  "
            "Weighted: %(prog)s numbers.txt --weights weights.txt"
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Text file with one number per line (default: built-in literal sample)",
    )
    parser.add_argument(
        "--weights",
        metavar="FILE",
        default=None,
        help="Text file with one non-negative weight per sample line",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Path to write the sample and summary as JSON",
    )
    parser.add_argument(
        "--log-file",
        metavar="FILE",
        default=None,
        help="Append the summary as a JSON line to this file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Log debug events",
    )
    args = parser.parse_args(argv)

    if args.weights and not args.path:
        parser.error("--weights needs a sample FILE.")

    configure_structlog(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.path:
            summary = run_file(args.path, args.weights, args.output)
        else:
            summary = run_literal(args.output)
    except StatsError as exc:
        fail(str(exc))
    except OSError as exc:
        fail(f"Cannot read input: {exc}")

    if args.log_file:
        flog = get_json_file_logger(Path(args.log_file))
        flog.info("summary", source=args.path or "literal", **summary.as_dict())
