#!/usr/bin/env python3
"""Generate the descriptive-statistics article with a matplotlib histogram."""

import argparse
from pathlib import Path

from src.common.console import fail, info, ok
from src.common.constants import REPORT_DIR
from src.common.logging import configure_structlog
from src.describe.article import generate_report
from src.describe.errors import StatsError


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Text file with one number per line (default: built-in literal sample)",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=REPORT_DIR,
        help=f"Directory for REPORT.md and graphs/ (default: {REPORT_DIR})",
    )
    args = parser.parse_args()

    configure_structlog()
    info(f"Sample: {args.path or 'built-in literal'}")
    try:
        report_path = generate_report(args.path, args.output_dir)
    except StatsError as exc:
        fail(str(exc))
    except OSError as exc:
        fail(f"Cannot read input: {exc}")
    ok(f"Report written to {report_path}")


if __name__ == "__main__":
    main()
