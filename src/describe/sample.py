"""Reading samples from plain text: one decimal number per line."""

from __future__ import annotations

import math
from pathlib import Path

import structlog

from src.describe.errors import ParseFailure

log = structlog.get_logger("sample")


def parse_sample(text: str, *, source: str = "<string>") -> list[float]:
    """Parse *text* into floats, skipping blank lines.

    Raises :class:`ParseFailure` on the first line that is not a finite number.
    """
    values: list[float] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            x = float(line)
        except ValueError:
            raise ParseFailure(source, lineno, line) from None
        if not math.isfinite(x):
            raise ParseFailure(source, lineno, line)
        values.append(x)
    return values


def read_sample(path: Path | str) -> list[float]:
    path = Path(path)
    values = parse_sample(path.read_text(encoding="utf-8"), source=str(path))
    log.info("sample_loaded", path=str(path), count=len(values))
    return values


def read_weights(path: Path | str) -> list[float]:
    path = Path(path)
    weights = parse_sample(path.read_text(encoding="utf-8"), source=str(path))
    log.info("weights_loaded", path=str(path), count=len(weights))
    return weights
