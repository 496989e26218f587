"""Exception taxonomy for the statistics core and its input glue."""

from __future__ import annotations


class StatsError(Exception):
    """Base class for every error raised by ``src.describe``."""


class InvalidInput(StatsError, ValueError):
    """The sample, weights or quantile level cannot be used as given."""


class UndefinedResult(StatsError, ArithmeticError):
    """The requested statistic has no value for this sample (e.g. n == 1)."""


class ParseFailure(StatsError, ValueError):
    """A line of sample text is not a finite decimal number."""

    def __init__(self, source: str, lineno: int, line: str) -> None:
        self.source = source
        self.lineno = lineno
        self.line = line
        super().__init__(f"{source}:{lineno}: not a number: {line!r}")
