"""Descriptive statistics over a numeric sample (stdlib only, no numpy needed).

Every function accepts an optional ``weights`` sequence parallel to the
sample.  ``None`` means a weight of 1 for every value.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Sequence

from src.describe.errors import InvalidInput, UndefinedResult

Number = float | int


@dataclass(frozen=True)
class Summary:
    """Mean, median, variance and standard deviation of one sample."""

    count: int
    mean: float
    median: float
    variance: float
    standard_deviation: float

    def as_dict(self) -> dict[str, float | int]:
        return asdict(self)


def _check(sample: Sequence[Number], weights: Sequence[Number] | None) -> None:
    if not sample:
        raise InvalidInput("sample is empty")
    if weights is None:
        return
    if len(weights) != len(sample):
        raise InvalidInput(
            f"weights length {len(weights)} does not match sample length {len(sample)}"
        )
    if any(w < 0 for w in weights):
        raise InvalidInput("weights must be non-negative")
    if sum(weights) == 0:
        raise InvalidInput("weights sum to zero")


def mean(sample: Sequence[Number], weights: Sequence[Number] | None = None) -> float:
    _check(sample, weights)
    if weights is None:
        return sum(sample) / len(sample)
    return sum(x * w for x, w in zip(sample, weights)) / sum(weights)


def variance(
    sample: Sequence[Number],
    weights: Sequence[Number] | None = None,
    *,
    bias_corrected: bool = True,
) -> float:
    """Sample variance.

    The corrected estimator divides by ``n - 1``; for weighted samples it
    divides by ``V1 - V2 / V1`` (``V1 = sum(w)``, ``V2 = sum(w**2)``), which
    reduces to ``n - 1`` for unit weights.  With ``bias_corrected=False`` the
    divisor is ``V1`` (population variance).

    Raises :class:`UndefinedResult` when fewer than two values carry a
    positive weight, i.e. for a single-element sample.
    """
    m = mean(sample, weights)
    if bias_corrected:
        positive = len(sample) if weights is None else sum(1 for w in weights if w > 0)
        if positive < 2:
            raise UndefinedResult(
                f"corrected variance is undefined for {positive} positively weighted value(s)"
            )
    if weights is None:
        ss = sum((x - m) ** 2 for x in sample)
        denom = len(sample) - 1 if bias_corrected else len(sample)
    else:
        ss = sum(w * (x - m) ** 2 for x, w in zip(sample, weights))
        v1 = sum(weights)
        denom = v1 - sum(w * w for w in weights) / v1 if bias_corrected else v1
    if denom <= 0:
        raise UndefinedResult("weights leave no degrees of freedom for the corrected variance")
    return ss / denom


def standard_deviation(
    sample: Sequence[Number],
    weights: Sequence[Number] | None = None,
    *,
    bias_corrected: bool = True,
) -> float:
    return math.sqrt(variance(sample, weights, bias_corrected=bias_corrected))


def quantile(
    p: float,
    sample: Sequence[Number],
    weights: Sequence[Number] | None = None,
) -> float:
    """Empirical *p*-quantile of an ascending-sorted sample.

    Returns the smallest value whose cumulative weight fraction reaches *p*
    (inverse of the empirical CDF, no interpolation).  The sample is not
    sorted here; use :func:`sort_sample` first.
    """
    if not 0.0 <= p <= 1.0:
        raise InvalidInput(f"quantile level must lie in [0, 1], got {p}")
    _check(sample, weights)
    if any(a > b for a, b in zip(sample, sample[1:])):
        raise InvalidInput("quantile needs an ascending-sorted sample")

    ws = weights if weights is not None else [1] * len(sample)
    target = p * sum(ws)
    acc = 0.0
    for x, w in zip(sample, ws):
        acc += w
        if w > 0 and acc >= target:
            return float(x)
    # rounding in the running sum can leave acc a hair below target at p == 1
    return float(max(x for x, w in zip(sample, ws) if w > 0))


def sort_sample(
    sample: Sequence[Number],
    weights: Sequence[Number] | None = None,
) -> tuple[list[Number], list[Number] | None]:
    """Ascending copy of *sample*, with *weights* permuted alongside."""
    if weights is None:
        return sorted(sample), None
    if len(weights) != len(sample):
        raise InvalidInput(
            f"weights length {len(weights)} does not match sample length {len(sample)}"
        )
    pairs = sorted(zip(sample, weights), key=lambda xw: xw[0])
    return [x for x, _ in pairs], [w for _, w in pairs]


def median(sample: Sequence[Number], weights: Sequence[Number] | None = None) -> float:
    xs, ws = sort_sample(sample, weights)
    return quantile(0.5, xs, ws)


def summarize(
    sample: Sequence[Number],
    weights: Sequence[Number] | None = None,
) -> Summary:
    """Compute all four statistics for *sample*; the input is left untouched."""
    var = variance(sample, weights)
    return Summary(
        count=len(sample),
        mean=mean(sample, weights),
        median=median(sample, weights),
        variance=var,
        standard_deviation=math.sqrt(var),
    )
