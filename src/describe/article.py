"""Markdown article explaining the four statistics for one dataset."""

from __future__ import annotations

from pathlib import Path

import structlog

from src.common.constants import (
    GRAPHS_DIR_NAME,
    HISTOGRAM_NAME,
    LITERAL_SAMPLE,
    REPORT_NAME,
)
from src.describe.plots import plot_histogram
from src.describe.sample import read_sample
from src.describe.stats import Summary, summarize, variance

log = structlog.get_logger("article")


def build_markdown(
    summary: Summary,
    *,
    dataset_label: str,
    histogram_name: str,
    population_variance: float,
) -> str:
    n = summary.count
    return f"""\
# Descriptive Statistics — {dataset_label}

Four numbers go a long way towards describing a sample: where its centre lies
(**mean** and **median**) and how far the values spread around it
(**variance** and **standard deviation**).

![Histogram]({GRAPHS_DIR_NAME}/{histogram_name})

| Statistic | Value |
|-----------|-------|
| Count | {n:,} |
| Mean | {summary.mean!r} |
| Median | {summary.median!r} |
| Variance (n − 1) | {summary.variance!r} |
| Standard deviation | {summary.standard_deviation!r} |

---

## Mean

The arithmetic mean adds every value and divides by the number of values:
`mean = Σx / n`. Here that is **{summary.mean:,.4f}**.

## Median

Sort the sample and take the value in the middle. With {n:,} values the
median is the smallest value that at least half of the sample does not
exceed: **{summary.median:,.4f}**. Unlike the mean it ignores how extreme
the largest and smallest values are.

## Variance

The variance is the average squared distance from the mean. Because the mean
was itself estimated from the same sample, the sum of squares is divided by
`n − 1` rather than `n` (Bessel's correction):
`variance = Σ(x − mean)² / (n − 1)` = **{summary.variance:,.4f}**.

Dividing by `n` instead would give {population_variance:,.4f}, smaller by the
factor (n − 1) / n.

## Standard deviation

The square root of the variance, back in the units of the data:
**{summary.standard_deviation:,.4f}**.
"""


def generate_report(sample_path: Path | None, output_dir: Path) -> Path:
    """Compute the summary, draw the histogram and write the article."""
    if sample_path is None:
        sample = list(LITERAL_SAMPLE)
        label = "Literal Sample"
    else:
        sample = read_sample(sample_path)
        label = sample_path.name

    summary = summarize(sample)
    hist_path = plot_histogram(
        sample,
        summary,
        output_dir / GRAPHS_DIR_NAME / HISTOGRAM_NAME,
        title=label,
    )
    log.info("histogram_written", path=str(hist_path))

    report = build_markdown(
        summary,
        dataset_label=label,
        histogram_name=HISTOGRAM_NAME,
        population_variance=variance(sample, bias_corrected=False),
    )
    report_path = output_dir / REPORT_NAME
    report_path.write_text(report, encoding="utf-8")
    log.info("report_written", path=str(report_path))
    return report_path
