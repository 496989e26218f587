"""Histogram of a sample with its centre and spread marked."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import numpy as np

from src.common.constants import (
    COLOR_BARS,
    COLOR_MEAN,
    COLOR_MEDIAN,
    FILL_ALPHA,
    HIST_BINS,
)
from src.describe.stats import Summary


def plot_histogram(
    values: list[float],
    summary: Summary,
    path: Path,
    *,
    title: str,
    bins: int | str = HIST_BINS,
) -> Path:
    """Plot a histogram with mean, median and a ±1σ band; save to *path*."""
    data = np.asarray(values, dtype=float)
    edges = np.histogram_bin_edges(data, bins=bins)

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.hist(data, bins=edges, color=COLOR_BARS, edgecolor="black", linewidth=0.5)

    lo = summary.mean - summary.standard_deviation
    hi = summary.mean + summary.standard_deviation
    ax.axvspan(lo, hi, color=COLOR_MEAN, alpha=FILL_ALPHA, label="mean ± 1σ")
    ax.axvline(
        summary.mean,
        color=COLOR_MEAN,
        linewidth=2,
        label=f"mean = {summary.mean:,.2f}",
    )
    ax.axvline(
        summary.median,
        color=COLOR_MEDIAN,
        linewidth=2,
        linestyle="--",
        label=f"median = {summary.median:,.2f}",
    )

    ax.set_xlabel("Value", fontsize=11)
    ax.set_ylabel("Count", fontsize=11)
    ax.set_title(f"{title} (n={summary.count:,})", fontsize=13)
    ax.xaxis.set_major_formatter(ticker.FuncFormatter(lambda x, _: f"{x:,.0f}"))
    ax.yaxis.set_major_locator(ticker.MaxNLocator(integer=True))
    ax.legend(fontsize=10)
    ax.grid(True, axis="y", alpha=0.3)

    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return path
