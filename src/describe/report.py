"""Console reports for the literal-dataset and text-file programs."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from src.common.console import header, section
from src.common.constants import LITERAL_SAMPLE
from src.describe.sample import read_sample, read_weights
from src.describe.stats import Summary, median, sort_sample, summarize

log = structlog.get_logger("report")


def fmt_stat(v: list[float | int]) -> str:
    """Full stats: mean +/- sigma  [min, med, max]  (n=...)."""
    if not v:
        return "—"
    if len(v) == 1:
        return f"{v[0]:,.2f}  (n=1)"
    s = summarize(v)
    return (
        f"{s.mean:,.2f} ± {s.standard_deviation:,.2f}"
        f"  [min={min(v):,.2f}, med={median(v):,.2f}, max={max(v):,.2f}]"
        f"  (n={s.count})"
    )


def render_summary(summary: Summary, title: str) -> str:
    rows = [
        ("Count", f"{summary.count:,}"),
        ("Mean", repr(summary.mean)),
        ("Median", repr(summary.median)),
        ("Variance (n-1)", repr(summary.variance)),
        ("Std. deviation", repr(summary.standard_deviation)),
    ]
    lines = [header(title)]
    lines.extend(f"  {label:<16} {value:>24}" for label, value in rows)
    return "\n".join(lines)


def _dump(summary: Summary, sample: list[float], output: str | None) -> None:
    if not output:
        return
    payload = {"sample": sample, "summary": summary.as_dict()}
    Path(output).write_text(json.dumps(payload, indent=2))
    print(f"  Raw data → {output}")


# ═══════════════════════════════════════════════════════════════════════════════
#  Literal dataset
# ═══════════════════════════════════════════════════════════════════════════════


def run_literal(output: str | None = None) -> Summary:
    """Statistics over the inline example dataset."""
    sample = list(LITERAL_SAMPLE)
    summary = summarize(sample)
    log.info("summary_computed", source="literal", count=summary.count)

    print(render_summary(summary, "DESCRIPTIVE STATISTICS — LITERAL SAMPLE"))
    print(section("SORTED SAMPLE"))
    print("  " + ", ".join(str(x) for x in sort_sample(sample)[0]))
    _dump(summary, sample, output)
    return summary


# ═══════════════════════════════════════════════════════════════════════════════
#  Text file dataset
# ═══════════════════════════════════════════════════════════════════════════════


def run_file(
    path: str | Path,
    weights_path: str | Path | None = None,
    output: str | None = None,
) -> Summary:
    """Statistics over a file of one number per line (optionally weighted)."""
    sample = read_sample(path)
    weights = read_weights(weights_path) if weights_path else None
    summary = summarize(sample, weights)
    log.info(
        "summary_computed",
        source=str(path),
        count=summary.count,
        weighted=weights is not None,
    )

    print(render_summary(summary, f"DESCRIPTIVE STATISTICS — {Path(path).name}"))
    if weights is None:
        print(section("RANGE"))
        print(f"  {fmt_stat(sample)}")
    _dump(summary, sample, output)
    return summary
