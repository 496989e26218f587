"""Shared constants for the descriptive-statistics programs."""

from pathlib import Path

# Project root = descriptive-stats/
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

# Input data
DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_FILE = DATA_DIR / "sample.txt"

# The inline dataset used by the literal example
LITERAL_SAMPLE: list[float] = [
    32.32, 56.98, 21.52, 44.32, 55.63, 13.75, 43.47, 43.34, 12.34,
]

# ── Report output ────────────────────────────────────────────────────────────
REPORT_DIR = PROJECT_ROOT / "results" / "report"
GRAPHS_DIR_NAME = "graphs"
REPORT_NAME = "REPORT.md"
HISTOGRAM_NAME = "histogram.png"

# Histogram binning, passed straight to numpy.histogram_bin_edges
HIST_BINS = "auto"

# Palette
COLOR_BARS = "#2980b9"
COLOR_MEAN = "#e74c3c"
COLOR_MEDIAN = "#27ae60"
FILL_ALPHA = 0.15
