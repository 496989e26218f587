import os

# headless matplotlib for the plot tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from src.common.constants import LITERAL_SAMPLE


@pytest.fixture
def literal_sample() -> list[float]:
    return list(LITERAL_SAMPLE)


@pytest.fixture
def write_lines(tmp_path):
    """Write values one per line to a file under tmp_path and return its path."""

    def _write(name: str, values):
        path = tmp_path / name
        path.write_text("".join(f"{v}\n" for v in values), encoding="utf-8")
        return path

    return _write
