import json

import pytest

from src.describe.errors import InvalidInput, UndefinedResult
from src.describe.report import fmt_stat, render_summary, run_file, run_literal
from src.describe.stats import summarize


def test_fmt_stat():
    assert fmt_stat([1, 2, 3]) == "2.00 ± 1.00  [min=1.00, med=2.00, max=3.00]  (n=3)"


def test_fmt_stat_degenerate():
    assert fmt_stat([]) == "—"
    assert fmt_stat([7]) == "7.00  (n=1)"


def test_render_summary_lists_every_statistic(literal_sample):
    s = summarize(literal_sample)
    text = render_summary(s, "TITLE")
    assert "TITLE" in text
    for label in ("Count", "Mean", "Median", "Variance (n-1)", "Std. deviation"):
        assert label in text
    assert repr(s.mean) in text
    assert repr(s.standard_deviation) in text


def test_run_literal_prints_sorted_sample_and_dumps_json(tmp_path, capsys):
    out = tmp_path / "literal.json"
    summary = run_literal(str(out))

    printed = capsys.readouterr().out
    assert "LITERAL SAMPLE" in printed
    assert "12.34, 13.75, 21.52, 32.32, 43.34, 43.47, 44.32, 55.63, 56.98" in printed

    payload = json.loads(out.read_text())
    assert payload["summary"] == summary.as_dict()
    assert payload["summary"]["median"] == 43.34
    assert len(payload["sample"]) == 9


def test_run_file(write_lines, literal_sample, capsys):
    path = write_lines("numbers.txt", literal_sample)
    summary = run_file(path)
    assert summary == summarize(literal_sample)
    assert "numbers.txt" in capsys.readouterr().out


def test_run_file_with_unit_weights(write_lines, literal_sample):
    path = write_lines("numbers.txt", literal_sample)
    weights = write_lines("weights.txt", [1] * len(literal_sample))
    summary = run_file(path, weights)
    expected = summarize(literal_sample)
    assert summary.mean == expected.mean
    assert summary.median == expected.median
    assert summary.variance == pytest.approx(expected.variance)


def test_run_file_propagates_core_errors(write_lines):
    with pytest.raises(UndefinedResult):
        run_file(write_lines("one.txt", [5.0]))
    with pytest.raises(InvalidInput):
        run_file(write_lines("empty.txt", []))
