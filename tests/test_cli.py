import json

import pytest

from src.describe import cli


@pytest.fixture(autouse=True)
def _plain_structlog(monkeypatch):
    # keep structlog on its default, uncached configuration
    monkeypatch.setattr(cli, "configure_structlog", lambda level=None: None)


def test_literal_mode(capsys):
    cli.main([])
    assert "LITERAL SAMPLE" in capsys.readouterr().out


def test_file_mode_with_output(write_lines, literal_sample, tmp_path):
    path = write_lines("numbers.txt", literal_sample)
    out = tmp_path / "summary.json"
    cli.main([str(path), "-o", str(out)])
    assert json.loads(out.read_text())["summary"]["median"] == 43.34


def test_log_file_gets_one_json_line(write_lines, literal_sample, tmp_path):
    path = write_lines("numbers.txt", literal_sample)
    log_file = tmp_path / "logs" / "summaries.jsonl"
    cli.main([str(path), "--log-file", str(log_file)])

    lines = log_file.read_text().splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["event"] == "summary"
    assert record["source"] == str(path)
    assert record["count"] == 9
    assert record["median"] == 43.34


def test_parse_failure_exits_1(write_lines, capsys):
    path = write_lines("bad.txt", ["1.0", "oops"])
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])
    assert exc_info.value.code == 1
    assert "bad.txt:2" in capsys.readouterr().err


def test_single_value_exits_1(write_lines, capsys):
    path = write_lines("one.txt", [3.0])
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path)])
    assert exc_info.value.code == 1
    assert "undefined" in capsys.readouterr().err


def test_missing_file_exits_1(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(tmp_path / "missing.txt")])
    assert exc_info.value.code == 1
    assert "Cannot read input" in capsys.readouterr().err


def test_weights_without_sample_is_a_usage_error(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--weights", str(tmp_path / "w.txt")])
    assert exc_info.value.code == 2


def test_degenerate_weights_file_exits_1(write_lines, capsys):
    path = write_lines("numbers.txt", [1.0, 3.0])
    weights = write_lines("weights.txt", [0, 0.1])
    with pytest.raises(SystemExit) as exc_info:
        cli.main([str(path), "--weights", str(weights)])
    assert exc_info.value.code == 1
    err = capsys.readouterr().err
    assert "[FAIL]" in err
    assert "undefined" in err
