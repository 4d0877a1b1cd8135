"""Unit tests for the playground CLI."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from closure_playground import config as config_module
from closure_playground.cli import _parse_args, main
from closure_playground.logs import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in (config_module.ENV_FORMAT, config_module.ENV_LOG_LEVEL, config_module.ENV_LOG_FILE):
        monkeypatch.delenv(name, raising=False)
    yield
    configure_logging("warning")


def test_parse_args_uses_defaults() -> None:
    cli = _parse_args([])

    assert cli.list_only is False
    assert cli.overrides == {}


def test_parse_args_collects_overrides(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "playground.log"

    cli = _parse_args(
        [
            "--format",
            "json",
            "--snippet",
            "sort_named",
            "--snippet",
            "map_digit_names",
            "--log-level",
            "debug",
            "--log-file",
            str(log_file),
        ]
    )

    assert cli.overrides == {
        "format": "json",
        "snippets": ("sort_named", "map_digit_names"),
        "log_level": "debug",
        "log_file": log_file.resolve(),
    }


def test_parse_args_validates_format() -> None:
    with pytest.raises(SystemExit):
        _parse_args(["--format", "yaml"])


def test_main_prints_text_report(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main([])
    out = capsys.readouterr().out.splitlines()

    assert exit_code == 0
    assert out[:7] == [
        "increment_by_ten_1: 10",
        "increment_by_ten_2: 20",
        "increment_by_ten_3: 30",
        "increment_by_five_1: 5",
        "increment_by_five_2: 10",
        "increment_by_ten_4: 40",
        "also_increment_by_ten: 50",
    ]
    assert out[-1] == "map_digit_names: ['OneSix', 'FiveEight', 'FiveOneZero']"


def test_main_json_selection(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--format", "json", "--snippet", "also_increment_by_ten"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert payload == [
        {
            "name": "also_increment_by_ten",
            "title": "also_increment_by_ten()",
            "value": 50,
        }
    ]


def test_main_format_from_environment(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(config_module.ENV_FORMAT, "json")

    assert main(["--snippet", "sort_operator"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload[0]["value"] == ["Ewa", "Daniella", "Chris", "Barry", "Alex"]


def test_main_unknown_snippet(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["--snippet", "does_not_exist"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert captured.out == ""
    assert "unknown snippet(s): does_not_exist" in captured.err


def test_main_bad_environment_format(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv(config_module.ENV_FORMAT, "yaml")

    assert main([]) == 2
    assert "unsupported report format" in capsys.readouterr().err


def test_main_lists_snippets(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--list"]) == 0
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == "increment_by_ten_1\tincrement_by_ten()"
    assert len(lines) == 13


def test_main_writes_debug_log_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    log_file = tmp_path / "logs" / "playground.log"

    assert main(["--log-level", "debug", "--log-file", str(log_file)]) == 0
    capsys.readouterr()
    for handler in logging.getLogger(LOGGER_NAME).handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "evaluated also_increment_by_ten -> 50" in text
    assert "running walkthrough (format=text)" in text


def test_main_bad_log_level_keeps_current_handler(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("warning")
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    log_file = tmp_path / "d" / "x.log"

    assert main(["--log-level", "verbose", "--log-file", str(log_file)]) == 2
    assert "unknown log level 'verbose'" in capsys.readouterr().err
    assert logger.handlers == before
    assert not log_file.parent.exists()

    configure_logging("warning")
    assert len(logger.handlers) == len(before)


def test_main_unopenable_log_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)

    assert main(["--log-file", str(blocker / "playground.log")]) == 2
    captured = capsys.readouterr()

    assert captured.out == ""
    assert captured.err.startswith("error: ")
    assert logger.handlers == before
