from __future__ import annotations

import logging
import random
from pathlib import Path

import pytest

import Greetings.main as greetings_main
import Sqrt_Solver.main as sqrt_main
from Shared.solver_report import SolverReportParams


def test_parse_reports_json() -> None:
    reports = sqrt_main.parse_reports_json()

    assert reports["Solver Steps"] == SolverReportParams("Sqrt Solver Steps", "Steps", "Reports")


def test_sqrt_run_saves_report(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)

    result = sqrt_main.run()

    assert result == pytest.approx(44.72, abs=0.01)
    assert (tmp_path / "Reports" / "Sqrt Solver Steps.xlsx").exists()
    assert "Result: 44.72" in capsys.readouterr().out


def test_greetings_run_prints_messages(capsys: pytest.CaptureFixture[str]) -> None:
    messages = greetings_main.run(random.Random(3))

    out = capsys.readouterr().out
    assert "Gladys" in out.splitlines()[0]
    assert set(messages) == {"Gladys", "Samantha", "Darrin"}


def test_greetings_run_logs_empty_name(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setattr(greetings_main, "name", "")

    with pytest.raises(ValueError):
        greetings_main.run()

    assert "Greetings: empty name" in caplog.text


def test_run_does_not_add_log_handlers(capsys: pytest.CaptureFixture[str]) -> None:
    root_logger = logging.getLogger()
    handlers = len(root_logger.handlers)

    greetings_main.run(random.Random(1))
    greetings_main.run(random.Random(2))

    assert len(root_logger.handlers) == handlers
