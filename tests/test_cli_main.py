# tests/test_cli_main.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from task_tracker.cli.main import main, run


def _stored(path: Path) -> list[dict]:
    return json.loads(path.read_text("utf-8"))


def test_end_to_end_scenario(settings, capsys) -> None:
    path = settings.tasks_file
    assert not path.exists()

    assert run(["add", "Buy milk"], settings=settings) == 0
    assert _stored(path) == [{"id": 1, "title": "Buy milk", "completed": False}]

    assert run(["add", "Walk dog"], settings=settings) == 0
    assert _stored(path) == [
        {"id": 1, "title": "Buy milk", "completed": False},
        {"id": 2, "title": "Walk dog", "completed": False},
    ]

    assert run(["done", "1"], settings=settings) == 0
    assert _stored(path) == [
        {"id": 1, "title": "Buy milk", "completed": True},
        {"id": 2, "title": "Walk dog", "completed": False},
    ]

    capsys.readouterr()
    assert run(["list"], settings=settings) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["[1] Buy milk (done)", "[2] Walk dog (pending)"]


def test_no_command_prints_usage_and_does_not_read_file(settings, capsys) -> None:
    settings.tasks_file.write_text("not json", "utf-8")

    assert run([], settings=settings) == 2

    captured = capsys.readouterr()
    assert "Usage:" in captured.err
    assert "Could not load" not in captured.err


def test_corrupt_file_degrades_to_empty_store(settings, capsys) -> None:
    settings.tasks_file.write_text("{broken", "utf-8")

    assert run(["list"], settings=settings) == 1

    captured = capsys.readouterr()
    assert "Could not load tasks:" in captured.err
    assert captured.out.strip() == "No tasks."
    assert settings.tasks_file.read_text("utf-8") == "{broken"


def test_add_after_corrupt_file_overwrites_it(settings, capsys) -> None:
    settings.tasks_file.write_text("{broken", "utf-8")

    assert run(["add", "fresh"], settings=settings) == 1

    assert _stored(settings.tasks_file) == [{"id": 1, "title": "fresh", "completed": False}]


def test_unknown_command_still_loads_and_reports(settings, capsys) -> None:
    assert run(["frobnicate"], settings=settings) == 2
    assert "Unknown command: frobnicate" in capsys.readouterr().err


def test_main_reads_settings_from_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys, restore_logging
) -> None:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "data" / "todo.json"
    monkeypatch.setenv("TASKTRACK_TASKS_FILE", str(target))
    monkeypatch.setenv("TASKTRACK_LANG", "ja")
    monkeypatch.setenv("TASKTRACK_LOG_FILE", str(tmp_path / "logs" / "tracker.log"))

    assert main(["add", "買い物に行く"]) == 0

    assert capsys.readouterr().out.strip() == "タスクを追加しました: 買い物に行く"
    assert _stored(target) == [{"id": 1, "title": "買い物に行く", "completed": False}]
    assert (tmp_path / "logs" / "tracker.log").exists()


def test_unusable_log_file_does_not_stop_the_command(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys, restore_logging
) -> None:
    monkeypatch.chdir(tmp_path)
    log_dir = tmp_path / "logdir"
    log_dir.mkdir()
    monkeypatch.setenv("TASKTRACK_TASKS_FILE", str(tmp_path / "tasks.json"))
    monkeypatch.setenv("TASKTRACK_LANG", "en")
    monkeypatch.setenv("TASKTRACK_LOG_FILE", str(log_dir))
    monkeypatch.delenv("TASKTRACK_LOG_LEVEL", raising=False)

    assert main(["list"]) == 0

    captured = capsys.readouterr()
    assert captured.out.strip() == "No tasks."
    assert "Cannot open log file" in captured.err
