# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from task_tracker.config import DEFAULT_TASKS_FILE, Settings
from task_tracker.logging_setup import level_from_name

_VARS = ("TASKTRACK_TASKS_FILE", "TASKTRACK_LANG", "TASKTRACK_LOG_LEVEL", "TASKTRACK_LOG_FILE")


@pytest.fixture()
def clean_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.chdir(tmp_path)
    for name in _VARS:
        # setenv first so a value loaded from .env is removed again on undo.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.tasks_file == DEFAULT_TASKS_FILE == Path("tasks.json")
    assert s.language == "en"
    assert s.log_level == "WARNING"
    assert s.log_file is None


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKTRACK_TASKS_FILE", str(tmp_path / "t.json"))
    clean_env.setenv("TASKTRACK_LANG", " JA ")
    clean_env.setenv("TASKTRACK_LOG_LEVEL", "debug")
    clean_env.setenv("TASKTRACK_LOG_FILE", "  ")

    s = Settings.from_env()

    assert s.tasks_file == tmp_path / "t.json"
    assert s.language == "ja"
    assert s.log_level == "DEBUG"
    assert s.log_file is None


def test_dotenv_in_cwd_is_loaded_without_overriding(clean_env, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TASKTRACK_LANG=ja\nTASKTRACK_TASKS_FILE=from_dotenv.json\n", "utf-8")
    clean_env.setenv("TASKTRACK_TASKS_FILE", "from_env.json")

    s = Settings.from_env()

    assert s.language == "ja"
    assert s.tasks_file == Path("from_env.json")


def test_level_from_name() -> None:
    assert level_from_name("info") == logging.INFO
    assert level_from_name("nonsense") == logging.WARNING
