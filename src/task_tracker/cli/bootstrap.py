# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings for this run,
- wires the JSON task file into AppState,
- loads the store once (a failed load degrades to an empty store).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..errors import PersistenceError
from ..tasks.task_file import JsonTaskFile
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    repo: TaskRepo | None = None,
) -> tuple[AppState, PersistenceError | None]:
    """
    Create AppState and load the task list.

    Keeping settings and repo injectable makes the app easy to test and avoids hidden global
    config reads. Returns the load error (if any) so the caller can report it.
    """
    if settings is None:
        settings = get_settings()
    if repo is None:
        repo = JsonTaskFile(settings.tasks_file)

    loaded = repo.load()
    state = AppState(
        settings=settings,
        repo=repo,
        store=TaskStore(loaded.tasks),
    )
    logger.debug("State ready tasks=%d load_error=%s", len(state.store), loaded.error)
    return state, loaded.error
