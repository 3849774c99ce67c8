# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import TaskNotFoundError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory ordered task collection for one run.

    Insertion order is display order. New ids are len(store) + 1; ids coming
    from a loaded file are trusted as-is (no duplicate or gap repair), so an
    add after a hand-edited file may reuse an existing id.

    The store does no I/O: callers persist list_tasks() after each mutation.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def add(self, title: str) -> Task:
        task = Task(id=len(self._tasks) + 1, title=title, completed=False)
        self._tasks.append(task)
        logger.debug("Task added id=%s", task.id)
        return task

    def list_tasks(self) -> list[Task]:
        return list(self._tasks)

    def complete(self, task_id: int) -> Task:
        """Mark the first task with this id as completed (idempotent)."""
        for task in self._tasks:
            if task.id == task_id:
                if task.completed:
                    logger.debug("Task id=%s already completed", task_id)
                task.completed = True
                return task
        raise TaskNotFoundError(task_id)
