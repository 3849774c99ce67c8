# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI layer.

Commands depend on a Protocol instead of the JSON file implementation,
so tests can swap in an in-memory repo.
"""

from typing import TYPE_CHECKING, Iterable, Protocol

if TYPE_CHECKING:
    from ..errors import PersistenceError
    from ..tasks.task_file import LoadResult
    from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Load/save boundary between the in-memory store and durable storage."""

    def load(self) -> LoadResult: ...
    def save(self, tasks: Iterable[Task]) -> PersistenceError | None: ...
