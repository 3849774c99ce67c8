# src/task_tracker/errors.py

"""
Error taxonomy.

The store raises; the persistence adapter returns errors as values
(it must keep going with an empty list); the CLI layer turns both into
messages and exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

PersistenceErrorKind = Literal["read", "decode", "write"]


class TaskTrackerError(Exception):
    """Base class for all expected, user-reportable failures."""


class UsageError(TaskTrackerError):
    """Missing argument, missing command or unknown command."""

    def __init__(self, message_key: str, command: str | None = None) -> None:
        super().__init__(message_key)
        self.message_key = message_key
        self.command = command


class ArgumentFormatError(TaskTrackerError):
    """A task ID argument that is not an integer."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"not an integer task id: {raw!r}")
        self.raw = raw


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"task not found: id={task_id}")
        self.task_id = task_id


class PersistenceError(TaskTrackerError):
    """Backing file could not be read, decoded or written."""

    def __init__(
        self,
        kind: PersistenceErrorKind,
        path: str | Path,
        cause: BaseException | None = None,
    ) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{kind} failed for {path}{detail}")
        self.kind: PersistenceErrorKind = kind
        self.path = Path(path)
        self.cause = cause
