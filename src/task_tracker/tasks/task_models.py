# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TaskDecodeError(ValueError):
    """A stored record does not have the expected shape or field types."""


def _field(raw: dict[str, Any], key: str, zero: Any) -> Any:
    value = raw.get(key)
    return zero if value is None else value


@dataclass(slots=True)
class Task:
    """
    One stored task.

    Field names double as the JSON keys in the backing file.
    """

    id: int
    title: str
    completed: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "completed": self.completed}

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Decode one record.

        Missing (or null) fields take their zero value and unknown keys are ignored,
        but a present field of the wrong JSON type is rejected.
        """
        if not isinstance(raw, dict):
            raise TaskDecodeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = _field(raw, "id", 0)
        # bool is an int subclass; JSON true/false is not a valid id.
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise TaskDecodeError(f"task id must be an integer, got {task_id!r}")

        title = _field(raw, "title", "")
        if not isinstance(title, str):
            raise TaskDecodeError(f"task title must be a string, got {title!r}")

        completed = _field(raw, "completed", False)
        if not isinstance(completed, bool):
            raise TaskDecodeError(f"task completed flag must be a boolean, got {completed!r}")

        return cls(id=task_id, title=title, completed=completed)
