# src/task_tracker/tasks/task_file.py

from __future__ import annotations

import contextlib
import json
import logging
import os
import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import PersistenceError
from .task_models import Task, TaskDecodeError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadResult:
    tasks: list[Task] = field(default_factory=list)
    error: PersistenceError | None = None


def encode_tasks(tasks: Iterable[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2) + "\n"


def decode_tasks(text: str) -> list[Task]:
    """
    Decode the backing file contents.

    Raises ValueError (json.JSONDecodeError or TaskDecodeError) on anything
    that is not a JSON array of task records. A literal `null` is an empty list;
    a `null` element decodes to a zero-valued task.
    """
    data = json.loads(text)
    if data is None:
        return []
    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a JSON array of tasks, got {type(data).__name__}")
    return [Task.from_dict({} if item is None else item) for item in data]


class JsonTaskFile:
    """
    JSON file persistence for the task list.

    - load() never raises for I/O or content problems: it returns an empty
      list plus the error, and leaves a malformed file on disk untouched.
    - save() replaces the whole file via a sibling temp file + os.replace;
      the temp file is removed if anything fails. Symlinks are written
      through and an existing file keeps its permission bits.

    The file is not locked: concurrent runs are last-writer-wins.
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _target(self) -> Path:
        # Write through a symlinked task file instead of replacing the link.
        return self._path.resolve()

    def load(self) -> LoadResult:
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            logger.debug("Task file %s does not exist yet; starting empty.", self._path)
            return LoadResult()
        except OSError as e:
            logger.info("Failed to read task file %s: %s", self._path, e)
            return LoadResult(error=PersistenceError("read", self._path, e))

        try:
            tasks = decode_tasks(raw.decode("utf-8"))
        except ValueError as e:
            # UnicodeDecodeError, JSONDecodeError and TaskDecodeError are all ValueErrors.
            logger.info("Failed to decode task file %s: %s", self._path, e)
            return LoadResult(error=PersistenceError("decode", self._path, e))

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return LoadResult(tasks=tasks)

    def save(self, tasks: Iterable[Task]) -> PersistenceError | None:
        tmp: Path | None = None
        try:
            payload = encode_tasks(tasks)
            target = self._target()
            tmp = target.with_name(target.name + ".tmp")
            target.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            if target.exists():
                shutil.copymode(target, tmp)
            os.replace(tmp, target)
        except (OSError, RuntimeError, ValueError) as e:
            # RuntimeError: symlink loop on resolve (3.11-3.12).
            # ValueError: titles that cannot be encoded as UTF-8 (lone surrogates).
            logger.info("Failed to save task file %s: %s", self._path, e)
            if tmp is not None:
                with contextlib.suppress(OSError):
                    tmp.unlink(missing_ok=True)
            return PersistenceError("write", self._path, e)

        logger.info("Saved task file %s", self._path)
        return None
