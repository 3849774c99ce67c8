# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ..core.state import AppState
from ..errors import ArgumentFormatError, TaskNotFoundError, UsageError
from .messages import Messages

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2

# Optional sign + ASCII digits; int() alone would also accept spaces,
# underscores and non-ASCII digits.
_TASK_ID_RE = re.compile(r"[+-]?[0-9]+")

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandResult:
    """What a command wants printed, and the exit status it implies."""

    exit_code: int = EXIT_OK
    out: list[str] = field(default_factory=list)
    err: list[str] = field(default_factory=list)


CommandHandler = Callable[[AppState, list[str], Messages], CommandResult]


class CommandRegistry:
    """Subcommand registry: maps argv[0] to a handler (add, list, done)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(self, name: str, handler: CommandHandler, help_key: str) -> None:
        self._handlers[name] = handler
        self._help[name] = help_key

    def handle(self, state: AppState, argv: Sequence[str], messages: Messages) -> CommandResult:
        """
        Dispatch ["command", *args].
        Usage and argument-format problems become EXIT_USAGE results.
        """
        try:
            if not argv:
                raise UsageError("usage")

            name, args = argv[0], list(argv[1:])
            handler = self._handlers.get(name)
            if handler is None:
                raise UsageError("unknown_command", command=name)

            return handler(state, args, messages)
        except UsageError as e:
            logger.debug("Usage error key=%s command=%s", e.message_key, e.command)
            if e.message_key == "usage":
                return CommandResult(EXIT_USAGE, err=[self.build_help(messages)])
            return CommandResult(EXIT_USAGE, err=[messages.get(e.message_key, command=e.command)])
        except ArgumentFormatError as e:
            logger.debug("Bad task id %r", e.raw)
            return CommandResult(EXIT_USAGE, err=[messages.get("bad_id")])

    def build_help(self, messages: Messages) -> str:
        lines = [messages.get("usage")]
        for help_key in self._help.values():
            lines.append(f"  {messages.get(help_key)}")
        return "\n".join(lines)


registry = CommandRegistry()


def parse_task_id(raw: str) -> int:
    if not _TASK_ID_RE.fullmatch(raw):
        raise ArgumentFormatError(raw)
    return int(raw)


def format_task_line(task, messages: Messages) -> str:
    return f"[{task.id}] {task.title} ({messages.status_label(task.completed)})"


def _flush(state: AppState, messages: Messages, result: CommandResult) -> None:
    """Persist the whole store after a mutation; report (not roll back) failures."""
    error = state.repo.save(state.store.list_tasks())
    if error is not None:
        result.exit_code = EXIT_FAILURE
        result.err.append(messages.get("save_failed", error=error.cause or error))


def cmd_add(state: AppState, args: list[str], messages: Messages) -> CommandResult:
    """add <title>: extra arguments are ignored, the title is stored verbatim."""
    if not args:
        raise UsageError("add_usage", command="add")

    task = state.store.add(args[0])
    result = CommandResult()
    _flush(state, messages, result)
    result.out.append(messages.get("added", title=task.title))
    return result


def cmd_list(state: AppState, args: list[str], messages: Messages) -> CommandResult:
    tasks = state.store.list_tasks()
    if not tasks:
        return CommandResult(out=[messages.get("empty")])
    return CommandResult(out=[format_task_line(t, messages) for t in tasks])


def cmd_done(state: AppState, args: list[str], messages: Messages) -> CommandResult:
    if not args:
        raise UsageError("done_usage", command="done")

    task_id = parse_task_id(args[0])
    try:
        task = state.store.complete(task_id)
    except TaskNotFoundError:
        logger.info("done: no task with id=%s", task_id)
        return CommandResult(EXIT_FAILURE, err=[messages.get("not_found", task_id=task_id)])

    result = CommandResult()
    _flush(state, messages, result)
    result.out.append(messages.get("completed", title=task.title))
    return result


registry.register("add", cmd_add, help_key="help_add")
registry.register("list", cmd_list, help_key="help_list")
registry.register("done", cmd_done, help_key="help_done")
