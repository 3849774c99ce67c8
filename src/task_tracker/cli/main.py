# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, loads the task file into AppState, applies exactly one
command, prints its output and returns the exit status.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..config import get_settings
from ..logging_setup import level_from_name, setup_logging
from .bootstrap import create_initial_state
from .commands import EXIT_FAILURE, EXIT_OK, EXIT_USAGE, CommandResult, registry
from .messages import Messages

logger = logging.getLogger(__name__)


def _emit(result: CommandResult) -> None:
    for line in result.err:
        print(line, file=sys.stderr)
    for line in result.out:
        print(line)


def run(argv: Sequence[str], *, settings) -> int:
    """Apply one command against the configured task file (no logging setup)."""
    messages = Messages(getattr(settings, "language", "en"))

    # No command: print usage without touching the task file.
    if not argv:
        _emit(CommandResult(EXIT_USAGE, err=[registry.build_help(messages)]))
        return EXIT_USAGE

    state, load_error = create_initial_state(settings=settings)
    if load_error is not None:
        print(messages.get("load_failed", error=load_error.cause or load_error), file=sys.stderr)

    try:
        result = registry.handle(state, argv, messages)
    except Exception:
        logger.exception("Command handler crashed.")
        print(messages.get("internal_error"), file=sys.stderr)
        return EXIT_FAILURE

    _emit(result)

    if result.exit_code == EXIT_OK and load_error is not None:
        return EXIT_FAILURE
    return result.exit_code


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    setup_logging(
        console_level=level_from_name(settings.log_level),
        log_file=settings.log_file,
    )

    if argv is None:
        argv = sys.argv[1:]

    logger.debug("argv=%r tasks_file=%s", list(argv), settings.tasks_file)
    return run(list(argv), settings=settings)


if __name__ == "__main__":
    sys.exit(main())
