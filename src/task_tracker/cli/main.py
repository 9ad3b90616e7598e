# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and maps
errors to a message on stderr plus a non-zero exit status.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_errors import CorruptStore, TaskTrackerError

logger = logging.getLogger(__name__)


def _report_error(message: str, usage: str | None = None) -> None:
    text = f"Error: {message}"
    if usage:
        text += f"\nUsage: {usage}"
    print(text, file=sys.stderr)


def _recover_corrupt_store(state, err: CorruptStore) -> None:
    """Move the unreadable file aside so the next run starts from an empty list."""
    try:
        backup = state.task_store.quarantine()
    except OSError:
        logger.exception("Failed to move corrupt task file %s aside", err.path)
        print("The task file was left in place; fix or remove it manually.", file=sys.stderr)
        return
    if backup is not None:
        print(
            f"The unreadable task file was moved to {backup}; a new empty task list was created.",
            file=sys.stderr,
        )


def main(argv: list[str] | None = None, *, settings=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    log_file = settings.log_file_path if getattr(settings, "log_to_file", False) else None
    setup_logging(log_file=log_file, console_level=console_level)

    logger.debug("Starting %s argv=%s", getattr(settings, "app_name", "task-tracker"), argv)

    state = None
    try:
        state = create_initial_state(settings=settings)
        output = command_registry.handle(state, list(argv))
    except CorruptStore as e:
        logger.debug("Corrupt task file", exc_info=True)
        _report_error(e.message)
        if state is not None:
            _recover_corrupt_store(state, e)
        return 1
    except TaskTrackerError as e:
        logger.debug("Command failed: %s", e.message)
        _report_error(e.message, e.usage)
        return 1
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        _report_error(f"Unexpected failure: {e}")
        return 1

    if output:
        print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
