# src/task_tracker/tasks/task_errors.py

from __future__ import annotations

from pathlib import Path


class TaskTrackerError(Exception):
    """Base class for every error the CLI reports to the user."""

    def __init__(self, message: str, *, usage: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.usage = usage


class InvalidInput(TaskTrackerError, ValueError):
    """A required argument is missing or empty."""


class NotFound(TaskTrackerError, LookupError):
    def __init__(self, task_id: str) -> None:
        super().__init__(
            f"Task with the specified ID not found: {task_id}. "
            "Please check the ID and try again."
        )
        self.task_id = task_id


class CorruptStore(TaskTrackerError):
    """The task file exists but does not hold a valid task list."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load tasks from {path}: {reason}")
        self.path = path
        self.reason = reason


class UnrecognizedCommand(TaskTrackerError):
    def __init__(self, command: str, *, usage: str | None = None) -> None:
        super().__init__(f"Unrecognized command: {command}.", usage=usage)
        self.command = command
