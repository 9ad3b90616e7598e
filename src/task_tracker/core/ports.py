# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task operations.

Operations depend on this Protocol instead of the concrete JSON store,
so tests can hand them an in-memory repo.
"""

from typing import Iterable, Protocol

from ..tasks.task_models import Task


class TaskRepo(Protocol):
    """Whole-collection persistence: read everything, write everything."""

    def load(self) -> list[Task]: ...

    def save(self, tasks: Iterable[Task]) -> None: ...
