# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from task_tracker.tasks.task_models import Task


class InMemoryTaskRepo:
    """
    In-memory TaskRepo for operation tests.

    Stores copies so that a caller mutating loaded tasks without saving
    does not leak into the "persisted" state, same as the JSON store.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks = [replace(t) for t in tasks or []]
        self.loads = 0
        self.saves = 0

    def load(self) -> list[Task]:
        self.loads += 1
        return [replace(t) for t in self._tasks]

    def save(self, tasks: Iterable[Task]) -> None:
        self.saves += 1
        self._tasks = [replace(t) for t in tasks]
