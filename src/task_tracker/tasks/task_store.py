# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
import uuid
from collections.abc import Iterable
from pathlib import Path

from .task_errors import CorruptStore
from .task_models import Task, format_timestamp, utc_now

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole task list lives in one pretty-printed JSON array:
    - load() reads all of it, save() rewrites all of it
    - writes go to a sibling temp file which then replaces the target

    Concurrency:
    - no locking; two processes writing the same file race and the last
      writer wins
    """

    def __init__(self, path: str | Path = "tasks.json") -> None:
        self._path = Path(path)
        logger.debug("TaskStore ready path=%s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _write_atomic(self, payload: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        finally:
            if tmp.exists():
                tmp.unlink()

    def _parse(self, text: str) -> list[Task]:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptStore(self._path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
        except RecursionError as e:
            raise CorruptStore(self._path, "JSON nested too deeply") from e

        if not isinstance(data, list):
            raise CorruptStore(self._path, "expected a JSON array of tasks")

        tasks: list[Task] = []
        seen: set[str] = set()
        for i, raw in enumerate(data):
            if not isinstance(raw, dict):
                raise CorruptStore(self._path, f"entry #{i} is not an object")
            try:
                task = Task.from_dict(raw)
            except (KeyError, TypeError, ValueError) as e:
                raise CorruptStore(self._path, f"entry #{i} is invalid ({e!s})") from e
            if task.id in seen:
                raise CorruptStore(self._path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    # ---- public API ----

    def load(self) -> list[Task]:
        """
        Read the full task list.

        A missing file is created holding an empty list. A file that cannot
        be parsed raises CorruptStore and is left untouched.
        """
        if not self._path.exists():
            logger.info("Task file %s not found; creating an empty one.", self._path)
            self.save([])
            return []

        try:
            text = self._path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise CorruptStore(self._path, "file is not valid UTF-8") from e

        tasks = self._parse(text)
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        items = [t.to_dict() for t in tasks]
        self._write_atomic(json.dumps(items, ensure_ascii=False, indent=2) + "\n")
        logger.debug("Saved %d tasks to %s", len(items), self._path)

    def quarantine(self) -> Path | None:
        """
        Move an unreadable task file aside and start over with an empty list.

        Returns the backup path, or None if there was no file to move.
        """
        if not self._path.exists():
            self.save([])
            return None

        stamp = format_timestamp(utc_now()).replace(":", "").replace(".", "")
        backup = self._path.with_name(f"{self._path.name}.corrupt-{stamp}-{uuid.uuid4().hex[:8]}")
        os.replace(self._path, backup)
        self.save([])
        logger.info("Moved corrupt task file %s to %s", self._path, backup)
        return backup
