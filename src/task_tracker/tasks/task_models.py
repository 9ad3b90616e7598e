# src/task_tracker/tasks/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Notes:
    - transitions happen only through explicit commands (progress/done)
    - "in progress" (with a space) is what older task files contain
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"

    @classmethod
    def from_raw(cls, raw: str) -> TaskStatus:
        """Parse a stored status value. Raises ValueError on unknown values."""
        if raw == "in progress":
            return cls.IN_PROGRESS
        return cls(raw)


def utc_now() -> datetime:
    # Millisecond precision: that is what survives the JSON round trip.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def new_task_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(ts: datetime) -> str:
    # Milliseconds unless the value carries finer precision, which is kept.
    timespec = "milliseconds" if ts.microsecond % 1000 == 0 else "microseconds"
    return ts.astimezone(timezone.utc).isoformat(timespec=timespec).replace("+00:00", "Z")


def parse_timestamp(raw: str) -> datetime:
    ts = datetime.fromisoformat(raw)
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


@dataclass(slots=True)
class Task:
    id: str
    description: str
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from one stored JSON object.

        Accepts the legacy "task" key in place of "description".
        Raises ValueError/TypeError/KeyError on malformed input; the store
        turns those into CorruptStore.
        """
        task_id = raw["id"]
        description = raw["description"] if "description" in raw else raw["task"]
        if not isinstance(task_id, str) or not task_id:
            raise ValueError("task id must be a non-empty string")
        if not isinstance(description, str):
            raise TypeError(f"description of task {task_id} must be a string")

        status = TaskStatus.from_raw(raw["status"])
        created_at = parse_timestamp(raw["createdAt"])
        updated_at = parse_timestamp(raw.get("updatedAt") or raw["createdAt"])

        return cls(
            id=task_id,
            description=description,
            status=status,
            created_at=created_at,
            updated_at=updated_at,
        )
