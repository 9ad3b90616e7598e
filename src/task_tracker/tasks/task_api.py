# src/task_tracker/tasks/task_api.py

"""
Task operations.

Every operation loads the whole collection from the given repo. Mutating
operations save the whole collection back; a failed lookup raises before
anything is saved.
"""

from __future__ import annotations

import logging

from ..core.ports import TaskRepo
from .task_errors import InvalidInput, NotFound
from .task_models import Task, TaskStatus, new_task_id, utc_now

logger = logging.getLogger(__name__)


def _require_description(description: str | None, usage: str | None = None) -> str:
    if description is None or not description.strip():
        raise InvalidInput("Please provide a task description.", usage=usage)
    try:
        description.encode("utf-8")
    except UnicodeEncodeError as e:
        # Undecodable argv bytes arrive as lone surrogates; the task file is UTF-8.
        raise InvalidInput("Task description is not valid UTF-8 text.", usage=usage) from e
    return description


def _find_index(tasks: list[Task], task_id: str) -> int:
    for i, t in enumerate(tasks):
        if t.id == task_id:
            return i
    raise NotFound(task_id)


def add_task(repo: TaskRepo, description: str) -> Task:
    """Append a new pending task and return it."""
    description = _require_description(description)

    tasks = repo.load()
    existing = {t.id for t in tasks}
    task_id = new_task_id()
    while task_id in existing:
        task_id = new_task_id()

    now = utc_now()
    task = Task(
        id=task_id,
        description=description,
        status=TaskStatus.PENDING,
        created_at=now,
        updated_at=now,
    )
    tasks.append(task)
    repo.save(tasks)
    logger.info("Task added id=%s", task.id)
    return task


def update_task(repo: TaskRepo, task_id: str, description: str) -> Task:
    description = _require_description(description)

    tasks = repo.load()
    task = tasks[_find_index(tasks, task_id)]
    task.description = description
    task.updated_at = utc_now()
    repo.save(tasks)
    logger.info("Task updated id=%s", task_id)
    return task


def delete_task(repo: TaskRepo, task_id: str) -> Task:
    tasks = repo.load()
    removed = tasks.pop(_find_index(tasks, task_id))
    repo.save(tasks)
    logger.info("Task deleted id=%s", task_id)
    return removed


def set_task_status(repo: TaskRepo, task_id: str, status: TaskStatus) -> Task:
    """
    Move a task to `status`.

    Setting the status a task already has still counts as a change
    (updated_at is refreshed and the collection is saved).
    """
    tasks = repo.load()
    task = tasks[_find_index(tasks, task_id)]
    previous = task.status
    task.status = status
    task.updated_at = utc_now()
    repo.save(tasks)
    logger.info("Task status id=%s %s -> %s", task_id, previous.value, status.value)
    return task


def mark_in_progress(repo: TaskRepo, task_id: str) -> Task:
    return set_task_status(repo, task_id, TaskStatus.IN_PROGRESS)


def mark_done(repo: TaskRepo, task_id: str) -> Task:
    return set_task_status(repo, task_id, TaskStatus.DONE)


def list_tasks(repo: TaskRepo) -> list[Task]:
    return repo.load()


def list_tasks_by_status(repo: TaskRepo, status: TaskStatus | str) -> list[Task]:
    """Tasks with the given status, in insertion order."""
    wanted = TaskStatus.from_raw(str(status))
    return [t for t in repo.load() if t.status == wanted]
