# src/task_tracker/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_errors import InvalidInput, UnrecognizedCommand
from ..tasks.task_models import Task, TaskStatus

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

PROG = "task-tracker"


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    args_hint: str = ""

    @property
    def usage(self) -> str:
        return f"{PROG} {self.name} {self.args_hint}".rstrip()


class CommandRegistry:
    """Maps command names (and aliases) to handlers."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        args_hint: str = "",
        aliases: list[str] | None = None,
    ) -> None:
        key = name.lower()
        self._commands[key] = Command(key, handler, help_text, args_hint)
        for alias in aliases or []:
            self._aliases[alias.lower()] = key

    def get(self, name: str) -> Command | None:
        key = name.lower()
        return self._commands.get(self._aliases.get(key, key))

    def handle(self, state: AppState, argv: list[str]) -> str:
        """
        Run `argv[0]` with the remaining arguments and return its output.

        An empty argv shows help.
        """
        if not argv:
            return self.build_help()

        name, args = argv[0], argv[1:]
        command = self.get(name)
        if command is None:
            raise UnrecognizedCommand(name, usage=f'Use "{PROG} help" to see the list of available commands.')

        logger.debug("Running command %s args=%d", command.name, len(args))
        try:
            return command.handler(state, args)
        except InvalidInput as e:
            if e.usage is None:
                e.usage = command.usage
            raise

    def build_help(self) -> str:
        width = max(len(c.usage) for c in self._commands.values())
        lines = ["Task CLI - Simple Task Management", "", "Usage:"]
        for command in self._commands.values():
            lines.append(f"  {command.usage.ljust(width)}  {command.help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _format_task(task: Task) -> str:
    created = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    updated = task.updated_at.astimezone().strftime("%Y-%m-%d %H:%M:%S")
    return (
        f"{task.id}  [{task.status.value}]  {task.description}\n"
        f"    created {created}, updated {updated}"
    )


def _format_tasks(tasks: list[Task]) -> str:
    if not tasks:
        return "No tasks."
    return "\n".join(_format_task(t) for t in tasks)


def _require_id(args: list[str], what: str) -> str:
    if not args or not args[0].strip():
        raise InvalidInput(f"Please specify the task ID {what}.")
    return args[0].strip()


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    # Unquoted multi-word descriptions arrive as separate arguments.
    task = task_api.add_task(state.task_store, " ".join(args))
    return f"Task added: {task.id}"


def cmd_update(state: AppState, args: list[str]) -> str:
    if len(args) < 2:
        raise InvalidInput("Both task ID and description are required.")
    task = task_api.update_task(state.task_store, _require_id(args, "to update"), " ".join(args[1:]))
    return f"Task updated: {task.id}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    task = task_api.delete_task(state.task_store, _require_id(args, "to delete"))
    return f"Task deleted: {task.id}"


def cmd_progress(state: AppState, args: list[str]) -> str:
    task = task_api.mark_in_progress(state.task_store, _require_id(args, "to mark as in progress"))
    return f"Task marked as in progress: {task.id}"


def cmd_done(state: AppState, args: list[str]) -> str:
    task = task_api.mark_done(state.task_store, _require_id(args, "to mark as done"))
    return f"Task marked as done: {task.id}"


def cmd_list(state: AppState, args: list[str]) -> str:
    return _format_tasks(task_api.list_tasks(state.task_store))


def _status_lister(status: TaskStatus) -> CommandHandler:
    def handler(state: AppState, args: list[str]) -> str:
        return _format_tasks(task_api.list_tasks_by_status(state.task_store, status))

    return handler


registry.register("add", cmd_add, help_text="Add a task", args_hint="<description>")
registry.register("update", cmd_update, help_text="Update an existing task", args_hint="<id> <description>")
registry.register("delete", cmd_delete, help_text="Delete a task", args_hint="<id>")
registry.register("progress", cmd_progress, help_text="Mark task as 'In Progress'", args_hint="<id>")
registry.register("done", cmd_done, help_text="Mark task as 'Done'", args_hint="<id>")
registry.register("list", cmd_list, help_text="List all tasks")
registry.register("list-done", _status_lister(TaskStatus.DONE), help_text="List all done tasks")
registry.register(
    "list-progress", _status_lister(TaskStatus.IN_PROGRESS), help_text="List tasks in progress"
)
registry.register("list-pending", _status_lister(TaskStatus.PENDING), help_text="List pending tasks")
registry.register("help", cmd_help, help_text="Show this help message", aliases=["-h", "--help"])
