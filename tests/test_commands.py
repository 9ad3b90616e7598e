# tests/test_commands.py

from __future__ import annotations

import pytest

from task_tracker.cli.commands import CommandRegistry, registry
from task_tracker.tasks import task_api
from task_tracker.tasks.task_errors import InvalidInput, NotFound, UnrecognizedCommand
from task_tracker.tasks.task_models import TaskStatus


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    seen: list[list[str]] = []

    def handler(state, args):
        seen.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["x"])

    assert reg.handle(state, ["a", "1", "2"]) == "ok"
    assert reg.handle(state, ["X"]) == "ok"
    assert seen == [["1", "2"], []]


def test_command_registry_unknown_command(state) -> None:
    reg = CommandRegistry()
    reg.register("a", lambda state, args: "ok", "a")
    with pytest.raises(UnrecognizedCommand) as exc:
        reg.handle(state, ["nope"])
    assert exc.value.command == "nope"
    assert exc.value.usage and "help" in exc.value.usage


def test_empty_argv_shows_help(state) -> None:
    out = registry.handle(state, [])
    for name in ("add", "update", "delete", "progress", "done", "list", "list-done", "list-progress", "list-pending", "help"):
        assert f"task-tracker {name}" in out


def test_add_joins_words_and_reports_id(state) -> None:
    out = registry.handle(state, ["add", "buy", "milk"])
    (task,) = task_api.list_tasks(state.task_store)
    assert task.description == "buy milk"
    assert out == f"Task added: {task.id}"


@pytest.mark.parametrize(
    "argv",
    [["add"], ["update"], ["update", "some-id"], ["update", " ", "x"], ["delete"], ["progress"], ["done"]],
)
def test_missing_arguments_raise_invalid_input_with_usage(state, argv) -> None:
    with pytest.raises(InvalidInput) as exc:
        registry.handle(state, argv)
    assert exc.value.usage is not None
    assert exc.value.usage.startswith(f"task-tracker {argv[0]}")


def test_update_progress_done_delete_flow(state) -> None:
    task = task_api.add_task(state.task_store, "draft")

    assert registry.handle(state, ["update", task.id, "final", "version"]) == f"Task updated: {task.id}"
    assert registry.handle(state, ["progress", task.id]) == f"Task marked as in progress: {task.id}"
    assert "[in_progress]  final version" in registry.handle(state, ["list-progress"])

    assert registry.handle(state, ["done", task.id]) == f"Task marked as done: {task.id}"
    assert task_api.list_tasks(state.task_store)[0].status is TaskStatus.DONE
    assert registry.handle(state, ["list-pending"]) == "No tasks."
    assert task.id in registry.handle(state, ["list-done"])

    assert registry.handle(state, ["delete", task.id]) == f"Task deleted: {task.id}"
    assert registry.handle(state, ["list"]) == "No tasks."


def test_unknown_id_propagates_not_found(state) -> None:
    with pytest.raises(NotFound):
        registry.handle(state, ["done", "does-not-exist"])
