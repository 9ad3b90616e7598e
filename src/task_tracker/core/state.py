# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .ports import TaskRepo


@dataclass
class AppState:
    # Settings live on the state so command handlers can read them.
    settings: object
    task_store: TaskRepo
