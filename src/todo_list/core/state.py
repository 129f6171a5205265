# src/todo_list/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.persistence import TaskListPersistence
from ..tasks.task_store import TaskStore
from ..ui.widget import TodoWidget
from .ports import KeyValueStore, Unsubscribe


@dataclass
class AppState:
    # Settings are kept on the state for easy access in commands/connectors.
    settings: object

    kv: KeyValueStore
    task_store: TaskStore
    persistence: TaskListPersistence
    widget: TodoWidget

    detach_persistence: Unsubscribe | None = None
