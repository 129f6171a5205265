# src/todo_list/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store and the persistence adapter depend on Protocols instead of
concrete implementations, so storage backends can be swapped and faked in tests.
"""

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_models import Task

TaskSnapshot = tuple["Task", ...]

TaskListObserver = Callable[[TaskSnapshot], None]
# Called after every task list change with the new snapshot.

Unsubscribe = Callable[[], None]


class KeyValueStore(Protocol):
    """
    Byte-oriented key-value store (the "local storage" of the app).

    read() returns None when the key was never written.
    write() overwrites unconditionally.
    """

    def read(self, key: str) -> bytes | None: ...

    def write(self, key: str, value: bytes) -> None: ...


class TaskRepo(Protocol):
    """The part of the task store the persistence adapter relies on."""

    def replace_all(self, tasks: Iterable["Task"]) -> None: ...

    def subscribe(self, observer: TaskListObserver) -> Unsubscribe: ...

