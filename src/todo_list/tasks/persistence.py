# src/todo_list/tasks/persistence.py

"""
Task list persistence.

The whole list lives under one fixed key as a JSON array of
{"id", "text", "completed"} records. There is no versioning and no
incremental write: every change rewrites the full value.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from ..core.ports import KeyValueStore, TaskRepo, Unsubscribe
from .task_models import Task

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todos"


def encode_tasks(tasks: Iterable[Task]) -> bytes:
    payload = [task.to_dict() for task in tasks]
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_tasks(raw: bytes) -> list[Task]:
    """Decode a persisted value. Raises on anything that is not a valid task array."""
    data = json.loads(raw.decode("utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"persisted task list must be a JSON array, got {type(data).__name__}")
    return [Task.from_dict(item) for item in data]


class TaskListPersistence:
    """Keeps a task store in sync with a key-value store under a single key."""

    def __init__(self, kv: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._kv = kv
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def hydrate(self) -> list[Task]:
        """
        Load the saved list.

        Missing or unreadable data yields an empty list. Corruption is not
        reported to the user; it is only recorded in the debug log.
        """
        raw = self._kv.read(self._key)
        if not raw:
            return []
        try:
            tasks = decode_tasks(raw)
        except (UnicodeDecodeError, ValueError, KeyError, TypeError, RecursionError):
            logger.debug("Saved task list under %r is unreadable; starting empty.", self._key, exc_info=True)
            return []
        logger.debug("Hydrated %d tasks from %r", len(tasks), self._key)
        return tasks

    def persist(self, tasks: Iterable[Task]) -> None:
        self._kv.write(self._key, encode_tasks(tasks))

    def attach(self, store: TaskRepo) -> Unsubscribe:
        """Hydrate the store once, then persist every later snapshot."""
        store.replace_all(self.hydrate())
        return store.subscribe(self.persist)
