# src/todo_list/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the key-value backend, task store, persistence and widget into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import KeyValueStore
from ..core.state import AppState
from ..storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from ..tasks.persistence import TaskListPersistence
from ..tasks.task_store import TaskStore
from ..ui.widget import TodoWidget

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_backend == "sqlite":
        settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_kv_store(settings) -> KeyValueStore:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage; tasks will not survive a restart.")
        return MemoryKeyValueStore()
    return SqliteKeyValueStore(settings.storage_path)


def create_initial_state(*, settings=None, kv: KeyValueStore | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings (and the key-value store) injectable makes the app easier to
    test and avoids hidden global storage. If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if kv is None:
        kv = create_kv_store(settings)

    task_store = TaskStore()
    persistence = TaskListPersistence(kv, key=settings.storage_key)
    detach = persistence.attach(task_store)
    logger.info("Loaded %d tasks from key=%s", task_store.total_count(), persistence.key)

    return AppState(
        settings=settings,
        kv=kv,
        task_store=task_store,
        persistence=persistence,
        widget=TodoWidget(task_store),
        detach_persistence=detach,
    )
