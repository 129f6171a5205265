# src/todo_list/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from ..core.ports import TaskListObserver, TaskSnapshot, Unsubscribe
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task list.

    The store is the sole owner of task identity and ordering:
    - tasks are kept in insertion order, new tasks go to the end
    - every change installs a new immutable snapshot (tuple)
    - observers are notified synchronously after each new snapshot

    Invalid input is never an error: blank text and unknown ids are no-ops.
    """

    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._tasks: TaskSnapshot = tuple(tasks)
        self._clock = clock
        self._observers: list[TaskListObserver] = []

    # ---- read side ----

    @property
    def tasks(self) -> TaskSnapshot:
        return self._tasks

    def get(self, task_id: int) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def completed_count(self) -> int:
        return sum(1 for task in self._tasks if task.completed)

    def total_count(self) -> int:
        return len(self._tasks)

    # ---- observers ----

    def subscribe(self, observer: TaskListObserver) -> Unsubscribe:
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _set_tasks(self, tasks: TaskSnapshot) -> None:
        self._tasks = tasks
        for observer in list(self._observers):
            try:
                observer(tasks)
            except Exception:
                logger.exception("Task list observer %r failed", observer)

    # ---- mutations ----

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """Install a snapshot without notifying observers (used by hydration)."""
        self._tasks = tuple(tasks)

    def _next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        highest = max((task.id for task in self._tasks), default=None)
        if highest is not None and candidate <= highest:
            candidate = highest + 1
        return candidate

    def add(self, raw_text: str) -> Task | None:
        text = raw_text.strip()
        if not text:
            return None

        task = Task(id=self._next_id(), text=text)
        self._set_tasks((*self._tasks, task))
        logger.debug("Task added id=%s total=%s", task.id, len(self._tasks))
        return task

    def toggle(self, task_id: int) -> None:
        # Unknown ids still produce a new snapshot so observers (persistence) run.
        self._set_tasks(
            tuple(task.toggled() if task.id == task_id else task for task in self._tasks)
        )
        logger.debug("Task toggled id=%s", task_id)

    def delete(self, task_id: int) -> None:
        before = len(self._tasks)
        self._set_tasks(tuple(task for task in self._tasks if task.id != task_id))
        logger.debug("Task delete id=%s removed=%s", task_id, before - len(self._tasks))
