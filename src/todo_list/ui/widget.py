# src/todo_list/ui/widget.py

"""
Framework-free to-do widget.

Holds the UI-only state (input buffer, IME composition flag), turns UI events
into TaskStore calls, and renders a plain view model that any front end
(console, web template, tests) can display.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.ports import TaskSnapshot
from ..tasks.task_store import TaskStore


@dataclass(frozen=True, slots=True)
class Labels:
    # Opaque display strings; front ends may swap in translations.
    title: str = "TODO List"
    input_placeholder: str = "Enter a new task..."
    add: str = "Add"
    delete: str = "Delete"
    empty: str = "No tasks yet. Add a new task."
    counter: str = "{completed} / {total} done"


@dataclass(frozen=True, slots=True)
class TaskRow:
    id: int
    text: str
    checked: bool


@dataclass(frozen=True, slots=True)
class WidgetView:
    title: str
    input_value: str
    input_placeholder: str
    add_label: str
    delete_label: str
    items: tuple[TaskRow, ...]
    placeholder: str | None
    counter: str | None


class TodoWidget:
    def __init__(self, store: TaskStore, labels: Labels | None = None) -> None:
        self.store = store
        self.labels = labels or Labels()
        self.input_value = ""
        self.is_composing = False
        self.render_count = 0
        self._unsubscribe = store.subscribe(self._on_change)

    def _on_change(self, _tasks: TaskSnapshot) -> None:
        self.render_count += 1

    def close(self) -> None:
        self._unsubscribe()

    # ---- input events ----

    def change_input(self, text: str) -> None:
        self.input_value = text

    def composition_start(self) -> None:
        self.is_composing = True

    def composition_end(self) -> None:
        self.is_composing = False

    def key_down(self, key: str) -> None:
        # Enter during IME composition confirms the candidate, it must not submit.
        if key == "Enter" and not self.is_composing:
            self.submit()

    def submit(self) -> None:
        if self.store.add(self.input_value) is not None:
            self.input_value = ""

    def click_checkbox(self, task_id: int) -> None:
        self.store.toggle(task_id)

    def click_delete(self, task_id: int) -> None:
        self.store.delete(task_id)

    # ---- rendering ----

    def render(self) -> WidgetView:
        tasks = self.store.tasks
        items = tuple(TaskRow(id=t.id, text=t.text, checked=t.completed) for t in tasks)

        placeholder: str | None = None
        counter: str | None = None
        if items:
            counter = self.labels.counter.format(
                completed=self.store.completed_count(),
                total=self.store.total_count(),
            )
        else:
            placeholder = self.labels.empty

        return WidgetView(
            title=self.labels.title,
            input_value=self.input_value,
            input_placeholder=self.labels.input_placeholder,
            add_label=self.labels.add,
            delete_label=self.labels.delete,
            items=items,
            placeholder=placeholder,
            counter=counter,
        )
