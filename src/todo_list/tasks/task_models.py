# src/todo_list/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Records are immutable: toggling produces a new Task via toggled().
    """

    id: int
    text: str
    completed: bool = False

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> Task:
        """
        Build a Task from a persisted record.

        Raises TypeError/KeyError/ValueError on malformed records; callers that
        must not fail (hydration) catch these.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw["id"]
        text = raw["text"]
        completed = raw.get("completed", False)

        # bool is an int subclass; an id of true/false is not a valid id.
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"task id must be an integer, got {task_id!r}")
        if not isinstance(text, str):
            raise ValueError(f"task text must be a string, got {text!r}")
        if not isinstance(completed, bool):
            raise ValueError(f"task completed must be a boolean, got {completed!r}")

        return cls(id=task_id, text=text, completed=completed)
