# src/todo_list/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.state import AppState
from ..ui.widget import WidgetView

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return (
                f"Unknown command: /{name}. Use /help to list available commands, "
                "or /add <text> for a task that starts with \"/\"."
            )

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def render_view(view: WidgetView) -> str:
    """Plain-text rendering of the widget: numbered rows, then the counter or placeholder."""
    lines: list[str] = []
    for i, row in enumerate(view.items, start=1):
        mark = "x" if row.checked else " "
        lines.append(f"{i}. [{mark}] {row.text}")
    if view.placeholder is not None:
        lines.append(view.placeholder)
    if view.counter is not None:
        lines.append(view.counter)
    return "\n".join(lines)


def _resolve_position(state: AppState, args: list[str]) -> int | None:
    """Map a 1-based list position to a task id."""
    if len(args) != 1:
        return None
    try:
        pos = int(args[0])
    except ValueError:
        return None
    tasks = state.task_store.tasks
    if not 1 <= pos <= len(tasks):
        return None
    return tasks[pos - 1].id


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    return render_view(state.widget.render())


def cmd_add(state: AppState, args: list[str]) -> str:
    # Same path as typing into the input and pressing the add button.
    state.widget.change_input(" ".join(args))
    state.widget.submit()
    return render_view(state.widget.render())


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _resolve_position(state, args)
    if task_id is None:
        return "Usage: /toggle <n> (n is the number shown by /list)."
    state.widget.click_checkbox(task_id)
    return render_view(state.widget.render())


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _resolve_position(state, args)
    if task_id is None:
        return "Usage: /delete <n> (n is the number shown by /list)."
    state.widget.click_delete(task_id)
    return render_view(state.widget.render())


def cmd_count(state: AppState, args: list[str]) -> str:
    store = state.task_store
    return f"{store.completed_count()} / {store.total_count()}"


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    backend = getattr(settings, "storage_backend", "?")
    location = getattr(settings, "storage_path", None) if backend == "sqlite" else "process memory"
    return (
        "Status:\n"
        f"  Storage: {backend} ({location})\n"
        f"  Key: {state.persistence.key}\n"
        f"  Tasks: {state.task_store.total_count()}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the task list.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "toggle", cmd_toggle, help_text="Mark a task done/undone: /toggle <n>.", aliases=["done", "t"]
)
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <n>.", aliases=["del", "rm"])
registry.register("count", cmd_count, help_text="Show completed / total.")
registry.register("status", cmd_status, help_text="Show storage settings.")
