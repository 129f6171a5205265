# src/todo_list/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..cli.commands import render_view
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState) -> None:
    widget = state.widget
    logger.info("Console connector started (tasks=%s).", state.task_store.total_count())

    _print_ts(f"[CONSOLE] {widget.labels.title}")
    _print_ts("[CONSOLE] Type a task and press Enter to add it. Use /help for commands. Use /exit to quit.\n")
    print(render_view(widget.render()))

    while True:
        try:
            line = input(f"{widget.labels.input_placeholder} ")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        stripped = line.strip()
        if not stripped:
            continue

        if stripped.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            cmd_response = command_registry.handle(state, stripped)
        except Exception:
            logger.exception("Command handler crashed.")
            cmd_response = "Internal error while handling a command."

        if cmd_response is not None:
            print(cmd_response)
            continue

        # Plain text: type it into the input and press Enter.
        # The terminal has already finished any IME composition by the time input() returns.
        try:
            widget.change_input(line)
            widget.key_down("Enter")
        except Exception:
            logger.exception("Adding a task failed.")
            _print_ts("Internal error while adding a task.")
            continue

        print(render_view(widget.render()))

    logger.info("Console connector finished.")
