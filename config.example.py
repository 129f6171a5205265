# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name (default: todo-list).",
    "TODO_LOG_LEVEL": "Console logging level (default: INFO).",
    "TODO_LOG_TO_FILE": "Write full debug log to <data_dir>/todo.log (true/false, default: true).",
    # Storage
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_STORAGE_BACKEND": "Key-value backend: sqlite | memory (default: sqlite).",
    "TODO_STORAGE_PATH": "SQLite file for the sqlite backend (default: <data_dir>/storage.sqlite3).",
    "TODO_STORAGE_KEY": "Key the task list is saved under (default: todos).",
}
