# tests/test_kv_store.py

from __future__ import annotations

from pathlib import Path

from todo_list.storage.kv_store import MemoryKeyValueStore, SqliteKeyValueStore
from todo_list.tasks.persistence import TaskListPersistence
from todo_list.tasks.task_store import TaskStore


def test_sqlite_read_write_overwrite_delete(tmp_path: Path) -> None:
    kv = SqliteKeyValueStore(tmp_path / "nested" / "storage.sqlite3")

    assert kv.read("todos") is None

    kv.write("todos", b"[]")
    assert kv.read("todos") == b"[]"

    kv.write("todos", "[\"ü\"]".encode())
    assert kv.read("todos") == "[\"ü\"]".encode()
    assert kv.keys() == ["todos"]

    kv.delete("todos")
    assert kv.read("todos") is None
    assert kv.keys() == []


def test_sqlite_survives_reopen(tmp_path: Path) -> None:
    db = tmp_path / "storage.sqlite3"

    store = TaskStore()
    TaskListPersistence(SqliteKeyValueStore(db)).attach(store)
    store.add("Buy milk")
    store.add("Walk dog")
    store.toggle(store.tasks[1].id)

    reopened = TaskStore()
    TaskListPersistence(SqliteKeyValueStore(db)).attach(reopened)

    assert reopened.tasks == store.tasks


def test_memory_store_copies_and_reads() -> None:
    kv = MemoryKeyValueStore({"a": b"1"})
    buf = bytearray(b"xyz")
    kv.write("b", bytes(buf))

    assert kv.read("a") == b"1"
    assert kv.read("b") == b"xyz"
    assert kv.read("missing") is None
    assert kv.keys() == ["a", "b"]

    kv.delete("a")
    assert kv.read("a") is None
