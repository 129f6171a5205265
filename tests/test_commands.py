# tests/test_commands.py

from __future__ import annotations

from todo_list.cli.commands import CommandRegistry, registry
from todo_list.tasks.persistence import decode_tasks

from .fakes import FakeKeyValueStore


def test_command_registry_routes_and_aliases(state) -> None:
    reg = CommandRegistry()
    called = {"a": 0}

    def handler(state, args):
        called["a"] += 1
        return "a:" + ",".join(args)

    reg.register("alpha", handler, "alpha", aliases=["A"])

    assert reg.handle(state, "/alpha x y") == "a:x,y"
    assert reg.handle(state, "/a") == "a:"
    assert called["a"] == 2
    assert "/alpha - alpha" in reg.build_help()


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_list_add_toggle_delete_flow(state, kv: FakeKeyValueStore) -> None:
    assert registry.handle(state, "/list") == "No tasks yet. Add a new task."

    out = registry.handle(state, "/add Buy  milk")
    assert out == "1. [ ] Buy milk\n0 / 1 done"

    registry.handle(state, "/add Walk dog")
    out = registry.handle(state, "/done 2")
    assert out == "1. [ ] Buy milk\n2. [x] Walk dog\n1 / 2 done"
    assert registry.handle(state, "/count") == "1 / 2"

    out = registry.handle(state, "/rm 1")
    assert out == "1. [x] Walk dog\n1 / 1 done"

    saved = decode_tasks(kv.data["todos"])
    assert [(t.text, t.completed) for t in saved] == [("Walk dog", True)]


def test_bad_positions_do_not_touch_store(state, kv: FakeKeyValueStore) -> None:
    registry.handle(state, "/add only")
    writes = len(kv.writes)

    for line in ("/toggle", "/toggle 0", "/toggle 2", "/toggle x", "/delete 5", "/delete 1 2"):
        assert "Usage" in (registry.handle(state, line) or "")

    assert len(kv.writes) == writes
    assert state.task_store.total_count() == 1


def test_blank_add_is_noop(state, kv: FakeKeyValueStore) -> None:
    assert registry.handle(state, "/add") == "No tasks yet. Add a new task."
    assert kv.writes == []


def test_help_and_status(state) -> None:
    help_text = registry.handle(state, "/help") or ""
    assert "/toggle" in help_text
    assert "/delete" in help_text

    status = registry.handle(state, "/status") or ""
    assert "sqlite" in status
    assert "Key: todos" in status


def test_unknown_command_points_to_add(state) -> None:
    reply = registry.handle(state, "/etc cleanup") or ""
    assert "Unknown command: /etc" in reply
    assert "/add" in reply

    registry.handle(state, "/add /etc cleanup")
    assert [t.text for t in state.task_store.tasks] == ["/etc cleanup"]
