# tests/fakes.py

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class FakeKeyValueStore:
    """
    In-memory KeyValueStore that records every call.

    - `data` can be preloaded to simulate saved state
    - `writes` / `reads` capture calls for assertions
    """

    data: dict[str, bytes] = field(default_factory=dict)
    writes: list[tuple[str, bytes]] = field(default_factory=list)
    reads: list[str] = field(default_factory=list)

    def read(self, key: str) -> bytes | None:
        self.reads.append(key)
        return self.data.get(key)

    def write(self, key: str, value: bytes) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class FakeClock:
    """Deterministic clock (seconds); advances by `step` on every call."""

    def __init__(self, start: float = 1_700_000_000.0, step: float = 0.0) -> None:
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value
