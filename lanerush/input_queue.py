from __future__ import annotations

from typing import Iterable, Set


class HeldKeys:
    """Snapshot of keys currently held down, filled from key events between ticks."""

    def __init__(self) -> None:
        self._held: Set[int] = set()

    def press(self, key: int) -> None:
        self._held.add(key)

    def release(self, key: int) -> None:
        self._held.discard(key)

    def is_held(self, key: int) -> bool:
        return key in self._held

    def any_held(self, keys: Iterable[int]) -> bool:
        return any(k in self._held for k in keys)

    def consume(self, keys: Iterable[int]) -> None:
        # drop every alias so a held key fires once
        for k in keys:
            self._held.discard(k)

    def clear(self) -> None:
        self._held.clear()

    def __len__(self) -> int:
        return len(self._held)


__all__ = ["HeldKeys"]
