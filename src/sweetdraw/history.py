"""Bounded FIFO of recently selected candidates."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable


class SelectionHistory:
    """Keeps the last ``capacity`` selections, oldest first.

    A capacity of 0 disables tracking: :meth:`record` becomes a no-op.
    """

    def __init__(self, capacity: int = 0):
        self.capacity = max(0, capacity)
        self._items: deque[Any] = deque(maxlen=self.capacity or None)

    @property
    def enabled(self) -> bool:
        return self.capacity > 0

    def record(self, items: Iterable[Any]) -> None:
        if not self.enabled:
            return
        self._items.extend(items)

    def snapshot(self, of_type: type | None = None) -> list[Any]:
        if of_type is None:
            return list(self._items)
        return [item for item in self._items if isinstance(item, of_type)]

    def last(self, n: int) -> list[Any]:
        """The *n* most recent selections, oldest first."""
        if n <= 0:
            return []
        return list(self._items)[-n:]

    def __contains__(self, item: Any) -> bool:
        # entries are references: an equal but distinct object was not selected
        return any(entry is item for entry in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        self._items.clear()
