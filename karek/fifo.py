"""First-in, first-out queue of values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class Fifo:
    """A queue that hands values back in the order they were added."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the oldest value without removing it."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


def main(argv: list[str] | None = None) -> int:
    """Show the queue at work on a few values."""
    del argv
    queue = Fifo()
    for value in (10, 20, 30):
        queue.enqueue(value)
    print(f"Frente: {queue.front()}")
    print(f"Desenfileirando: {queue.dequeue()}")
    print(f"Desenfileirando: {queue.dequeue()}")
    print(f"Frente: {queue.front()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())