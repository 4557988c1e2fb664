"""Queue of named game events raised by menus and handled by the game."""

from collections import deque


class GameEventQueue:
    """First-in, first-out queue of event names."""

    def __init__(self) -> None:
        self._events: deque = deque()

    def push(self, name: str) -> None:
        self._events.append(name)

    def pop(self) -> str:
        """Remove and return the oldest event."""
        if not self._events:
            raise IndexError("event queue is empty")
        return self._events.popleft()

    def peek(self) -> str:
        """Return the oldest event without removing it."""
        if not self._events:
            raise IndexError("event queue is empty")
        return self._events[0]

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)


_queue = GameEventQueue()


def event_queue() -> GameEventQueue:
    """Return the shared event queue."""
    return _queue