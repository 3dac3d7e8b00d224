"""Signal bus carrying render effects from the core to the UI layer.

Publishing only queues a signal; handlers run when the bus is flushed, which
the engine does once per tick after the animation system has run.
"""
from __future__ import annotations

import threading
from typing import Any, Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from madcircle.types import TickContext

MARKER_MOVED = "marker_moved"
ARROW_ADDED = "arrow_added"
ARROWS_CLEARED = "arrows_cleared"
SEGMENT_STARTED = "segment_started"
SEGMENT_COMPLETED = "segment_completed"

SIGNALS = frozenset(
    {MARKER_MOVED, ARROW_ADDED, ARROWS_CLEARED, SEGMENT_STARTED, SEGMENT_COMPLETED}
)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queue-then-flush pub/sub. Publishing is safe from any thread; flush runs on the engine thread."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        if signal_name not in SIGNALS:
            raise ValueError(f"Unknown signal {signal_name!r}")
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        with self._lock:
            self._queue.append((signal_name, data))

    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    def flush(self) -> None:
        with self._lock:
            snapshot = self._queue
            self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)


def make_signal_system(bus: SignalBus) -> Callable[[TickContext], None]:
    def signal_system(ctx: TickContext) -> None:
        bus.flush()

    return signal_system
