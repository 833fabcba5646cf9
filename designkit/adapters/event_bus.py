"""
In-process publish/subscribe channel for state change notifications.

Sequence numbers come from an injected counter so tests can pin them.
A failing handler is logged and skipped; the rest still get the event.
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable, Iterator

from designkit.core.ports.events import EventHandler

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self, sequence: Iterator[int] | None = None) -> None:
        self._sequence = sequence if sequence is not None else itertools.count(1)
        self._handlers: list[EventHandler] = []
        self._lock = threading.Lock()
        self.last_sequence = 0

    def subscribe(self, handler: EventHandler) -> Callable[[], None]:
        with self._lock:
            self._handlers.append(handler)

        def unsubscribe() -> None:
            with self._lock:
                if handler in self._handlers:
                    self._handlers.remove(handler)

        return unsubscribe

    def emit(self, event: str) -> int:
        with self._lock:
            seq = next(self._sequence)
            self.last_sequence = seq
            handlers = list(self._handlers)

        for handler in handlers:
            try:
                handler(event, seq)
            except Exception:
                logger.exception("Event handler failed for %s #%d", event, seq)
        return seq

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._handlers)
