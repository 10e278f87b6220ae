"""Synchronous event distribution for lifecycle events."""

import threading
from collections import defaultdict, deque
from typing import Callable, Deque, Dict, List, Optional, Type, TypeVar

from ..io.logger import get_logger
from .events import Event

logger = get_logger("event_bus")

T = TypeVar("T", bound=Event)

MAX_EVENT_HISTORY = 1000


class EventBus:
    """Delivers lifecycle events to handlers registered by event type.

    Dispatch walks the event's class hierarchy, so a handler subscribed to
    ``ServiceEvent`` (or ``Event``) sees every subclass. Handlers run
    inline, in subscription order, on the emitting thread. A failing
    handler is logged and skipped; it never aborts the controller
    operation that emitted the event.
    """

    def __init__(self, max_history_size: int = MAX_EVENT_HISTORY):
        self.subscribers: Dict[Type[Event], List[Callable]] = defaultdict(list)
        self.event_history: Deque[Event] = deque(maxlen=max_history_size)
        self._lock = threading.RLock()

    @property
    def max_history_size(self) -> int:
        return self.event_history.maxlen

    def emit(self, event: Event) -> None:
        """Record ``event`` and hand it to every matching handler."""
        with self._lock:
            self.event_history.append(event)
            handlers = [
                handler
                for event_type in type(event).__mro__
                for handler in self.subscribers.get(event_type, ())
            ]

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                name = getattr(handler, "__qualname__", repr(handler))
                logger.error(
                    f"Handler {name} failed on {type(event).__name__}: {e}",
                    exc_info=e,
                )

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Register ``handler`` for ``event_type`` and its subclasses."""
        with self._lock:
            self.subscribers[event_type].append(handler)

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        with self._lock:
            handlers = self.subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)

    def get_history(self, event_type: Optional[Type[T]] = None) -> List[Event]:
        """Events emitted so far, oldest first.

        Args:
            event_type: Only return events of this type (or subclasses)
        """
        with self._lock:
            if event_type is None:
                return list(self.event_history)
            return [e for e in self.event_history if isinstance(e, event_type)]

    def clear_history(self) -> None:
        with self._lock:
            self.event_history.clear()
