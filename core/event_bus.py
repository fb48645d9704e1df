"""Simple in-process event bus for decoupled event emission."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable

from thoughts.types.results import SubmitResult

THOUGHT_ACCEPTED = "thought.accepted"
THOUGHT_REJECTED = "thought.rejected"

EventHandler = Callable[[SubmitResult], None]


class EventBus:
    """Dispatches submission outcomes to subscribers by event name."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_name: str, handler: EventHandler) -> None:
        """Register a callback for an event."""
        self._handlers[event_name].append(handler)

    def emit(self, event_name: str, result: SubmitResult) -> None:
        """Emit an event to all subscribers."""
        for handler in self._handlers.get(event_name, []):
            handler(result)

    def publish(self, result: SubmitResult) -> None:
        """Emit the event matching a submission outcome."""
        self.emit(THOUGHT_ACCEPTED if result.ok else THOUGHT_REJECTED, result)
