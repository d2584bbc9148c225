"""Public event-source boundary contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class EventSink(Protocol):
    """Entry point an external event source delivers opaque events to."""

    def handle(self, event: object) -> bool:
        """Consume one event; return whether it produced a reaction."""
