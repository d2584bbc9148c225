"""Input events delivered to HAL screen handlers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DoorTapped:
    """User tapped the pod bay doors control."""


@dataclass(frozen=True, slots=True)
class StatusRequested:
    """User asked for the pod bay readout."""


@dataclass(frozen=True, slots=True)
class BackPressed:
    """User asked to return to HAL's console."""


EVENT_NAMES: dict[str, type[object]] = {
    "tap": DoorTapped,
    "status": StatusRequested,
    "back": BackPressed,
}


def parse_event(name: str) -> object:
    """Map a command-line event name to an event instance."""
    event_type = EVENT_NAMES.get(name.strip().lower())
    if event_type is None:
        raise ValueError(f"unknown event: {name} (expected one of {', '.join(EVENT_NAMES)})")
    return event_type()
