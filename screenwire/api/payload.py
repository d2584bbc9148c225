"""Public payload contract and presentation formatting helpers."""

from __future__ import annotations

import dataclasses
from datetime import date, datetime
from typing import Protocol


class Payload(Protocol):
    """Opaque immutable display payload boundary contract."""


def ensure_payload(value: object) -> Payload:
    """Return value unchanged when it is a frozen dataclass instance.

    Anything else is a programming error: payloads must compare by value and
    must not change after a handler pushes them.
    """
    if isinstance(value, type) or not dataclasses.is_dataclass(value):
        raise TypeError(f"payload must be a frozen dataclass instance, got {type(value).__qualname__}")
    params = getattr(value, "__dataclass_params__", None)
    if params is None or not params.frozen:
        raise TypeError(f"payload dataclass is not frozen: {type(value).__qualname__}")
    return value


def format_number(value: float, *, decimals: int = 0, grouping: bool = True) -> str:
    """Format a number for display with fixed decimals and optional grouping."""
    places = max(0, int(decimals))
    if grouping:
        return f"{value:,.{places}f}"
    return f"{value:.{places}f}"


def format_percent(ratio: float, *, decimals: int = 0) -> str:
    """Format a 0..1 ratio as a percentage label."""
    return f"{format_number(ratio * 100.0, decimals=decimals, grouping=False)}%"


def format_date(value: date, *, pattern: str = "%d %b %Y") -> str:
    """Format a date or datetime with a strftime pattern."""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(pattern)


def format_duration(seconds: float) -> str:
    """Format elapsed seconds as H:MM:SS (or M:SS under one hour)."""
    total = max(0, int(round(seconds)))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
