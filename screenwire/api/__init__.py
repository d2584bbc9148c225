"""Public screenwire capability contracts."""

from screenwire.api.assembly import Builder, create_assembler
from screenwire.api.display import DisplayContract
from screenwire.api.events import EventSink
from screenwire.api.payload import (
    Payload,
    ensure_payload,
    format_date,
    format_duration,
    format_number,
    format_percent,
)
from screenwire.api.presentation import Presenter, create_router

__all__ = [
    "Builder",
    "DisplayContract",
    "EventSink",
    "Payload",
    "Presenter",
    "create_assembler",
    "create_router",
    "ensure_payload",
    "format_date",
    "format_duration",
    "format_number",
    "format_percent",
]
