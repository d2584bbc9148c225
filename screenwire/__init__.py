"""Composition-graph builders, reaction handlers and routing for screen-based apps."""

from screenwire.api.assembly import Builder
from screenwire.api.display import DisplayContract
from screenwire.api.events import EventSink
from screenwire.api.payload import ensure_payload
from screenwire.api.presentation import Presenter
from screenwire.runtime.assembler import Assembler
from screenwire.runtime.binding import WeakSlot
from screenwire.runtime.errors import AssemblyError, BindingError, ScreenwireError
from screenwire.runtime.handler import Reaction, ReactionContext, ReactionHandler, ReactionRule
from screenwire.runtime.plan import CompositionPlan
from screenwire.runtime.router import Router

__all__ = [
    "Assembler",
    "AssemblyError",
    "BindingError",
    "Builder",
    "CompositionPlan",
    "DisplayContract",
    "EventSink",
    "Presenter",
    "Reaction",
    "ReactionContext",
    "ReactionHandler",
    "ReactionRule",
    "Router",
    "ScreenwireError",
    "WeakSlot",
    "ensure_payload",
]
