"""Screenwire runtime implementations."""

from screenwire.runtime.assembler import Assembler
from screenwire.runtime.binding import SlotState, WeakSlot
from screenwire.runtime.config import ScreenwireConfig, load_config
from screenwire.runtime.errors import AssemblyError, BindingError, ScreenwireError
from screenwire.runtime.handler import Reaction, ReactionContext, ReactionHandler, ReactionRule
from screenwire.runtime.logging import LoggingConfig, configure_logging, setup_logging
from screenwire.runtime.plan import AssemblyNode, CompositionPlan
from screenwire.runtime.router import Router

__all__ = [
    "Assembler",
    "AssemblyError",
    "AssemblyNode",
    "BindingError",
    "CompositionPlan",
    "LoggingConfig",
    "Reaction",
    "ReactionContext",
    "ReactionHandler",
    "ReactionRule",
    "Router",
    "ScreenwireConfig",
    "ScreenwireError",
    "SlotState",
    "WeakSlot",
    "configure_logging",
    "load_config",
    "setup_logging",
]
