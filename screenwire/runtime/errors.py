"""Screenwire exception taxonomy and failure reporting helpers."""

from __future__ import annotations

import logging
from typing import NoReturn


class ScreenwireError(RuntimeError):
    """Base class for errors raised by screenwire itself."""


class AssemblyError(ScreenwireError):
    """Missing or malformed dependency discovered while wiring a graph."""


class BindingError(ScreenwireError):
    """Operation invoked before the binding it requires was established."""


def fail_unbound(logger: logging.Logger, *, slot: str, owner: str) -> NoReturn:
    """Report a binding-precondition violation and raise it at the call site."""
    logger.critical(
        "binding_missing owner=%s slot=%s",
        owner,
        slot,
        extra={"binding_owner": owner, "binding_slot": slot},
    )
    raise BindingError(f"{owner}: '{slot}' used before bind()")
