"""Screen instances handed to presenters."""

from __future__ import annotations

import weakref
from dataclasses import dataclass

from screenwire.api.display import DisplayContract
from screenwire.runtime.handler import ReactionHandler
from screenwire.runtime.router import Router


@dataclass(frozen=True, slots=True, eq=False)
class Screen:
    """One presented screen: owns its handler and its surface."""

    route: str
    handler: ReactionHandler[object, object]
    surface: DisplayContract

    def handle(self, event: object) -> bool:
        """Forward one input event to the screen's handler."""
        return self.handler.handle(event)


def open_screen(
    route: str,
    *,
    handler: ReactionHandler[object, object],
    surface: DisplayContract,
    router: weakref.ReferenceType[Router],
) -> Screen:
    """Bind a freshly built handler to its surface and the router's weak reference.

    A router collected before the screen opens leaves navigation stale, so
    later navigation requests are logged no-ops.
    """
    handler.bind(surface)
    handler.bind_router(router)
    return Screen(route=route, handler=handler, surface=surface)
