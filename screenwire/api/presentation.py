"""Public presentation capability contracts."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from screenwire.api.assembly import Builder

if TYPE_CHECKING:
    from screenwire.runtime.router import Router


@runtime_checkable
class Presenter(Protocol):
    """Platform mechanism that shows a built screen."""

    def present(self, screen: object) -> None:
        """Show one screen instance."""


def create_router(routes: Mapping[str, Builder[object]] | None = None) -> "Router":
    """Create default router implementation."""
    from screenwire.runtime.router import Router

    return Router(routes=routes)
