"""Router delegating presentation requests to builders and a presenter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import final

from screenwire.api.assembly import Builder
from screenwire.api.presentation import Presenter
from screenwire.runtime.binding import SlotState, WeakSlot
from screenwire.runtime.errors import AssemblyError

logger = logging.getLogger(__name__)


@final
class Router:
    """Materialize screens through builders and hand them to the presenter.

    Owns its route builders; holds the presenter weakly.
    """

    def __init__(self, *, routes: Mapping[str, Builder[object]] | None = None) -> None:
        self._routes: dict[str, Builder[object]] = {}
        self._presenter: WeakSlot[Presenter] = WeakSlot("presenter", owner="Router")
        for route, builder in (routes or {}).items():
            self.add_route(route, builder)

    @property
    def binding_state(self) -> SlotState:
        return self._presenter.state

    def routes(self) -> tuple[str, ...]:
        """Return registered route names in registration order."""
        return tuple(self._routes)

    def add_route(self, route: str, builder: Builder[object]) -> None:
        """Register the builder materializing one named screen."""
        key = route.strip()
        if not key:
            raise AssemblyError("route name must not be empty")
        if key in self._routes:
            raise AssemblyError(f"duplicate route: {key}")
        self._routes[key] = builder

    def bind(self, presenter: Presenter) -> None:
        """Use presenter for subsequent present() calls."""
        self._presenter.bind(presenter)

    def present(self, target: Builder[object] | str, **arguments: object) -> None:
        """Build target and show it through the bound presenter."""
        presenter, builder = self.resolve_target(target)
        self.deliver(presenter, builder, **arguments)

    def resolve_target(self, target: Builder[object] | str) -> tuple[Presenter | None, Builder[object]]:
        """Check the presenter binding and look up target without building anything.

        Raises BindingError when no presenter was ever bound and AssemblyError
        for an unknown route. A collected presenter comes back as None.
        """
        presenter = self._presenter.resolve()
        return presenter, self._lookup(target)

    def deliver(self, presenter: Presenter | None, builder: Builder[object], **arguments: object) -> None:
        """Build and present a target returned by resolve_target()."""
        if presenter is None:
            return
        screen = builder.build(**arguments)
        logger.debug(
            "router_present builder=%r screen=%s",
            builder,
            type(screen).__qualname__,
            extra={"component": type(screen).__qualname__},
        )
        presenter.present(screen)

    def _lookup(self, target: Builder[object] | str) -> Builder[object]:
        if not isinstance(target, str):
            return target
        builder = self._routes.get(target.strip())
        if builder is None:
            raise AssemblyError(f"unknown route: {target}")
        return builder
