"""Reaction handler: events in, payload pushes and navigation requests out."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, final

from screenwire.api.assembly import Builder
from screenwire.api.display import DisplayContract
from screenwire.api.payload import Payload, ensure_payload
from screenwire.api.presentation import Presenter
from screenwire.runtime.binding import SlotState, WeakSlot

if TYPE_CHECKING:
    from screenwire.runtime.router import Router

logger = logging.getLogger(__name__)

type NavigationTarget = Builder[object] | str


@dataclass(frozen=True, slots=True)
class ReactionContext[TState, TServices]:
    """Inputs a reaction may depend on."""

    event: object
    state: TState
    services: TServices


@dataclass(frozen=True, slots=True)
class Reaction[TState]:
    """Outcome of one handled event.

    `state` replaces the handler state when not None; None always means
    "keep the current state", so a reaction cannot set the state to None.
    Handlers whose state may legitimately be empty should model that inside
    their state type (for example a frozen dataclass with an optional field).
    """

    payload: Payload | None = None
    navigate_to: NavigationTarget | None = None
    state: TState | None = None


type ReactionGuard[TState, TServices] = Callable[[ReactionContext[TState, TServices]], bool]
type ReactFn[TState, TServices] = Callable[[ReactionContext[TState, TServices]], Reaction[TState]]


@dataclass(frozen=True, slots=True)
class ReactionRule[TState, TServices]:
    """Table entry mapping an event type to a reaction."""

    event_type: type[object]
    react: ReactFn[TState, TServices]
    guard: ReactionGuard[TState, TServices] | None = None


@final
class ReactionHandler[TState, TServices]:
    """Deterministic reaction-table executor with weak display/router bindings.

    The handler owns its state and the services it was constructed with. The
    display surface and router are bound after construction and never kept
    alive by the handler.
    """

    def __init__(
        self,
        *,
        state: TState,
        rules: Sequence[ReactionRule[TState, TServices]],
        services: TServices,
        name: str = "ReactionHandler",
    ) -> None:
        self._state = state
        self._rules = tuple(rules)
        self._services = services
        self._name = name
        self._display: WeakSlot[DisplayContract] = WeakSlot("display", owner=name)
        self._router: WeakSlot[Router] = WeakSlot("router", owner=name)

    @property
    def state(self) -> TState:
        return self._state

    @property
    def binding_state(self) -> SlotState:
        return self._display.state

    def bind(self, target: DisplayContract) -> None:
        """Route subsequent payload pushes to target."""
        self._display.bind(target)

    def bind_router(self, router: Router | weakref.ReferenceType[Router]) -> None:
        """Route subsequent navigation requests to router.

        A weak reference is adopted directly; once its router is collected,
        navigation becomes a logged no-op.
        """
        self._router.bind(router)

    def handle(self, event: object) -> bool:
        """Apply the first matching rule. Returns whether any rule matched."""
        context = ReactionContext(event=event, state=self._state, services=self._services)
        for rule in self._rules:
            if not isinstance(event, rule.event_type):
                continue
            if rule.guard is not None and not rule.guard(context):
                continue
            self._apply(rule.react(context))
            return True
        logger.debug("reaction_unmatched handler=%s event=%s", self._name, type(event).__qualname__)
        return False

    def _apply(self, reaction: Reaction[TState]) -> None:
        # Resolve every required binding and route before mutating state.
        display: DisplayContract | None = None
        router: Router | None = None
        presenter: Presenter | None = None
        destination: Builder[object] | None = None
        payload = None if reaction.payload is None else ensure_payload(reaction.payload)
        if payload is not None:
            display = self._display.resolve()
        if reaction.navigate_to is not None:
            router = self._router.resolve()
            if router is not None:
                presenter, destination = router.resolve_target(reaction.navigate_to)
        if reaction.state is not None:
            self._state = reaction.state
        if display is not None:
            display.show(payload)
        if router is not None and destination is not None:
            router.deliver(presenter, destination)
