"""Non-owning, thread-confined binding slots."""

from __future__ import annotations

import logging
import threading
import weakref
from typing import Literal, final

from screenwire.runtime.errors import BindingError, fail_unbound

logger = logging.getLogger(__name__)

type SlotState = Literal["unbound", "bound", "stale"]


@final
class WeakSlot[T]:
    """Single-writer slot holding a weak reference to a collaborator.

    The slot never keeps its referent alive. Once the referent is collected
    the slot reports `stale` and `resolve()` returns None, so callers can turn
    the call into a no-op. Reads must happen on the thread that last bound.
    """

    def __init__(self, name: str, *, owner: str) -> None:
        self._name = name
        self._owner = owner
        self._ref: weakref.ReferenceType[T] | None = None
        self._thread_id: int | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> SlotState:
        if self._ref is None:
            return "unbound"
        if self._ref() is None:
            return "stale"
        return "bound"

    def bind(self, target: T | weakref.ReferenceType[T]) -> None:
        """Replace the referent; later resolves only see the new target.

        An existing weak reference is adopted as is, so a referent that is
        already gone leaves the slot stale rather than unbound.
        """
        if isinstance(target, weakref.ReferenceType):
            ref = target
        else:
            try:
                ref = weakref.ref(target)
            except TypeError as exc:
                raise TypeError(
                    f"{self._owner}.{self._name}: {type(target).__qualname__} does not support weak references"
                ) from exc
        self._ref = ref
        self._thread_id = threading.get_ident()

    def resolve(self) -> T | None:
        """Return the live referent, or None when it has been collected.

        Raises BindingError when bind() was never called or when read from a
        thread other than the binding one.
        """
        if self._ref is None:
            fail_unbound(logger, slot=self._name, owner=self._owner)
        current = threading.get_ident()
        if current != self._thread_id:
            raise BindingError(
                f"{self._owner}.{self._name} bound on thread {self._thread_id}, read on thread {current}"
            )
        target = self._ref()
        if target is None:
            logger.warning(
                "binding_stale owner=%s slot=%s",
                self._owner,
                self._name,
                extra={"binding_owner": self._owner, "binding_slot": self._name},
            )
        return target
