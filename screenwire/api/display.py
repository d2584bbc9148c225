"""Public display capability contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from screenwire.api.payload import Payload


@runtime_checkable
class DisplayContract(Protocol):
    """Surface that renders payloads.

    Equal payloads must produce the same rendered state regardless of call
    order or frequency. The contract has no failure path.
    """

    def show(self, payload: Payload) -> None:
        """Render one payload."""
