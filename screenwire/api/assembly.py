"""Public composition-graph builder contract."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from screenwire.runtime.assembler import Assembler


@runtime_checkable
class Builder[T](Protocol):
    """Factory producing one freshly wired instance per call.

    `build` is the only public operation of a builder.
    """

    def build(self, **arguments: object) -> T:
        """Build a new instance with all of its dependencies."""


def create_assembler[T](
    factory: Callable[..., T],
    *,
    dependencies: Mapping[str, Builder[object]] | None = None,
    provided: Mapping[str, object] | None = None,
) -> "Assembler[T]":
    """Create default builder implementation."""
    from screenwire.runtime.assembler import Assembler

    return Assembler(factory, dependencies=dependencies, provided=provided)
