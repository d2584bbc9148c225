"""Composition-graph builder: one concrete type per builder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from contextvars import ContextVar
from typing import final

from screenwire.api.assembly import Builder
from screenwire.runtime.config import trace_assembly_enabled
from screenwire.runtime.errors import AssemblyError

logger = logging.getLogger(__name__)

# Builders on the current call path; per-context so concurrent builds stay independent.
_BUILD_PATH: ContextVar[tuple[int, ...]] = ContextVar("screenwire_build_path", default=())


@final
class Assembler[T]:
    """Build one component after asking sub-builders for its dependencies.

    `factory` is the only constructor this builder ever calls. Each entry in
    `dependencies` maps a factory keyword to the builder responsible for that
    type; `provided` maps keywords to already-built values that are passed
    through unchanged (the explicit way to share one instance between graphs).
    Every `build()` call yields a fresh graph.
    """

    def __init__(
        self,
        factory: Callable[..., T],
        *,
        dependencies: Mapping[str, Builder[object]] | None = None,
        provided: Mapping[str, object] | None = None,
        name: str | None = None,
    ) -> None:
        self._factory = factory
        self._dependencies: dict[str, Builder[object]] = dict(dependencies or {})
        self._provided: dict[str, object] = dict(provided or {})
        self._name = name or getattr(factory, "__qualname__", None) or repr(factory)
        self._trace = trace_assembly_enabled()
        overlap = sorted(self._dependencies.keys() & self._provided.keys())
        if overlap:
            raise AssemblyError(f"{self._name}: keywords both built and provided: {', '.join(overlap)}")

    def __repr__(self) -> str:
        return f"Assembler({self._name})"

    def build(self, **arguments: object) -> T:
        """Resolve dependencies depth-first, then construct exactly one instance."""
        clashes = sorted(arguments.keys() & (self._dependencies.keys() | self._provided.keys()))
        if clashes:
            raise AssemblyError(f"{self._name}: call arguments shadow wired keywords: {', '.join(clashes)}")
        path = _BUILD_PATH.get()
        if id(self) in path:
            raise AssemblyError(f"dependency cycle detected while building {self._name}")
        token = _BUILD_PATH.set((*path, id(self)))
        try:
            resolved = {keyword: builder.build() for keyword, builder in self._dependencies.items()}
            instance = self._factory(**self._provided, **resolved, **arguments)
        finally:
            _BUILD_PATH.reset(token)
        if self._trace:
            logger.debug(
                "assembled component=%s depth=%d dependencies=%s",
                self._name,
                len(path),
                ",".join(self._dependencies) or "-",
                extra={"component": self._name, "depth": len(path)},
            )
        return instance
