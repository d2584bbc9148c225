"""Named composition plan materialized into dependency-ordered assemblers."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from typing import final

from screenwire.api.assembly import Builder
from screenwire.runtime.assembler import Assembler
from screenwire.runtime.errors import AssemblyError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AssemblyNode:
    """One builder declaration: factory plus keyword -> node name wiring."""

    name: str
    factory: Callable[..., object]
    wiring: tuple[tuple[str, str], ...] = ()

    @property
    def depends_on(self) -> tuple[str, ...]:
        return tuple(target for _, target in self.wiring)


@final
class CompositionPlan:
    """Declare builders by name, validate the graph, then assemble it.

    Nodes reference each other only by name, so the plan can reject unknown
    dependencies and cycles before any builder exists.
    """

    def __init__(self) -> None:
        self._nodes: dict[str, AssemblyNode] = {}
        self._provided: dict[str, object] = {}
        self._cached_order: tuple[str, ...] | None = None

    def provide(self, name: str, value: object) -> None:
        """Register an already-built value shared by every node wired to it."""
        key = self._claim(name)
        self._provided[key] = value
        self._cached_order = None

    def add(self, name: str, factory: Callable[..., object], **wiring: str) -> None:
        """Register one node; each keyword names the node or value feeding it."""
        key = self._claim(name)
        self._nodes[key] = AssemblyNode(
            name=key,
            factory=factory,
            wiring=tuple((keyword, target.strip()) for keyword, target in wiring.items()),
        )
        self._cached_order = None

    def execution_order(self) -> tuple[str, ...]:
        """Compute dependency-first node order and validate the graph."""
        if self._cached_order is not None:
            return self._cached_order

        indegree: dict[str, int] = {name: 0 for name in self._nodes}
        outgoing: dict[str, list[str]] = {name: [] for name in self._nodes}

        for name, node in self._nodes.items():
            for dependency in node.depends_on:
                if dependency in self._provided:
                    continue
                if dependency not in self._nodes:
                    raise AssemblyError(f"unknown dependency '{dependency}' for node '{name}'")
                indegree[name] += 1
                outgoing[dependency].append(name)

        queue = deque(sorted(name for name, degree in indegree.items() if degree == 0))
        ordered: list[str] = []

        while queue:
            current = queue.popleft()
            ordered.append(current)
            for target in outgoing[current]:
                indegree[target] -= 1
                if indegree[target] == 0:
                    queue.append(target)

        if len(ordered) != len(self._nodes):
            blocked = sorted(name for name, degree in indegree.items() if degree > 0)
            raise AssemblyError(f"dependency cycle detected among: {', '.join(blocked)}")

        self._cached_order = tuple(ordered)
        return self._cached_order

    def assemble(self) -> dict[str, Builder[object]]:
        """Create one assembler per node, sub-builders first."""
        builders: dict[str, Builder[object]] = {}
        for name in self.execution_order():
            node = self._nodes[name]
            dependencies = {kw: builders[target] for kw, target in node.wiring if target in builders}
            provided = {kw: self._provided[target] for kw, target in node.wiring if target in self._provided}
            builders[name] = Assembler(node.factory, dependencies=dependencies, provided=provided, name=name)
        logger.debug("composition_plan_assembled nodes=%d provided=%d", len(builders), len(self._provided))
        return builders

    def _claim(self, name: str) -> str:
        key = name.strip()
        if not key:
            raise AssemblyError("node name must not be empty")
        if key in self._nodes or key in self._provided:
            raise AssemblyError(f"duplicate node name: {key}")
        return key
