"""Immutable dependency view over the nodes of an expression graph."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")


def _walk(start: Iterable[T], step: dict[T, tuple[T, ...]]) -> tuple[T, ...]:
    visited: dict[T, None] = {}
    stack = list(start)
    while stack:
        current = stack.pop()
        if current not in visited:
            visited[current] = None
            stack.extend(step.get(current, ()))
    return tuple(visited)


@dataclass(frozen=True, slots=True)
class DependencyGraph(Generic[T]):
    """A snapshot of "operand of" relationships between nodes.

    The graph is generic over the node key (node ids in practice). Edges are
    stored in insertion order with duplicates removed, so `sum(x, x)` yields
    a single edge from `x`.

    - operands[b] = (a,) means "b takes a as an operand"
    - dependents[a] = (b,) means "a is used by b"

    Attributes:
        _operands: Mapping from node to its direct operands.
        _dependents: Mapping from node to the nodes using it directly.

    """

    _operands: dict[T, tuple[T, ...]] = field(default_factory=dict)
    _dependents: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[T, T]], nodes: Iterable[T] = ()) -> DependencyGraph[T]:
        """Build a graph from (operand, dependent) edges.

        Args:
            edges: Pairs (a, b) meaning "b takes a as an operand".
            nodes: Extra nodes to include even if they have no edges
                (a lone input, for instance).

        Returns:
            A new DependencyGraph instance.

        Example:
            >>> graph = DependencyGraph.from_edges([(0, 2), (1, 2)])
            >>> graph.operands(2)
            (0, 1)

        """
        operands: dict[T, dict[T, None]] = {node: {} for node in nodes}
        dependents: dict[T, dict[T, None]] = {node: {} for node in operands}

        for src, dst in edges:
            for node in (src, dst):
                operands.setdefault(node, {})
                dependents.setdefault(node, {})
            operands[dst][src] = None
            dependents[src][dst] = None

        return cls(
            _operands={k: tuple(v) for k, v in operands.items()},
            _dependents={k: tuple(v) for k, v in dependents.items()},
        )

    @property
    def nodes(self) -> frozenset[T]:
        """All nodes in the graph."""
        return frozenset(self._operands)

    def operands(self, node: T) -> tuple[T, ...]:
        """Get the direct operands of a node."""
        return self._operands.get(node, ())

    def dependents(self, node: T) -> tuple[T, ...]:
        """Get the nodes that use this node directly."""
        return self._dependents.get(node, ())

    def leaves(self) -> frozenset[T]:
        """Get nodes without operands (inputs and constants)."""
        return frozenset(n for n in self._operands if not self._operands[n])

    def roots(self) -> frozenset[T]:
        """Get nodes nothing else uses (top-level expressions)."""
        return frozenset(n for n in self._dependents if not self._dependents[n])

    def ancestors(self, node: T) -> frozenset[T]:
        """Get every node this node transitively depends on.

        Args:
            node: The node to query.

        Returns:
            Set of all transitive operands, excluding the node itself unless
            it lies on a cycle.

        """
        return frozenset(_walk(self.operands(node), self._operands))

    def descendants(self, node: T) -> frozenset[T]:
        """Get every node that transitively depends on this node.

        Args:
            node: The node to query.

        Returns:
            Set of all transitive dependents, excluding the node itself
            unless it lies on a cycle.

        """
        return frozenset(_walk(self.dependents(node), self._dependents))

    def topological_order(self) -> list[T]:
        """Return nodes with every operand before the nodes using it.

        A node is emitted once all of its operands have been. Nodes that become
        ready together keep insertion order, so leaves come first in the order
        they were added.

        Raises:
            ValueError: If the graph contains a cycle.

        Example:
            >>> # 0 and 1 are inputs, 2 = sum(0, 1), 3 = sin(2)
            >>> DependencyGraph.from_edges([(0, 2), (1, 2), (2, 3)]).topological_order()
            [0, 1, 2, 3]

        """
        pending = {node: len(operands) for node, operands in self._operands.items()}
        ready = deque(node for node, count in pending.items() if count == 0)
        order: list[T] = []

        while ready:
            node = ready.popleft()
            order.append(node)
            for user in self.dependents(node):
                pending[user] -= 1
                if pending[user] == 0:
                    ready.append(user)

        if len(order) != len(pending):
            msg = "Cycle detected in dependency graph"
            raise ValueError(msg)

        return order

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle."""
        try:
            self.topological_order()
        except ValueError:
            return True
        return False

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._operands)

    def __contains__(self, node: T) -> bool:
        """Check if a node is in the graph."""
        return node in self._operands
