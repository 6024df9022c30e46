"""Append-only arena holding the nodes of an expression graph."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from compgraph._config import EvaluatorConfig
from compgraph._errors import InvalidOperationError
from compgraph._graph import DependencyGraph

from ._handle import Handle
from ._node_spec import InputNode

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._node_spec import Node

logger = logging.getLogger(__name__)


class Graph:
    """Store of expression nodes indexed by a stable integer id.

    Nodes are only ever appended. A node may only reference children that
    already exist in the same graph, so the builder API cannot form a cycle.
    Apart from input values, nothing stored here changes after creation.

    Attributes:
        config: Settings used when evaluating handles of this graph.

    Example:
        >>> graph = Graph()
        >>> x = graph.add_node(InputNode(name="x", value=2.0))
        >>> graph.node(x.node_id)
        InputNode(name='x', value=2.0)

    """

    __slots__ = ("_nodes", "config")

    def __init__(self, config: EvaluatorConfig | None = None) -> None:
        self.config = config if config is not None else EvaluatorConfig()
        self._nodes: list[Node] = []

    def add_node(self, node: Node) -> Handle:
        """Append a node and return a handle to it.

        Raises:
            InvalidOperationError: If the node references a child that does
                not exist yet.

        """
        for child in node.children:
            if not 0 <= child < len(self._nodes):
                msg = f"Cannot add {node.kind} node: child {child} does not exist in this graph"
                raise InvalidOperationError(msg)
        self._nodes.append(node)
        node_id = len(self._nodes) - 1
        logger.debug("Allocated %s node %d", node.kind, node_id)
        return Handle(self, node_id)

    def node(self, node_id: int) -> Node:
        """Get the node stored under an id.

        Raises:
            InvalidOperationError: If no node has this id.

        """
        if not 0 <= node_id < len(self._nodes):
            msg = f"No node with id {node_id} in this graph"
            raise InvalidOperationError(msg)
        return self._nodes[node_id]

    def set_value(self, node_id: int, value: float) -> None:
        """Overwrite the value of an input node.

        Raises:
            InvalidOperationError: If the node is not an input.

        """
        node = self.node(node_id)
        if not isinstance(node, InputNode):
            msg = f"Cannot set the value of {node.kind} node {node_id}; only input nodes are settable"
            raise InvalidOperationError(msg)
        node.value = float(value)
        logger.debug("Set input %r (node %d) = %r", node.name, node_id, node.value)

    def handles(self) -> Iterator[Handle]:
        """Iterate over handles to every node, in creation order."""
        for node_id in range(len(self._nodes)):
            yield Handle(self, node_id)

    def dependency_graph(self) -> DependencyGraph[int]:
        """Build a dependency snapshot over every node in the graph."""
        edges = [(child, node_id) for node_id, node in enumerate(self._nodes) for child in node.children]
        return DependencyGraph.from_edges(edges, nodes=range(len(self._nodes)))

    def __len__(self) -> int:
        """Return the number of nodes in the graph."""
        return len(self._nodes)

    def __contains__(self, handle: object) -> bool:
        """Check if a handle refers to a node of this graph."""
        return isinstance(handle, Handle) and handle.graph is self and 0 <= handle.node_id < len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, max_depth={self.config.max_depth})"
