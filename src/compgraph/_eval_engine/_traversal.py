"""Depth-first traversal of the nodes reachable from a root."""

from __future__ import annotations

from typing import TYPE_CHECKING

from compgraph._errors import CycleDetectedError, GraphTooDeepError

if TYPE_CHECKING:
    from compgraph._ir import Graph


def post_order(graph: Graph, root_id: int, max_depth: int) -> list[int]:
    """List the distinct nodes reachable from a root, children before parents.

    The walk keeps an explicit stack instead of recursing, so its depth is
    bounded by `max_depth` rather than by the interpreter's recursion limit.
    Each node goes through three states: unvisited, in progress (on the
    current root-to-node path) and resolved (appended to the result).

    Args:
        graph: The graph holding the nodes.
        root_id: Id of the node to start from.
        max_depth: Maximum number of nodes on the current path.

    Returns:
        Node ids, each exactly once, with every node after all its children.
        The root is last.

    Raises:
        CycleDetectedError: If a node is reached again while still in progress.
        GraphTooDeepError: If the current path grows beyond `max_depth`.

    """
    order: list[int] = []
    resolved: set[int] = set()
    in_progress: set[int] = set()
    # (node_id, expanded): expanded entries resolve the node once its children are done
    stack: list[tuple[int, bool]] = [(root_id, False)]

    while stack:
        node_id, expanded = stack.pop()

        if expanded:
            in_progress.discard(node_id)
            resolved.add(node_id)
            order.append(node_id)
            continue

        if node_id in resolved:
            continue
        if node_id in in_progress:
            raise CycleDetectedError(node_id)

        in_progress.add(node_id)
        if len(in_progress) > max_depth:
            raise GraphTooDeepError(max_depth)

        stack.append((node_id, True))
        # Reversed so the left operand is visited first
        for child in reversed(graph.node(node_id).children):
            if child in in_progress:
                raise CycleDetectedError(child)
            if child not in resolved:
                stack.append((child, False))

    return order
