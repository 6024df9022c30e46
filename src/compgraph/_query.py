"""Structural queries over expression graphs."""

from __future__ import annotations

from ._errors import CycleDetectedError
from ._eval_engine import post_order
from ._ir import Handle, InputNode


def inputs(handle: Handle) -> list[Handle]:
    """List the input nodes the expression rooted at `handle` reads.

    Returns:
        One handle per distinct input, in creation order. An input handle
        yields itself.

    Raises:
        CycleDetectedError: If the reachable nodes are not a DAG.
        GraphTooDeepError: If the traversal exceeds the graph's depth limit.

    """
    graph = handle.graph
    reachable = post_order(graph, handle.node_id, graph.config.max_depth)
    return [Handle(graph, node_id) for node_id in sorted(reachable) if isinstance(graph.node(node_id), InputNode)]


def dependents(handle: Handle) -> list[Handle]:
    """List every node of the graph whose value depends on `handle`.

    These are the expressions whose result may change after `set(handle, ...)`.

    Returns:
        Handles in dependency order: each node comes after the nodes it uses.

    Raises:
        CycleDetectedError: If the graph contains a cycle.

    """
    graph = handle.graph
    deps = graph.dependency_graph()
    affected = deps.descendants(handle.node_id)
    try:
        order = deps.topological_order()
    except ValueError as e:
        raise CycleDetectedError from e
    return [Handle(graph, node_id) for node_id in order if node_id in affected]
