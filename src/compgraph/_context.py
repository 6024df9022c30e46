"""Context variables for compgraph.

The module-level builder functions allocate nodes in the *current graph*.
By default that is a process-wide graph; `use_graph` swaps in another graph
for the duration of a `with` block (per thread / per asyncio task).
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING

from ._ir import Graph

if TYPE_CHECKING:
    from collections.abc import Iterator

_default_graph = Graph()
_current_graph_var: ContextVar[Graph | None] = ContextVar("current_graph", default=None)


def get_current_graph() -> Graph:
    """Get the graph that new inputs are allocated in."""
    graph = _current_graph_var.get()
    return graph if graph is not None else _default_graph


@contextmanager
def use_graph(graph: Graph | None = None) -> Iterator[Graph]:
    """Make `graph` (or a fresh Graph) the current graph inside a `with` block.

    Example:
        >>> with use_graph() as graph:
        ...     x = create_input_with("x", 1.0)
        >>> x.graph is graph
        True

    """
    if graph is None:
        graph = Graph()
    token = _current_graph_var.set(graph)
    try:
        yield graph
    finally:
        _current_graph_var.reset(token)
