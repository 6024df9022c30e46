"""Copyable references to nodes of an expression graph."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from compgraph._errors import InvalidOperationError

from ._node_spec import ConstantNode, InputNode

if TYPE_CHECKING:
    from ._graph import Graph
    from ._node_spec import Node, NodeKind


@dataclass(frozen=True, slots=True)
class Handle:
    """A reference to exactly one node of a Graph.

    Handles are plain values: copying one (or calling `clone`) never copies
    the node, so two handles with the same `node_id` denote the same shared
    sub-expression. Two handles compare equal when they point at the same
    node of the same graph.

    The arithmetic operators build new nodes: `a + b`, `a - b`, `a * b` and
    `a / b` take handle operands, `a ** e` also accepts a number exponent.
    """

    graph: Graph = field(repr=False, compare=True)
    node_id: int

    @property
    def node(self) -> Node:
        """The node this handle refers to."""
        return self.graph.node(self.node_id)

    @property
    def kind(self) -> NodeKind:
        return self.node.kind

    @property
    def name(self) -> str | None:
        """Name of the input node, None for any other kind."""
        node = self.node
        return node.name if isinstance(node, InputNode) else None

    @property
    def value(self) -> float:
        """Stored value of an input or constant node.

        Raises:
            InvalidOperationError: If the node is an operator node; use
                `compute` to evaluate it.

        """
        node = self.node
        if not isinstance(node, (InputNode, ConstantNode)):
            msg = f"{node.kind} node {self.node_id} has no stored value; use compute()"
            raise InvalidOperationError(msg)
        return node.value

    def set(self, value: float) -> None:
        """Overwrite the value of the referenced input node."""
        self.graph.set_value(self.node_id, value)

    def compute(self, *, max_depth: int | None = None) -> float:
        """Evaluate the expression rooted at this handle."""
        from compgraph._eval_engine import compute  # noqa: PLC0415

        return compute(self, max_depth=max_depth)

    def __str__(self) -> str:
        from compgraph._render import render  # noqa: PLC0415

        return render(self)

    def __add__(self, other: object) -> Handle:
        if not isinstance(other, Handle):
            return NotImplemented
        from compgraph._builders import sum as sum_  # noqa: PLC0415

        return sum_(self, other)

    def __sub__(self, other: object) -> Handle:
        if not isinstance(other, Handle):
            return NotImplemented
        from compgraph._builders import sub  # noqa: PLC0415

        return sub(self, other)

    def __mul__(self, other: object) -> Handle:
        if not isinstance(other, Handle):
            return NotImplemented
        from compgraph._builders import mul  # noqa: PLC0415

        return mul(self, other)

    def __truediv__(self, other: object) -> Handle:
        if not isinstance(other, Handle):
            return NotImplemented
        from compgraph._builders import div  # noqa: PLC0415

        return div(self, other)

    def __pow__(self, exponent: object) -> Handle:
        if not isinstance(exponent, (Handle, int, float)) or isinstance(exponent, bool):
            return NotImplemented
        from compgraph._builders import pow as pow_  # noqa: PLC0415

        return pow_(self, exponent)
