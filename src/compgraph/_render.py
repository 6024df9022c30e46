"""Infix rendering of expressions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ._errors import ExpressionTooLargeError
from ._eval_engine import post_order
from ._ir import BinaryNode, ConstantNode, InputNode, UnaryNode
from ._ops import BinaryOp

if TYPE_CHECKING:
    from ._ir import Handle

# Beyond this magnitude an integral float is written in exponent form.
_MAX_PLAIN_INTEGER = 1e16


def format_number(value: float) -> str:
    """Format a constant the way it is written in an expression (`3`, `0.5`, `1e+300`)."""
    if value.is_integer() and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


def render(handle: Handle, *, max_depth: int | None = None, max_length: int | None = None) -> str:
    """Render the expression rooted at `handle` in infix notation.

    Inputs are shown by name and constants by value. Binary arithmetic is
    parenthesised, `pow` is written `base^exponent` and unary operators use
    call syntax. A shared sub-expression is written out at every use, so the
    text of a heavily shared graph can grow much faster than the graph.

    Args:
        handle: Root of the expression.
        max_depth: Traversal depth limit. Defaults to the graph's config.
        max_length: Longest text allowed for the root or any sub-expression.
            Defaults to the graph's config.

    Raises:
        CycleDetectedError: If the expression is not a DAG.
        GraphTooDeepError: If a traversal path exceeds `max_depth`.
        ExpressionTooLargeError: If the text would exceed `max_length`.

    Example:
        >>> a, b, c = create_input("a"), create_input("b"), create_input("c")
        >>> render(sum(a, mul(b, sin(c))))
        '(a + (b * sin(c)))'

    """
    graph = handle.graph
    depth = graph.config.max_depth if max_depth is None else max_depth
    limit = graph.config.max_render_length if max_length is None else max_length
    text: dict[int, str] = {}

    for node_id in post_order(graph, handle.node_id, depth):
        match graph.node(node_id):
            case InputNode(name=name):
                rendered = name
            case ConstantNode(value=value):
                rendered = format_number(value)
            case UnaryNode(op=op, child=child):
                rendered = f"{op.symbol}({text[child]})"
            case BinaryNode(op=BinaryOp.POW, left=left, right=right):
                rendered = f"{text[left]}^{text[right]}"
            case BinaryNode(op=op, left=left, right=right):
                rendered = f"({text[left]} {op.symbol} {text[right]})"
        # Operands are already within the limit, so each step stays bounded.
        if len(rendered) > limit:
            raise ExpressionTooLargeError(limit)
        text[node_id] = rendered

    return text[handle.node_id]
