"""Builder API: functions that allocate nodes and return handles.

Inputs are created in the current graph (see `use_graph`). Operator builders
allocate in the graph their operands belong to; operands from two different
graphs cannot be combined.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ._context import get_current_graph
from ._errors import InvalidOperationError
from ._ir import BinaryNode, ConstantNode, Handle, InputNode, UnaryNode
from ._ops import BinaryOp, UnaryOp

if TYPE_CHECKING:
    from ._ir import Graph

logger = logging.getLogger(__name__)


def _require_handle(value: object, role: str) -> Handle:
    if not isinstance(value, Handle):
        msg = f"{role} must be a Handle, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def _common_graph(*handles: Handle) -> Graph:
    graph = handles[0].graph
    for handle in handles[1:]:
        if handle.graph is not graph:
            msg = "Cannot combine handles that belong to different graphs"
            raise InvalidOperationError(msg)
    return graph


def _binary(op: BinaryOp, left: object, right: object) -> Handle:
    lhs = _require_handle(left, f"Left operand of {op}")
    rhs = _require_handle(right, f"Right operand of {op}")
    graph = _common_graph(lhs, rhs)
    return graph.add_node(BinaryNode(op=op, left=lhs.node_id, right=rhs.node_id))


def _unary(op: UnaryOp, arg: object) -> Handle:
    handle = _require_handle(arg, f"Operand of {op}")
    return handle.graph.add_node(UnaryNode(op=op, child=handle.node_id))


def create_input(name: str) -> Handle:
    """Create an input node with value 0.0 in the current graph."""
    return get_current_graph().add_node(InputNode(name=name))


def create_input_with(name: str, value: float) -> Handle:
    """Create an input node pre-seeded with `value` in the current graph."""
    return get_current_graph().add_node(InputNode(name=name, value=float(value)))


def clone(handle: Handle) -> Handle:
    """Return another handle to the same node.

    The node is shared, not copied; this is how one sub-expression is used by
    several parents.
    """
    handle = _require_handle(handle, "Argument of clone")
    return Handle(handle.graph, handle.node_id)


def set(handle: Handle, value: float) -> None:  # noqa: A001
    """Overwrite the value of an input node.

    Raises:
        InvalidOperationError: If the handle does not refer to an input node.

    """
    _require_handle(handle, "Argument of set").set(value)


def sum(a: Handle, b: Handle) -> Handle:  # noqa: A001
    """Build `a + b`."""
    return _binary(BinaryOp.SUM, a, b)


def sub(a: Handle, b: Handle) -> Handle:
    """Build `a - b`."""
    return _binary(BinaryOp.SUB, a, b)


def mul(a: Handle, b: Handle) -> Handle:
    """Build `a * b`."""
    return _binary(BinaryOp.MUL, a, b)


def div(a: Handle, b: Handle) -> Handle:
    """Build `a / b`. Evaluating it fails with DivisionByZeroError when `b` is zero."""
    return _binary(BinaryOp.DIV, a, b)


def pow(a: Handle, exponent: Handle | float) -> Handle:  # noqa: A001
    """Build `a ^ exponent`.

    Args:
        a: The base.
        exponent: Either a handle (graph-valued exponent) or a number, which
            is stored as a constant node in the base's graph.

    Returns:
        Handle to the new pow node.

    """
    base = _require_handle(a, "Base of pow")
    if isinstance(exponent, (int, float)) and not isinstance(exponent, bool):
        logger.debug("Wrapping pow exponent %r as a constant", exponent)
        exponent = base.graph.add_node(ConstantNode(value=float(exponent)))
    return _binary(BinaryOp.POW, base, exponent)


def sin(a: Handle) -> Handle:
    """Build `sin(a)`."""
    return _unary(UnaryOp.SIN, a)


def cos(a: Handle) -> Handle:
    """Build `cos(a)`."""
    return _unary(UnaryOp.COS, a)
