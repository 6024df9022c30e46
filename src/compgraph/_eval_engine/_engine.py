"""Core evaluation engine for expression graphs."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from compgraph._ir import BinaryNode, ConstantNode, InputNode, UnaryNode
from compgraph._ops import apply_operator

from ._traversal import post_order

if TYPE_CHECKING:
    from compgraph._ir import Graph, Handle

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Result of evaluating the expression rooted at one node.

    This is the memo table of a single evaluation pass. It is built fresh on
    every call and never consulted by later calls, so it cannot go stale.

    Attributes:
        root: Id of the evaluated root node.
        values: Mapping from node id to value, one entry per distinct node
            reachable from the root.
        evaluations: Number of operator applications performed. Shared
            sub-expressions are counted once.

    """

    root: int
    values: dict[int, float] = field(default_factory=dict)
    evaluations: int = 0

    @property
    def value(self) -> float:
        """Value of the root node."""
        return self.values[self.root]

    def get_value(self, handle: Handle) -> float:
        """Get the value computed for a node during this pass.

        Raises:
            KeyError: If the node is not reachable from the root.

        """
        return self.values[handle.node_id]


def _resolve_max_depth(graph: Graph, max_depth: int | None) -> int:
    if max_depth is None:
        return graph.config.max_depth
    if max_depth < 1:
        msg = f"max_depth must be positive, got {max_depth}"
        raise ValueError(msg)
    return max_depth


def evaluate(root: Handle, *, max_depth: int | None = None) -> EvaluationResult:
    """Evaluate every node reachable from `root`, each exactly once.

    Nodes are evaluated children first. The values computed so far live in a
    memo keyed by node id that only exists for this call; a failing call
    leaves no trace and never touches input values.

    Args:
        root: Handle of the expression to evaluate.
        max_depth: Maximum traversal depth. Defaults to the graph's
            `config.max_depth`.

    Returns:
        EvaluationResult holding the root value and all intermediate values.

    Raises:
        CycleDetectedError: If the reachable nodes are not a DAG.
        GraphTooDeepError: If the traversal path exceeds `max_depth`.
        DivisionByZeroError: If a divisor evaluates to zero.
        DomainError: If an operator is applied outside its real domain.

    Example:
        >>> x = create_input_with("x", 3.0)
        >>> result = evaluate(sum(clone(x), clone(x)))
        >>> result.value, result.evaluations
        (6.0, 1)

    """
    graph = root.graph
    order = post_order(graph, root.node_id, _resolve_max_depth(graph, max_depth))

    memo: dict[int, float] = {}
    evaluations = 0

    logger.debug("Starting evaluation of node %d with %d reachable nodes", root.node_id, len(order))

    for node_id in order:
        node = graph.node(node_id)
        match node:
            case InputNode() | ConstantNode():
                value = node.value
            case UnaryNode(op=op, child=child):
                logger.debug("Evaluating node %d: %s", node_id, op)
                value = apply_operator(op, memo[child])
                evaluations += 1
            case BinaryNode(op=op, left=left, right=right):
                logger.debug("Evaluating node %d: %s", node_id, op)
                value = apply_operator(op, memo[left], memo[right])
                evaluations += 1
        memo[node_id] = value
        logger.debug("  Node %d = %r", node_id, value)

    logger.debug("Finished evaluation of node %d with %d operator applications", root.node_id, evaluations)

    return EvaluationResult(root=root.node_id, values=memo, evaluations=evaluations)


def compute(root: Handle, *, max_depth: int | None = None) -> float:
    """Compute the scalar value of the expression rooted at `root`.

    See `evaluate` for the algorithm and the failure modes.
    """
    return evaluate(root, max_depth=max_depth).value
