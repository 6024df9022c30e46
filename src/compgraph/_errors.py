"""Exception hierarchy for compgraph.

Every failure raised by the library derives from `CompGraphError`, so callers
can catch all of them at once. The arithmetic failures additionally derive
from the matching built-in exception (`ZeroDivisionError`, `ValueError`).
"""


class CompGraphError(Exception):
    """Base class for all compgraph errors."""


class InvalidOperationError(CompGraphError):
    """Structural misuse of the API (e.g. setting the value of an operator node)."""


class CycleDetectedError(CompGraphError):
    """The nodes reachable from a root do not form a DAG."""

    def __init__(self, node_id: int | None = None) -> None:
        self.node_id = node_id
        if node_id is None:
            msg = "Cycle detected in expression graph"
        else:
            msg = f"Cycle detected in expression graph at node {node_id}"
        super().__init__(msg)


class DivisionByZeroError(CompGraphError, ZeroDivisionError):
    """The divisor of a `div` node evaluated to zero."""


class DomainError(CompGraphError, ValueError):
    """An operator received an argument outside its real domain."""


class GraphTooDeepError(CompGraphError):
    """The traversal path exceeded the configured depth limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Expression graph is deeper than the configured limit of {limit} nodes")


class ExpressionTooLargeError(CompGraphError):
    """The rendered text of an expression exceeded the configured length limit."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"Rendered expression is longer than the configured limit of {limit} characters")


class ConfigError(CompGraphError):
    """Error in compgraph configuration."""
