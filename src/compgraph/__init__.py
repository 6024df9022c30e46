"""Arithmetic expressions as shared DAGs with memoized evaluation."""

__all__ = [
    "BinaryOp",
    "CompGraphError",
    "ConfigError",
    "CycleDetectedError",
    "DependencyGraph",
    "DivisionByZeroError",
    "DomainError",
    "EvaluationResult",
    "EvaluatorConfig",
    "ExpressionTooLargeError",
    "Graph",
    "GraphTooDeepError",
    "Handle",
    "InvalidOperationError",
    "NodeKind",
    "UnaryOp",
    "clone",
    "compute",
    "cos",
    "create_input",
    "create_input_with",
    "dependents",
    "div",
    "evaluate",
    "get_config",
    "get_current_graph",
    "inputs",
    "load_config",
    "mul",
    "pow",
    "render",
    "set",
    "sin",
    "sub",
    "sum",
    "use_graph",
]

from ._builders import clone, cos, create_input, create_input_with, div, mul, pow, set, sin, sub, sum  # noqa: A004
from ._config import EvaluatorConfig, get_config, load_config
from ._context import get_current_graph, use_graph
from ._errors import (
    CompGraphError,
    ConfigError,
    CycleDetectedError,
    DivisionByZeroError,
    DomainError,
    ExpressionTooLargeError,
    GraphTooDeepError,
    InvalidOperationError,
)
from ._eval_engine import EvaluationResult, compute, evaluate
from ._graph import DependencyGraph
from ._ir import Graph, Handle, NodeKind
from ._ops import BinaryOp, UnaryOp
from ._query import dependents, inputs
from ._render import render
