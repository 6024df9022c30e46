"""Evaluation engine module for compgraph.

This module provides pure functions for evaluating expression graphs.
Evaluation reads input values and produces results without modifying the
graph.

Key types:
- EvaluationResult: Per-call memo of node values
- evaluate: Evaluate a root handle, returning the full EvaluationResult
- compute: Evaluate a root handle, returning only its value
- post_order: Cycle- and depth-checked traversal shared with rendering
"""

from ._engine import EvaluationResult, compute, evaluate
from ._traversal import post_order

__all__ = [
    "EvaluationResult",
    "compute",
    "evaluate",
    "post_order",
]
