"""Graph module providing dependency views over expression nodes.

This module contains:
- DependencyGraph[T]: An immutable "operand of" graph snapshot with
  traversal queries and a topological order
"""

from ._dependency_graph import DependencyGraph

__all__ = ["DependencyGraph"]
