"""Intermediate representation of expression graphs.

Key types:
- NodeKind: Enum for node types (INPUT, CONSTANT, UNARY, BINARY)
- InputNode, ConstantNode, UnaryNode, BinaryNode: The node variants
- Graph: Append-only arena storing nodes by integer id
- Handle: Copyable reference to one node of a Graph
"""

from ._graph import Graph
from ._handle import Handle
from ._node_spec import BinaryNode, ConstantNode, InputNode, Node, NodeKind, UnaryNode

__all__ = [
    "BinaryNode",
    "ConstantNode",
    "Graph",
    "Handle",
    "InputNode",
    "Node",
    "NodeKind",
    "UnaryNode",
]
