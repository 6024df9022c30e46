"""Node variants stored in an expression graph."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, ClassVar, TypeAlias

if TYPE_CHECKING:
    from compgraph._ops import BinaryOp, UnaryOp


class NodeKind(StrEnum):
    """The kind of node in the expression graph."""

    INPUT = auto()  # Leaf whose value is set from outside
    CONSTANT = auto()  # Leaf with a fixed value (e.g. a literal pow exponent)
    UNARY = auto()  # sin, cos
    BINARY = auto()  # sum, sub, mul, div, pow


@dataclass(slots=True)
class InputNode:
    """A leaf node whose value can be overwritten between evaluations.

    Attributes:
        name: Diagnostic name, used when rendering expressions.
        value: Current value of the input.

    """

    kind: ClassVar[NodeKind] = NodeKind.INPUT
    children: ClassVar[tuple[int, ...]] = ()

    name: str
    value: float = 0.0


@dataclass(frozen=True, slots=True)
class ConstantNode:
    """A leaf node with a value fixed at creation."""

    kind: ClassVar[NodeKind] = NodeKind.CONSTANT
    children: ClassVar[tuple[int, ...]] = ()

    value: float


@dataclass(frozen=True, slots=True)
class UnaryNode:
    """An operator node applied to a single child node."""

    kind: ClassVar[NodeKind] = NodeKind.UNARY

    op: UnaryOp
    child: int

    @property
    def children(self) -> tuple[int, ...]:
        return (self.child,)


@dataclass(frozen=True, slots=True)
class BinaryNode:
    """An operator node applied to a left and a right child node.

    The operand order is significant for `sub`, `div` and `pow`.
    """

    kind: ClassVar[NodeKind] = NodeKind.BINARY

    op: BinaryOp
    left: int
    right: int

    @property
    def children(self) -> tuple[int, ...]:
        return (self.left, self.right)


Node: TypeAlias = InputNode | ConstantNode | UnaryNode | BinaryNode
