"""Operator tags and their numeric semantics.

All operators share one evaluation routine, `apply_operator`, which dispatches
on the operator tag. Failures are reported as exceptions rather than IEEE
infinities or NaNs:

- `div` raises `DivisionByZeroError` when the divisor is exactly zero.
- `pow` raises `DomainError` for a negative base with a non-integer exponent
  and for a zero base with a negative exponent.
- `pow` raises `DomainError` when the result overflows the float range.
- `sin` and `cos` raise `DomainError` for non-finite input.

The other operators follow IEEE arithmetic, so `sum(1e308, 1e308)` is `inf`.
"""

from __future__ import annotations

import math
from enum import StrEnum
from typing import TYPE_CHECKING, Self, TypeAlias

from ._errors import DivisionByZeroError, DomainError

if TYPE_CHECKING:
    from collections.abc import Callable


class _OperatorEnum(StrEnum):
    """Base class for operator tags carrying an infix symbol and a docstring."""

    symbol: str

    def __new__(cls, value: str, symbol: str, doc: str = "") -> Self:
        """Create a new operator member."""
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.symbol = symbol
        obj.__doc__ = doc
        return obj


class UnaryOp(_OperatorEnum):
    """Operators taking a single operand."""

    SIN = "sin", "sin", "Sine of the operand (radians)."
    COS = "cos", "cos", "Cosine of the operand (radians)."

    @property
    def arity(self) -> int:
        return 1


class BinaryOp(_OperatorEnum):
    """Operators taking a left and a right operand."""

    SUM = "sum", "+", "Addition."
    SUB = "sub", "-", "Subtraction, left minus right."
    MUL = "mul", "*", "Multiplication."
    DIV = "div", "/", "Division, left over right."
    POW = "pow", "^", "Exponentiation, left raised to right."

    @property
    def arity(self) -> int:
        return 2


Operator: TypeAlias = UnaryOp | BinaryOp


def _trig(op: UnaryOp, fn: Callable[[float], float]) -> Callable[[float], float]:
    def apply(x: float) -> float:
        if not math.isfinite(x):
            msg = f"{op}() is undefined for non-finite input {x!r}"
            raise DomainError(msg)
        return fn(x)

    return apply


def _div(left: float, right: float) -> float:
    if right == 0.0:
        msg = f"Division of {left!r} by zero"
        raise DivisionByZeroError(msg)
    return left / right


def _pow(base: float, exponent: float) -> float:
    if base < 0 and not float(exponent).is_integer():
        msg = f"Negative base {base!r} raised to non-integer exponent {exponent!r}"
        raise DomainError(msg)
    if base == 0 and exponent < 0:
        msg = f"Zero raised to negative exponent {exponent!r}"
        raise DomainError(msg)
    try:
        return base**exponent
    except OverflowError as e:
        msg = f"{base!r} ^ {exponent!r} overflows the float range"
        raise DomainError(msg) from e


_IMPLEMENTATIONS: dict[Operator, Callable[..., float]] = {
    UnaryOp.SIN: _trig(UnaryOp.SIN, math.sin),
    UnaryOp.COS: _trig(UnaryOp.COS, math.cos),
    BinaryOp.SUM: lambda left, right: left + right,
    BinaryOp.SUB: lambda left, right: left - right,
    BinaryOp.MUL: lambda left, right: left * right,
    BinaryOp.DIV: _div,
    BinaryOp.POW: _pow,
}


def apply_operator(op: Operator, *operands: float) -> float:
    """Apply an operator to already evaluated operand values.

    Args:
        op: The operator tag.
        *operands: One value for unary operators, two (left, right) for binary ones.

    Returns:
        The result as a float.

    Raises:
        DivisionByZeroError: If a `div` divisor is zero.
        DomainError: If the operands are outside the operator's real domain,
            or a `pow` result overflows the float range.
        TypeError: If the number of operands does not match the operator.

    Example:
        >>> apply_operator(BinaryOp.POW, 2.0, 3.0)
        8.0

    """
    if len(operands) != op.arity:
        msg = f"{op} expects {op.arity} operand(s), got {len(operands)}"
        raise TypeError(msg)

    return float(_IMPLEMENTATIONS[op](*operands))
