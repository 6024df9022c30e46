"""Tests for operator tags and their numeric semantics."""

import math

import pytest

from compgraph._errors import CompGraphError, DivisionByZeroError, DomainError
from compgraph._ops import BinaryOp, UnaryOp, _OperatorEnum, apply_operator


class TestOperatorTags:
    def test_binary_symbols(self) -> None:
        assert [op.symbol for op in BinaryOp] == ["+", "-", "*", "/", "^"]

    def test_unary_symbols(self) -> None:
        assert UnaryOp.SIN.symbol == "sin"
        assert UnaryOp.COS.symbol == "cos"

    def test_values_are_operator_names(self) -> None:
        assert BinaryOp.POW == "pow"
        assert str(UnaryOp.COS) == "cos"

    def test_members_carry_docstrings(self) -> None:
        assert BinaryOp.SUB.__doc__ == "Subtraction, left minus right."

    def test_arity(self) -> None:
        assert all(op.arity == 2 for op in BinaryOp)
        assert all(op.arity == 1 for op in UnaryOp)

    def test_arity_is_defined_per_operator_kind(self) -> None:
        assert "arity" not in vars(_OperatorEnum)
        assert isinstance(vars(UnaryOp)["arity"], property)
        assert isinstance(vars(BinaryOp)["arity"], property)


class TestApplyOperator:
    @pytest.mark.parametrize(
        ("op", "operands", "expected"),
        [
            (BinaryOp.SUM, (2.0, 3.0), 5.0),
            (BinaryOp.SUB, (5.0, 2.0), 3.0),
            (BinaryOp.MUL, (4.0, 3.0), 12.0),
            (BinaryOp.DIV, (6.0, 3.0), 2.0),
            (BinaryOp.POW, (2.0, 3.0), 8.0),
            (UnaryOp.SIN, (0.0,), 0.0),
            (UnaryOp.COS, (0.0,), 1.0),
        ],
    )
    def test_operator_table(self, op: BinaryOp | UnaryOp, operands: tuple[float, ...], expected: float) -> None:
        assert apply_operator(op, *operands) == expected

    def test_operand_order_matters(self) -> None:
        assert apply_operator(BinaryOp.SUB, 2.0, 5.0) == -3.0
        assert apply_operator(BinaryOp.DIV, 3.0, 6.0) == 0.5
        assert apply_operator(BinaryOp.POW, 3.0, 2.0) == 9.0

    def test_wrong_operand_count(self) -> None:
        with pytest.raises(TypeError, match="expects 2 operand"):
            apply_operator(BinaryOp.SUM, 1.0)


class TestDivision:
    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError, match="by zero"):
            apply_operator(BinaryOp.DIV, 6.0, 0.0)

    def test_division_by_negative_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            apply_operator(BinaryOp.DIV, 1.0, -0.0)

    def test_division_error_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            apply_operator(BinaryOp.DIV, 1.0, 0.0)

    def test_zero_over_nonzero(self) -> None:
        assert apply_operator(BinaryOp.DIV, 0.0, 4.0) == 0.0


class TestPow:
    def test_negative_base_integer_exponent(self) -> None:
        assert apply_operator(BinaryOp.POW, -2.0, 3.0) == -8.0

    def test_negative_base_fractional_exponent(self) -> None:
        with pytest.raises(DomainError, match="non-integer exponent"):
            apply_operator(BinaryOp.POW, -8.0, 1 / 3)

    def test_zero_base_negative_exponent(self) -> None:
        with pytest.raises(DomainError, match="negative exponent"):
            apply_operator(BinaryOp.POW, 0.0, -1.0)

    def test_fractional_exponent(self) -> None:
        assert apply_operator(BinaryOp.POW, 9.0, 0.5) == 3.0

    def test_overflow(self) -> None:
        with pytest.raises(DomainError, match="overflows"):
            apply_operator(BinaryOp.POW, 10.0, 400.0)

    def test_domain_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):  # noqa: PT011
            apply_operator(BinaryOp.POW, -1.0, 0.5)


class TestTrigonometry:
    @pytest.mark.parametrize("op", [UnaryOp.SIN, UnaryOp.COS])
    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite_input(self, op: UnaryOp, x: float) -> None:
        with pytest.raises(DomainError, match="non-finite"):
            apply_operator(op, x)

    def test_matches_math_module(self) -> None:
        assert apply_operator(UnaryOp.SIN, 27020.0) == math.sin(27020.0)
        assert apply_operator(UnaryOp.COS, 1.5) == math.cos(1.5)


class TestOverflow:
    def test_mul_overflow_is_infinite(self) -> None:
        assert apply_operator(BinaryOp.MUL, 1e200, 1e200) == math.inf

    def test_sum_and_sub_overflow_are_infinite(self) -> None:
        assert apply_operator(BinaryOp.SUM, 1e308, 1e308) == math.inf
        assert apply_operator(BinaryOp.SUB, -1e308, 1e308) == -math.inf

    def test_div_overflow_is_infinite(self) -> None:
        assert apply_operator(BinaryOp.DIV, 1e308, 1e-10) == math.inf

    def test_pow_overflow_is_domain_error(self) -> None:
        with pytest.raises(DomainError, match="overflows"):
            apply_operator(BinaryOp.POW, 1e200, 3.0)

    def test_non_finite_operands_propagate(self) -> None:
        assert apply_operator(BinaryOp.SUM, math.inf, 1.0) == math.inf
        assert math.isnan(apply_operator(BinaryOp.MUL, math.nan, 2.0))

    def test_errors_share_base_class(self) -> None:
        with pytest.raises(CompGraphError):
            apply_operator(BinaryOp.POW, 10.0, 400.0)
