"""Tests for the arith evaluator.

Covers:
- Integer arithmetic with precedence and associativity
- Truncating division
- Division by zero and unsupported operators on hand-built trees
"""

from __future__ import annotations

import pytest

from arith import DivisionByZeroError, EvaluationError, Evaluator, UnsupportedOperationError, evaluate
from arith.syntax import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    LiteralExpressionSyntax,
    SyntaxKind,
    SyntaxTree,
    Token,
)


def _eval(source: str) -> int:
    tree = SyntaxTree.parse(source)
    assert tree.diagnostics == ()
    return evaluate(tree.root)


def _literal(value: int) -> LiteralExpressionSyntax:
    token = Token(kind=SyntaxKind.NUMBER, position=0, text=str(value), value=value)
    return LiteralExpressionSyntax(literal_token=token)


# ============================================================================
# Arithmetic
# ============================================================================


class TestEvaluatorArithmetic:
    """Evaluation follows integer arithmetic."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("42", 42),
            ("2 + 3", 5),
            ("9 - 4", 5),
            ("6 * 7", 42),
            ("8 / 2", 4),
            ("2+3*4", 14),
            ("(2+3)*4", 20),
            ("10-3-2", 5),
            ("20/4/5", 1),
            ("1 + 2 * 3 - 4 / 2", 5),
            ("((7))", 7),
            ("(1 + (2 * (3 + 4))) / 5", 3),
            ("0 - 5 - 5", -10),
        ],
    )
    def test_evaluates(self, source: str, expected: int) -> None:
        assert _eval(source) == expected

    def test_parentheses_do_not_change_value(self, well_formed_source: str) -> None:
        assert _eval(f"({well_formed_source})") == _eval(well_formed_source)

    def test_results_exceed_int32(self) -> None:
        assert _eval("2147483647 * 2147483647") == 2147483647**2

    def test_evaluator_class_matches_function(self) -> None:
        root = SyntaxTree.parse("3 * (4 + 5)").root
        assert Evaluator(root).evaluate() == evaluate(root) == 27

    def test_deterministic(self) -> None:
        root = SyntaxTree.parse("100 / 7 * 7 + 100 - 7").root
        assert evaluate(root) == evaluate(root)


class TestEvaluatorDivision:
    """Division truncates toward zero."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("7 / 2", 3),
            ("(0 - 7) / 2", -3),
            ("7 / (0 - 2)", -3),
            ("(0 - 7) / (0 - 2)", 3),
            ("0 - 7 / 2", -3),
            ("1 / 3", 0),
            ("(0 - 1) / 3", 0),
        ],
    )
    def test_truncates_toward_zero(self, source: str, expected: int) -> None:
        assert _eval(source) == expected


# ============================================================================
# Failures
# ============================================================================


class TestEvaluatorErrors:
    """Evaluation failures are distinct and do not leak into later calls."""

    @pytest.mark.parametrize("source", ["5/0", "5 / (3 - 3)", "1 + 2 / (4 * 0)"])
    def test_division_by_zero(self, source: str) -> None:
        with pytest.raises(DivisionByZeroError, match="Division by zero"):
            _eval(source)

    def test_division_by_zero_is_arithmetic_error(self) -> None:
        with pytest.raises(ArithmeticError):
            _eval("5/0")

    def test_unsupported_operator(self) -> None:
        bad_operator = Token(kind=SyntaxKind.OPEN_PARENTHESIS, position=1, text="(")
        root = BinaryExpressionSyntax(left=_literal(1), operator_token=bad_operator, right=_literal(2))
        with pytest.raises(UnsupportedOperationError, match="open_parenthesis") as exc_info:
            evaluate(root)
        assert not isinstance(exc_info.value, ArithmeticError)

    def test_unknown_node(self) -> None:
        with pytest.raises(UnsupportedOperationError, match="ExpressionSyntax"):
            Evaluator(ExpressionSyntax()).evaluate()

    def test_failures_share_base(self) -> None:
        assert issubclass(DivisionByZeroError, EvaluationError)
        assert issubclass(UnsupportedOperationError, EvaluationError)

    def test_failure_does_not_affect_next_evaluation(self) -> None:
        with pytest.raises(DivisionByZeroError):
            _eval("1/0")
        assert _eval("1/1") == 1


# ============================================================================
# Large inputs
# ============================================================================


class TestEvaluatorLargeInputs:
    """Long chains and deep nesting evaluate without exhausting the stack."""

    def test_long_addition_chain(self) -> None:
        assert _eval("+".join(["1"] * 5000)) == 5000

    def test_long_mixed_chain(self) -> None:
        source = "10000" + "-2+1" * 3000
        assert _eval(source) == 10000 - 3000

    def test_long_product_chain(self) -> None:
        assert _eval("*".join(["2"] * 2000)) == 2**2000

    def test_long_division_chain(self) -> None:
        assert _eval("1000000" + "/1" * 4000) == 1000000

    def test_deep_nesting(self) -> None:
        depth = 100
        assert _eval("(" * depth + "7-9" + ")" * depth + "/2") == -1

    def test_long_chain_with_zero_divisor(self) -> None:
        tree = SyntaxTree.parse("+".join(["1"] * 3000) + "/0")
        with pytest.raises(DivisionByZeroError):
            evaluate(tree.root)
