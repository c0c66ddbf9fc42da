"""
Evaluator for arith syntax trees.

Reduces an expression tree to a single integer. Pure evaluation: no I/O,
no side effects, the same tree always yields the same result.
"""

from __future__ import annotations

import logging

from arith.errors import DivisionByZeroError, UnsupportedOperationError
from arith.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    LiteralExpressionSyntax,
    ParenthesizedExpressionSyntax,
)
from arith.syntax.tokens import SyntaxKind, Token

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates the expression rooted at ``root``."""

    def __init__(self, root: ExpressionSyntax) -> None:
        self.root = root

    def evaluate(self) -> int:
        """
        Compute the value of the tree.

        Raises:
            DivisionByZeroError: If a divisor evaluates to zero.
            UnsupportedOperationError: If the tree holds an operator or node
                the evaluator does not handle.
        """
        return _interpret(self.root)


def evaluate(expr: ExpressionSyntax) -> int:
    """Evaluate an expression tree. See ``Evaluator.evaluate``."""
    return Evaluator(expr).evaluate()


def _interpret(expr: ExpressionSyntax) -> int:
    """
    Dispatch evaluation on the node variant.

    Uses an explicit work stack: operator chains are left-leaning and can
    be far deeper than Python's recursion limit.
    """
    values: list[int] = []
    # (node, operands_ready): a binary node is pushed twice, once to
    # schedule its operands and once to combine their values.
    stack: list[tuple[ExpressionSyntax, bool]] = [(expr, False)]
    while stack:
        node, operands_ready = stack.pop()
        match node:
            case LiteralExpressionSyntax(literal_token=token):
                values.append(token.value or 0)
            case ParenthesizedExpressionSyntax(expression=inner):
                stack.append((inner, False))
            case BinaryExpressionSyntax(operator_token=op) if operands_ready:
                right = values.pop()
                left = values.pop()
                values.append(_interpret_binary(left, op, right))
            case BinaryExpressionSyntax(left=left_node, right=right_node):
                stack.append((node, True))
                stack.append((right_node, False))
                stack.append((left_node, False))
            case _:
                raise UnsupportedOperationError(f"Unknown expression type: {type(node).__name__}")
    return values.pop()


def _interpret_binary(left: int, op: Token, right: int) -> int:
    match op.kind:
        case SyntaxKind.PLUS:
            return left + right
        case SyntaxKind.MINUS:
            return left - right
        case SyntaxKind.ASTERISK:
            return left * right
        case SyntaxKind.SLASH:
            return _divide(left, right, op)
        case _:
            raise UnsupportedOperationError(f"Unexpected binary operator: {op.kind}")


def _divide(left: int, right: int, op: Token) -> int:
    """Integer quotient, truncated toward zero."""
    if right == 0:
        logger.debug("Division by zero at position %d", op.position)
        raise DivisionByZeroError(f"Division by zero at position {op.position}")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient
