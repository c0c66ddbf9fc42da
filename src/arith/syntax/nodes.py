"""
Expression node types for the arith syntax tree.

Three variants cover the grammar:
- Literal: a single number token
- Parenthesized: ``(`` expression ``)``
- Binary: left operand, operator token, right operand

Nodes are frozen pydantic models and are built complete, children first.
"""

from __future__ import annotations

from typing import ClassVar

from arith.syntax.tokens import SyntaxKind, SyntaxNode, Token


class ExpressionSyntax(SyntaxNode):
    """Base for expression nodes."""

    kind: ClassVar[SyntaxKind]


class LiteralExpressionSyntax(ExpressionSyntax):
    """A number literal."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.LITERAL_EXPRESSION

    literal_token: Token

    @property
    def value(self) -> int:
        return self.literal_token.value or 0

    def children(self) -> list[SyntaxNode]:
        return [self.literal_token]

    def __str__(self) -> str:
        return str(self.value)


class ParenthesizedExpressionSyntax(ExpressionSyntax):
    """An expression wrapped in parentheses."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.PARENTHESIZED_EXPRESSION

    open_parenthesis_token: Token
    expression: ExpressionSyntax
    close_parenthesis_token: Token

    def children(self) -> list[SyntaxNode]:
        return [self.open_parenthesis_token, self.expression, self.close_parenthesis_token]

    def __str__(self) -> str:
        return f"({self.expression})"


class BinaryExpressionSyntax(ExpressionSyntax):
    """Binary operation: left op right."""

    kind: ClassVar[SyntaxKind] = SyntaxKind.BINARY_EXPRESSION

    left: ExpressionSyntax
    operator_token: Token
    right: ExpressionSyntax

    def children(self) -> list[SyntaxNode]:
        return [self.left, self.operator_token, self.right]

    def __str__(self) -> str:
        return f"({self.left} {self.operator_token.text} {self.right})"
