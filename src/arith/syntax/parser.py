"""
Recursive descent parser for the arith expression language.

Grammar (precedence low to high, binary operators left-associative):
    expression  → term
    term        → factor (("+"|"-") factor)*
    factor      → primary (("*"|"/") primary)*
    primary     → NUMBER | "(" expression ")"

The parser never raises. A token that does not fit the grammar is
reported as a diagnostic, consumed, and replaced by a synthesized token
so the tree is always complete.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from arith.syntax.diagnostics import DiagnosticBag
from arith.syntax.lexer import Lexer
from arith.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    LiteralExpressionSyntax,
    ParenthesizedExpressionSyntax,
)
from arith.syntax.tokens import SyntaxKind, Token
from arith.syntax.tree import SyntaxTree

logger = logging.getLogger(__name__)

_TRIVIA = (SyntaxKind.WHITESPACE, SyntaxKind.BAD)

_TERM_OPERATORS = (SyntaxKind.PLUS, SyntaxKind.MINUS)
_FACTOR_OPERATORS = (SyntaxKind.ASTERISK, SyntaxKind.SLASH)

# Each parenthesis level costs several Python frames; deeper groups are
# skipped and reported instead of recursing.
MAX_NESTING_DEPTH = 100


class Parser:
    """Builds a SyntaxTree from source text."""

    def __init__(self, text: str) -> None:
        self.diagnostics = DiagnosticBag()
        lexer = Lexer(text, self.diagnostics)
        self.tokens: list[Token] = [t for t in lexer if t.kind not in _TRIVIA]
        self.pos = 0
        self.depth = 0
        logger.debug("Lexed %d significant tokens from %r", len(self.tokens), text)

    @property
    def current(self) -> Token:
        return self.peek()

    def peek(self, offset: int = 0) -> Token:
        idx = self.pos + offset
        if idx < len(self.tokens):
            return self.tokens[idx]
        return self.tokens[-1]  # EOF

    def advance(self) -> Token:
        tok = self.current
        if self.pos < len(self.tokens):
            self.pos += 1
        return tok

    def expect(self, kind: SyntaxKind) -> Token:
        """Consume a token of ``kind``, or report and synthesize one."""
        tok = self.advance()
        if tok.kind == kind:
            return tok

        self.diagnostics.report_unexpected_token(tok.span, tok.kind, kind)
        value = 0 if kind == SyntaxKind.NUMBER else None
        return Token(kind=kind, position=tok.position, text="", value=value, is_missing=True)

    def parse(self) -> SyntaxTree:
        root = self.parse_expression()
        eof = self.expect(SyntaxKind.END_OF_FILE)
        if self.diagnostics:
            logger.debug("Parse finished with %d diagnostics", len(self.diagnostics))
        return SyntaxTree(diagnostics=self.diagnostics.freeze(), root=root, end_of_file_token=eof)

    # -- Grammar rules --

    def parse_expression(self) -> ExpressionSyntax:
        return self.parse_term()

    def parse_term(self) -> ExpressionSyntax:
        """factor (('+' | '-') factor)*"""
        return self._parse_binary_level(self.parse_factor, _TERM_OPERATORS)

    def parse_factor(self) -> ExpressionSyntax:
        """primary (('*' | '/') primary)*"""
        return self._parse_binary_level(self.parse_primary, _FACTOR_OPERATORS)

    def _parse_binary_level(
        self,
        operand: Callable[[], ExpressionSyntax],
        operators: tuple[SyntaxKind, ...],
    ) -> ExpressionSyntax:
        left = operand()
        while self.current.kind in operators:
            operator_token = self.advance()
            right = operand()
            left = BinaryExpressionSyntax(left=left, operator_token=operator_token, right=right)
        return left

    def parse_primary(self) -> ExpressionSyntax:
        """NUMBER | '(' expression ')'"""
        if self.current.kind == SyntaxKind.OPEN_PARENTHESIS:
            if self.depth >= MAX_NESTING_DEPTH:
                return self._skip_nested_group()

            open_token = self.advance()
            self.depth += 1
            expression = self.parse_expression()
            self.depth -= 1
            close_token = self.expect(SyntaxKind.CLOSE_PARENTHESIS)
            return ParenthesizedExpressionSyntax(
                open_parenthesis_token=open_token,
                expression=expression,
                close_parenthesis_token=close_token,
            )

        number_token = self.expect(SyntaxKind.NUMBER)
        return LiteralExpressionSyntax(literal_token=number_token)

    def _skip_nested_group(self) -> LiteralExpressionSyntax:
        """Consume a parenthesized group past the depth limit as a placeholder."""
        open_token = self.current
        self.diagnostics.report_nesting_too_deep(open_token.span, MAX_NESTING_DEPTH)

        balance = 0
        while True:
            tok = self.advance()
            if tok.kind == SyntaxKind.OPEN_PARENTHESIS:
                balance += 1
            elif tok.kind == SyntaxKind.CLOSE_PARENTHESIS:
                balance -= 1
            if balance == 0 or tok.kind == SyntaxKind.END_OF_FILE:
                break

        placeholder = Token(
            kind=SyntaxKind.NUMBER,
            position=open_token.position,
            text="",
            value=0,
            is_missing=True,
        )
        return LiteralExpressionSyntax(literal_token=placeholder)
