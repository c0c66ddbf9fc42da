"""
SyntaxTree: the parser's public product.

Usage:
    from arith.syntax import SyntaxTree

    tree = SyntaxTree.parse("2 + 3 * 4")
    if not tree.diagnostics:
        print(tree.root)
"""

from __future__ import annotations

from dataclasses import dataclass

from arith.syntax.diagnostics import Diagnostic
from arith.syntax.lexer import Lexer
from arith.syntax.nodes import ExpressionSyntax
from arith.syntax.tokens import SyntaxKind, Token


@dataclass(frozen=True)
class SyntaxTree:
    """
    Diagnostics, root expression and end-of-file token of one parse.

    Attributes:
        diagnostics: Problems found while lexing and parsing, in order
        root: Root expression; may contain synthesized tokens when
            diagnostics are present
        end_of_file_token: Token that closed the parse
    """

    diagnostics: tuple[Diagnostic, ...]
    root: ExpressionSyntax
    end_of_file_token: Token

    @staticmethod
    def parse(text: str) -> SyntaxTree:
        """Parse source text into a syntax tree."""
        from arith.syntax.parser import Parser

        return Parser(text).parse()

    @staticmethod
    def parse_tokens(text: str) -> list[Token]:
        """Lex source text and return every token before end-of-file."""
        return [t for t in Lexer(text) if t.kind != SyntaxKind.END_OF_FILE]
