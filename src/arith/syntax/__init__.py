"""
Lexer, parser and syntax tree model for arith expressions.

Usage:
    from arith.syntax import SyntaxTree

    tree = SyntaxTree.parse("(2 + 3) * 4")
    tree.diagnostics  # ()
"""

from arith.syntax.diagnostics import Diagnostic, DiagnosticBag
from arith.syntax.lexer import Lexer
from arith.syntax.nodes import (
    BinaryExpressionSyntax,
    ExpressionSyntax,
    LiteralExpressionSyntax,
    ParenthesizedExpressionSyntax,
)
from arith.syntax.parser import Parser
from arith.syntax.printer import render_diagnostic, render_tree
from arith.syntax.tokens import SyntaxKind, SyntaxNode, TextSpan, Token
from arith.syntax.tree import SyntaxTree

__all__ = [
    "BinaryExpressionSyntax",
    "Diagnostic",
    "DiagnosticBag",
    "ExpressionSyntax",
    "Lexer",
    "LiteralExpressionSyntax",
    "ParenthesizedExpressionSyntax",
    "Parser",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxTree",
    "TextSpan",
    "Token",
    "render_diagnostic",
    "render_tree",
]
