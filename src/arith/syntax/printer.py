"""Text renderings of syntax trees and diagnostics."""

from __future__ import annotations

from arith.syntax.diagnostics import Diagnostic
from arith.syntax.tokens import SyntaxNode, Token


def render_tree(node: SyntaxNode) -> str:
    """Render a node and its descendants as a box-drawing tree."""
    lines: list[str] = []
    stack: list[tuple[SyntaxNode, str, bool]] = [(node, "", True)]
    while stack:
        current, indent, is_last = stack.pop()
        marker = "└──" if is_last else "├──"
        label = str(current.kind)
        if isinstance(current, Token) and current.value is not None:
            label += f" {current.value}"
        lines.append(f"{indent}{marker}{label}")

        child_indent = indent + ("    " if is_last else "│   ")
        children = current.children()
        for i in reversed(range(len(children))):
            stack.append((children[i], child_indent, i == len(children) - 1))
    return "\n".join(lines)


def render_diagnostic(text: str, diagnostic: Diagnostic, margin: int = 4) -> str:
    """
    Render a diagnostic with the source line and a caret marker.

    Example:
        bad character input: `$`
            2+$3
              ^
    """
    span = diagnostic.span
    pad = " " * margin
    marker = " " * (margin + span.start) + "^" * max(span.length, 1)
    return f"{diagnostic.message}\n{pad}{text}\n{marker}"
