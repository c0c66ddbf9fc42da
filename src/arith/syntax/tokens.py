"""
Token model for the arith expression language.

A token is a frozen record of its kind, source position, raw text and,
for number tokens, the parsed integer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict


class SyntaxKind(StrEnum):
    """Kinds of tokens and expression nodes."""

    # Tokens
    NUMBER = auto()
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    OPEN_PARENTHESIS = auto()
    CLOSE_PARENTHESIS = auto()
    WHITESPACE = auto()
    BAD = auto()
    END_OF_FILE = auto()

    # Expressions
    LITERAL_EXPRESSION = auto()
    PARENTHESIZED_EXPRESSION = auto()
    BINARY_EXPRESSION = auto()


@dataclass(frozen=True)
class TextSpan:
    """A half-open range ``[start, end)`` of source positions."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    @classmethod
    def from_bounds(cls, start: int, end: int) -> TextSpan:
        return cls(start, end - start)


class SyntaxNode(BaseModel):
    """
    Base for everything that appears in a syntax tree.

    Subclasses expose ``kind`` and return their ordered children from
    ``children()``. Concatenating the leaf tokens of a node, left to right,
    reproduces the non-whitespace tokens it was parsed from.
    """

    model_config = ConfigDict(frozen=True)

    def children(self) -> list[SyntaxNode]:
        return []

    @property
    def span(self) -> TextSpan:
        first = last = self
        while not isinstance(first, Token):
            first = first.children()[0]
        while not isinstance(last, Token):
            last = last.children()[-1]
        return TextSpan.from_bounds(first.span.start, last.span.end)

    def tokens(self) -> list[Token]:
        """Leaf tokens of this node in source order."""
        result: list[Token] = []
        stack: list[SyntaxNode] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Token):
                result.append(node)
            else:
                stack.extend(reversed(node.children()))
        return result


class Token(SyntaxNode):
    """
    A single token produced by the lexer.

    ``is_missing`` marks tokens the parser synthesized to repair the tree;
    they have empty text.
    """

    kind: SyntaxKind
    position: int
    text: str
    value: int | None = None
    is_missing: bool = False

    @property
    def span(self) -> TextSpan:
        return TextSpan(self.position, len(self.text))

    def __str__(self) -> str:
        rendered = f"{self.kind}@{self.position} {self.text!r}"
        if self.value is not None:
            rendered += f" = {self.value}"
        return rendered
