"""
Diagnostics collected while lexing and parsing.

A ``DiagnosticBag`` is created per parse and shared by the parser with
its lexer. Entries are appended in the order problems are found and
never removed.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from arith.syntax.tokens import SyntaxKind, TextSpan


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem in the source text."""

    span: TextSpan
    message: str

    def __str__(self) -> str:
        return self.message


class DiagnosticBag:
    """Append-only list of diagnostics for one parse."""

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)

    def __bool__(self) -> bool:
        return bool(self._diagnostics)

    def extend(self, other: DiagnosticBag) -> None:
        self._diagnostics.extend(other._diagnostics)

    def freeze(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def _report(self, span: TextSpan, message: str) -> None:
        self._diagnostics.append(Diagnostic(span, message))

    def report_bad_character(self, position: int, character: str) -> None:
        self._report(TextSpan(position, 1), f"bad character input: `{character}`")

    def report_invalid_number(self, span: TextSpan, text: str) -> None:
        self._report(span, f"the number {text} is not a valid 32-bit integer")

    def report_nesting_too_deep(self, span: TextSpan, limit: int) -> None:
        self._report(span, f"expression nested too deeply (more than {limit} parentheses)")

    def report_unexpected_token(
        self, span: TextSpan, actual: SyntaxKind, expected: SyntaxKind
    ) -> None:
        self._report(span, f"unexpected token <{actual}>, expected <{expected}>")
