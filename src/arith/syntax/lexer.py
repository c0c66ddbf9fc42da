"""
Lexer for the arith expression language.

Turns source text into tokens one call at a time. Problems are reported
into the shared DiagnosticBag; the lexer itself never raises.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from arith.syntax.diagnostics import DiagnosticBag
from arith.syntax.tokens import SyntaxKind, TextSpan, Token

logger = logging.getLogger(__name__)

INT32_MAX = 2**31 - 1

_SINGLE_CHAR_KINDS: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS,
    "-": SyntaxKind.MINUS,
    "*": SyntaxKind.ASTERISK,
    "/": SyntaxKind.SLASH,
    "(": SyntaxKind.OPEN_PARENTHESIS,
    ")": SyntaxKind.CLOSE_PARENTHESIS,
}


class Lexer:
    """
    On-demand tokenizer over a source string.

    Once the source is exhausted every call to ``next_token`` returns an
    end-of-file token positioned at ``len(source)``.
    """

    def __init__(self, text: str, diagnostics: DiagnosticBag | None = None):
        """
        Initialize lexer.

        Args:
            text: Source text to tokenize
            diagnostics: Bag to report problems into (a private one if omitted)
        """
        self.text = text
        self.pos = 0
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticBag()

    def current_char(self) -> str | None:
        """Get current character or None if at end."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def next_token(self) -> Token:
        """Scan and return the next token."""
        current = self.current_char()
        if current is None:
            return Token(kind=SyntaxKind.END_OF_FILE, position=len(self.text), text="")

        start = self.pos

        if current.isspace():
            self._skip_while(str.isspace)
            return Token(kind=SyntaxKind.WHITESPACE, position=start, text=self.text[start : self.pos])

        if current.isdecimal():
            return self._read_number()

        kind = _SINGLE_CHAR_KINDS.get(current)
        if kind is not None:
            self.pos += 1
            return Token(kind=kind, position=start, text=current)

        self.pos += 1
        self.diagnostics.report_bad_character(start, current)
        return Token(kind=SyntaxKind.BAD, position=start, text=current)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first end-of-file token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == SyntaxKind.END_OF_FILE:
                return

    def _skip_while(self, predicate: Callable[[str], bool]) -> None:
        while (current := self.current_char()) is not None and predicate(current):
            self.pos += 1

    def _read_number(self) -> Token:
        start = self.pos
        self._skip_while(str.isdecimal)
        text = self.text[start : self.pos]

        # int() rejects very long digit runs; compare widths first.
        significant = text.lstrip("0") or "0"
        value = int(significant) if len(significant) <= len(str(INT32_MAX)) else None
        if value is None or value > INT32_MAX:
            logger.debug("Number literal %s out of range at %d", text, start)
            self.diagnostics.report_invalid_number(TextSpan.from_bounds(start, self.pos), text)
            return Token(kind=SyntaxKind.BAD, position=start, text=text)

        return Token(kind=SyntaxKind.NUMBER, position=start, text=text, value=value)
