# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lookahead cursor over a scanned token stream.

A stream is valid when it ends with exactly one end-of-input token. The
cursor compares tokens by kind only, so parsers can ask for "an identifier"
without caring which one.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from kindlex.diagnostic.syntax import Span, SyntaxDiagnostic
from kindlex.lexer.tokens import ErrorToken, Token

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Located:
    """A token together with the source range it was scanned from.

    Attributes:
        token: The scanned token.
        span: Source range of the lexeme, or None when unknown.
    """

    token: Token
    span: Span | None = None


class TokenStreamError(Exception):
    """Raised when a token sequence does not end in a single end-of-input token."""


class ParseError(Exception):
    """Raised when the current token does not match what the parser expects.

    Attributes:
        diagnostic: The syntax diagnostic describing the mismatch.
    """

    def __init__(self, diagnostic: SyntaxDiagnostic) -> None:
        super().__init__(diagnostic.format())
        self.diagnostic = diagnostic


def validate_stream(tokens: Sequence[Token]) -> None:
    """Check that *tokens* is terminated by exactly one end-of-input token.

    Raises:
        TokenStreamError: If the stream is empty, lacks a final end-of-input
            token, or has an end-of-input token before the last position.
    """
    if not tokens:
        raise TokenStreamError("Token stream is empty; expected a final end-of-input token")
    for index, tok in enumerate(tokens[:-1]):
        if tok.is_eof():
            raise TokenStreamError(
                f"End-of-input token at position {index} is followed by {len(tokens) - index - 1} more token(s)"
            )
    if not tokens[-1].is_eof():
        raise TokenStreamError(f"Token stream ends with '{tokens[-1]}' instead of an end-of-input token")


class TokenCursor:
    """Sequential reader over a validated token stream."""

    def __init__(self, items: Iterable[Located]) -> None:
        self._items = list(items)
        validate_stream([item.token for item in self._items])
        self._pos = 0
        self._diagnostics: list[SyntaxDiagnostic] = []

    @property
    def current(self) -> Located:
        """The current (un-consumed) item."""
        return self._items[self._pos]

    @property
    def diagnostics(self) -> list[SyntaxDiagnostic]:
        """Diagnostics taken from the error tokens consumed so far."""
        return list(self._diagnostics)

    def peek(self, offset: int = 1) -> Located:
        """Return the item *offset* positions ahead, stopping at end of input."""
        index = min(self._pos + offset, len(self._items) - 1)
        return self._items[max(index, 0)]

    def at_end(self) -> bool:
        """Return True if the current token is the end-of-input token."""
        return self.current.token.is_eof()

    def advance(self) -> Located:
        """Consume and return the current item, stopping at end of input."""
        item = self._items[self._pos]
        if isinstance(item.token, ErrorToken):
            self._diagnostics.append(item.token.diagnostic.model_copy(deep=True))
        if self._pos < len(self._items) - 1:
            self._pos += 1
        return item

    def check(self, *expected: Token) -> bool:
        """Return True if the current token is of the same kind as any of *expected*."""
        tok = self.current.token
        return any(tok.same_variant(candidate) for candidate in expected)

    def eat(self, *expected: Token) -> Located | None:
        """Consume the current item if it matches one of *expected*, else return None."""
        if self.check(*expected):
            return self.advance()
        return None

    def expect(self, *expected: Token) -> Located:
        """Consume the current item if it matches one of *expected*.

        Raises:
            ParseError: If the current token is of a different kind.
        """
        if self.check(*expected):
            return self.advance()
        item = self.current
        raise ParseError(SyntaxDiagnostic.unexpected_token(item.token, expected, item.span))
