# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Source positions and the syntax diagnostic record."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from kindlex.lexer.tokens import Token

# ###############
# Public Interface
# ###############


class Position(BaseModel):
    """A 1-based line and column in a source unit."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    line: int = Field(ge=1)
    column: int = Field(ge=1)


class Span(BaseModel):
    """Source range from start to end position."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    start: Position
    end: Position


class SyntaxDiagnostic(BaseModel):
    """A problem found while scanning or parsing.

    Attributes:
        message: Human-readable description of the problem.
        span: Location of the offending text, if known.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    message: str
    span: Span | None = None

    @classmethod
    def unexpected_token(
        cls,
        found: Token,
        expected: Iterable[Token] = (),
        span: Span | None = None,
    ) -> SyntaxDiagnostic:
        """Build the diagnostic for a token the parser did not expect.

        Tokens are embedded through their canonical rendering.
        """
        message = f"Unexpected token '{found}'"
        alternatives = " or ".join(f"'{tok}'" for tok in expected)
        if alternatives:
            message += f", expected {alternatives}"
        return cls(message=message, span=span)

    def format(self) -> str:
        """Return the message prefixed with its start location, when known."""
        if self.span is None:
            return self.message
        start = self.span.start
        return f"Line {start.line}, column {start.column}: {self.message}"
