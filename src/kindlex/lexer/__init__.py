# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token model for the Kind language and helpers built on it."""

from kindlex.lexer.cursor import Located, ParseError, TokenCursor, TokenStreamError, validate_stream
from kindlex.lexer.tokens import (
    CharToken,
    CommentToken,
    ErrorToken,
    FloatToken,
    HelpToken,
    LowerIdToken,
    NatToken,
    Num60Token,
    Num120Token,
    StrToken,
    SymbolToken,
    Token,
    TokenKind,
    UpperIdToken,
    render,
)

__all__ = [
    "CharToken",
    "CommentToken",
    "ErrorToken",
    "FloatToken",
    "HelpToken",
    "Located",
    "LowerIdToken",
    "NatToken",
    "Num60Token",
    "Num120Token",
    "ParseError",
    "StrToken",
    "SymbolToken",
    "Token",
    "TokenCursor",
    "TokenKind",
    "TokenStreamError",
    "UpperIdToken",
    "render",
    "validate_stream",
]
