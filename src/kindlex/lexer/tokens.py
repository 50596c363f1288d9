# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Token vocabulary shared by the Kind scanner, parser and diagnostics.

Every token is an immutable value tagged with a :class:`TokenKind`. Tokens
without payload are :class:`SymbolToken` instances; every other variant has
its own class. :data:`Token` is the closed union of all of them.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, ConfigDict, Field, field_validator

from kindlex.diagnostic.syntax import SyntaxDiagnostic

# ###############
# Public Interface
# ###############


class TokenKind(enum.Enum):
    """All token kinds of the Kind language.

    Payload-free kinds have their canonical rendering as value.
    """

    # Delimiters
    LPAR = "("
    RPAR = ")"
    LBRACKET = "["
    RBRACKET = "]"
    LBRACE = "{"
    RBRACE = "}"

    # Punctuation
    EQ = "="
    COLON = ":"
    SEMI = ";"
    FAT_ARROW = "=>"
    DOLLAR = "$"
    COMMA = ","
    RIGHT_ARROW = "->"
    DOT_DOT = ".."
    DOT = "."
    TILDE = "~"
    COLON_COLON = "::"

    HELP = "HELP"
    LOWER_ID = "LOWER_ID"
    UPPER_ID = "UPPER_ID"

    # Strong keywords, kept apart from identifiers for better error messages
    RETURN = "return"
    ASK = "ask"
    WITH = "with"

    # Literals
    CHAR = "CHAR"
    STR = "STR"
    NUM60 = "NUM60"
    NUM120 = "NUM120"
    NAT = "NAT"
    FLOAT = "FLOAT"
    HOLE = "_"

    # Operators
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    PERCENT = "%"
    AMPERSAND = "&"
    BAR = "|"
    HAT = "^"
    GREATER_GREATER = ">>"
    LESS_LESS = "<<"
    LESS = "<"
    LESS_EQ = "<="
    EQ_EQ = "=="
    GREATER_EQ = ">="
    GREATER = ">"
    BANG_EQ = "!="
    BANG = "!"

    HASH_HASH = "##"
    HASH = "#"

    COMMENT = "COMMENT"

    EOF = "End of file"

    # Stands in for an invalid lexeme so scanning can continue
    ERROR = "ERROR"


class _TokenBase(BaseModel):
    """Behaviour shared by every token variant."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: TokenKind

    def same_variant(self, other: Token) -> bool:
        """Return True if both tokens are of the same kind, ignoring payload."""
        return self.kind is other.kind

    def is_lower_id(self) -> bool:
        return self.kind is TokenKind.LOWER_ID

    def is_upper_id(self) -> bool:
        return self.kind is TokenKind.UPPER_ID

    def is_str(self) -> bool:
        return self.kind is TokenKind.STR

    def is_num60(self) -> bool:
        return self.kind is TokenKind.NUM60

    def is_num120(self) -> bool:
        return self.kind is TokenKind.NUM120

    def is_char(self) -> bool:
        return self.kind is TokenKind.CHAR

    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    def is_doc(self) -> bool:
        """Return True for documentation comments only."""
        return isinstance(self, CommentToken) and self.doc

    def duplicate(self) -> Token:
        """Return a deep copy that shares no owned text or diagnostic."""
        return self.model_copy(deep=True)  # type: ignore[return-value]

    def __str__(self) -> str:
        return render(self)  # type: ignore[arg-type]


class SymbolToken(_TokenBase):
    """A delimiter, punctuation, keyword, operator, hole or end-of-input token."""

    @field_validator("kind")
    @classmethod
    def _reject_payload_kind(cls, value: TokenKind) -> TokenKind:
        if value in PAYLOAD_KINDS:
            raise ValueError(f"{value.name} tokens carry a payload and cannot be symbols")
        return value


class HelpToken(_TokenBase):
    """An introspection request such as ``?name``."""

    kind: Literal[TokenKind.HELP] = TokenKind.HELP
    text: str


class LowerIdToken(_TokenBase):
    """A lower-case identifier."""

    kind: Literal[TokenKind.LOWER_ID] = TokenKind.LOWER_ID
    name: str = Field(min_length=1)


class UpperIdToken(_TokenBase):
    """An upper-case identifier, optionally followed by an auxiliary name.

    Attributes:
        main: The main name.
        aux: The auxiliary name rendered after a ``/``, or None.
    """

    kind: Literal[TokenKind.UPPER_ID] = TokenKind.UPPER_ID
    main: str = Field(min_length=1)
    aux: Annotated[str, Field(min_length=1)] | None = None


class CharToken(_TokenBase):
    kind: Literal[TokenKind.CHAR] = TokenKind.CHAR
    value: str = Field(min_length=1, max_length=1)


class StrToken(_TokenBase):
    kind: Literal[TokenKind.STR] = TokenKind.STR
    value: str


class Num60Token(_TokenBase):
    kind: Literal[TokenKind.NUM60] = TokenKind.NUM60
    value: int = Field(ge=0, lt=1 << 60)


class Num120Token(_TokenBase):
    kind: Literal[TokenKind.NUM120] = TokenKind.NUM120
    value: int = Field(ge=0, lt=1 << 128)


class NatToken(_TokenBase):
    """An arbitrary-precision natural number literal."""

    kind: Literal[TokenKind.NAT] = TokenKind.NAT
    value: int = Field(ge=0, lt=1 << 128)


class FloatToken(_TokenBase):
    """A float literal kept as its integer and fractional digit runs.

    The two parts are never recombined, so the source digits survive exactly.
    """

    kind: Literal[TokenKind.FLOAT] = TokenKind.FLOAT
    start: int = Field(ge=0, lt=1 << 64)
    end: int = Field(ge=0, lt=1 << 64)


class CommentToken(_TokenBase):
    """A comment; ``doc`` marks documentation comments."""

    kind: Literal[TokenKind.COMMENT] = TokenKind.COMMENT
    doc: bool
    text: str


class ErrorToken(_TokenBase):
    """An invalid lexeme, carrying the diagnostic that describes it.

    The token keeps its own copy of the diagnostic it was built with.
    """

    kind: Literal[TokenKind.ERROR] = TokenKind.ERROR
    diagnostic: SyntaxDiagnostic

    @field_validator("diagnostic")
    @classmethod
    def _own_diagnostic(cls, value: SyntaxDiagnostic) -> SyntaxDiagnostic:
        return value.model_copy(deep=True)


Token = (
    SymbolToken
    | HelpToken
    | LowerIdToken
    | UpperIdToken
    | CharToken
    | StrToken
    | Num60Token
    | Num120Token
    | NatToken
    | FloatToken
    | CommentToken
    | ErrorToken
)

# Payload kinds mapped to their token class; every other kind is a SymbolToken.
TOKEN_CLASSES: dict[TokenKind, type[Token]] = {
    TokenKind.HELP: HelpToken,
    TokenKind.LOWER_ID: LowerIdToken,
    TokenKind.UPPER_ID: UpperIdToken,
    TokenKind.CHAR: CharToken,
    TokenKind.STR: StrToken,
    TokenKind.NUM60: Num60Token,
    TokenKind.NUM120: Num120Token,
    TokenKind.NAT: NatToken,
    TokenKind.FLOAT: FloatToken,
    TokenKind.COMMENT: CommentToken,
    TokenKind.ERROR: ErrorToken,
}

PAYLOAD_KINDS: frozenset[TokenKind] = frozenset(TOKEN_CLASSES)


def render(token: Token) -> str:
    """Return the canonical text of a token as shown in diagnostics.

    Symbols reproduce their source spelling. An error token renders as a
    fixed placeholder; its diagnostic is reported separately.
    """
    if isinstance(token, SymbolToken):
        return token.kind.value
    if isinstance(token, HelpToken):
        return f"?{token.text}"
    if isinstance(token, LowerIdToken):
        return token.name
    if isinstance(token, UpperIdToken):
        if token.aux is None:
            return token.main
        return f"{token.main}/{token.aux}"
    if isinstance(token, CharToken):
        return f"'{token.value}'"
    if isinstance(token, StrToken):
        return f'"{token.value}"'
    if isinstance(token, Num60Token):
        return str(token.value)
    if isinstance(token, Num120Token):
        return f"{token.value}u120"
    if isinstance(token, NatToken):
        return f"{token.value}n"
    if isinstance(token, FloatToken):
        return f"{token.start}.{token.end}"
    if isinstance(token, CommentToken):
        if token.doc:
            return f"docstring '{token.text}'"
        return f"comment '{token.text}'"
    if isinstance(token, ErrorToken):
        return "ERROR"
    assert_never(token)
