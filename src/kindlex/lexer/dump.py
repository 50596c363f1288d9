# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""YAML token dumps used as fixtures and snapshot inputs.

A dump is a mapping with a single ``tokens`` list. Each entry names its
``kind`` (a :class:`TokenKind` member name), the payload fields of that
kind, and optionally a ``span``.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from kindlex.diagnostic.syntax import Span
from kindlex.lexer.cursor import Located
from kindlex.lexer.tokens import TOKEN_CLASSES, SymbolToken, Token, TokenKind

# ###############
# Public Interface
# ###############


class TokenDumpError(Exception):
    """Raised when a token dump cannot be read, written, or is invalid."""


def token_to_dict(token: Token) -> dict[str, Any]:
    """Return the dump representation of a single token."""
    payload = token.model_dump(mode="json", exclude={"kind"}, exclude_none=True)
    return {"kind": token.kind.name, **payload}


def token_from_dict(data: object) -> Token:
    """Build a token from its dump representation.

    Raises:
        TokenDumpError: If the kind is missing or unknown, or the payload
            does not fit the kind.
    """
    if not isinstance(data, dict):
        raise TokenDumpError("token entry must be a YAML mapping")
    fields = dict(data)
    raw_kind = fields.pop("kind", None)
    if not isinstance(raw_kind, str):
        raise TokenDumpError("missing required field 'kind'")
    try:
        kind = TokenKind[raw_kind]
    except KeyError:
        raise TokenDumpError(f"unknown token kind '{raw_kind}'") from None

    token_class = TOKEN_CLASSES.get(kind, SymbolToken)
    try:
        return token_class.model_validate({**fields, "kind": kind})
    except ValidationError as exc:
        raise TokenDumpError(f"invalid {raw_kind} token: {exc}") from exc


def dump_tokens(items: list[Located]) -> str:
    """Serialize located tokens to dump YAML."""
    entries = []
    for item in items:
        entry = token_to_dict(item.token)
        if item.span is not None:
            entry["span"] = item.span.model_dump()
        entries.append(entry)
    return yaml.safe_dump({"tokens": entries}, default_flow_style=False, sort_keys=False, allow_unicode=True)


def parse_token_dump(text: str, source_label: str = "<string>") -> list[Located]:
    """Parse dump YAML text into located tokens.

    Stream invariants are not checked here; see :class:`TokenCursor`.

    Raises:
        TokenDumpError: If the YAML is invalid or an entry is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TokenDumpError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict):
        raise TokenDumpError(f"{source_label}: token dump must be a YAML mapping")

    raw_tokens = data.get("tokens", [])
    if not isinstance(raw_tokens, list):
        raise TokenDumpError(f"{source_label}: 'tokens' must be a list")

    return [_parse_entry(entry, index, source_label) for index, entry in enumerate(raw_tokens)]


def load_token_dump(path: Path) -> list[Located]:
    """Load located tokens from a dump file.

    Raises:
        TokenDumpError: If the file cannot be read or its content is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise TokenDumpError(f"Token dump not found: {path}") from None
    except OSError as exc:
        raise TokenDumpError(f"Cannot read token dump '{path}': {exc}") from exc

    return parse_token_dump(text, source_label=str(path))


def save_token_dump(items: list[Located], path: Path) -> None:
    """Write located tokens to a dump file.

    Raises:
        TokenDumpError: If the file cannot be written.
    """
    try:
        path.write_text(dump_tokens(items), encoding="utf-8")
    except OSError as exc:
        raise TokenDumpError(f"Cannot write token dump '{path}': {exc}") from exc


# ################
# Implementation
# ################


def _parse_entry(entry: object, index: int, source_label: str) -> Located:
    """Parse a single entry of the ``tokens`` list."""
    location = f"{source_label}: tokens[{index}]"

    if not isinstance(entry, dict):
        raise TokenDumpError(f"{location} must be a YAML mapping")

    fields = dict(entry)
    raw_span = fields.pop("span", None)
    span = None
    if raw_span is not None:
        try:
            span = Span.model_validate(raw_span)
        except ValidationError as exc:
            raise TokenDumpError(f"{location}: invalid span: {exc}") from exc

    try:
        token = token_from_dict(fields)
    except TokenDumpError as exc:
        raise TokenDumpError(f"{location}: {exc}") from exc
    return Located(token=token, span=span)
