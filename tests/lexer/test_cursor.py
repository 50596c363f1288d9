# Copyright 2026 Kindlex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the token cursor and stream validation."""

import pytest

from kindlex.diagnostic.syntax import Position, Span, SyntaxDiagnostic
from kindlex.lexer.cursor import Located, ParseError, TokenCursor, TokenStreamError, validate_stream
from kindlex.lexer.tokens import ErrorToken, LowerIdToken, StrToken, SymbolToken, Token, TokenKind, UpperIdToken

# ###############
# Test Helpers
# ###############

_LPAR = SymbolToken(kind=TokenKind.LPAR)
_RPAR = SymbolToken(kind=TokenKind.RPAR)
_COLON = SymbolToken(kind=TokenKind.COLON)
_EOF = SymbolToken(kind=TokenKind.EOF)


def _span(line: int, column: int, length: int = 1) -> Span:
    return Span(start=Position(line=line, column=column), end=Position(line=line, column=column + length))


def _cursor(*tokens: Token) -> TokenCursor:
    """Build a cursor over *tokens*, placing each on line 1 in sequence."""
    return TokenCursor(Located(token=tok, span=_span(1, index + 1)) for index, tok in enumerate(tokens))


# ###############
# Stream Validation
# ###############


class TestValidateStream:
    def test_single_eof_is_valid(self) -> None:
        validate_stream([_EOF])

    def test_eof_last_is_valid(self) -> None:
        validate_stream([_LPAR, LowerIdToken(name="x"), _RPAR, _EOF])

    def test_empty_stream_rejected(self) -> None:
        with pytest.raises(TokenStreamError, match="empty"):
            validate_stream([])

    def test_missing_eof_rejected(self) -> None:
        with pytest.raises(TokenStreamError, match=r"ends with '\)'"):
            validate_stream([_LPAR, _RPAR])

    def test_token_after_eof_rejected(self) -> None:
        with pytest.raises(TokenStreamError, match="position 1"):
            validate_stream([_LPAR, _EOF, _RPAR])

    def test_double_eof_rejected(self) -> None:
        with pytest.raises(TokenStreamError):
            validate_stream([_EOF, _EOF])

    def test_cursor_validates_on_construction(self) -> None:
        with pytest.raises(TokenStreamError):
            TokenCursor([Located(token=_LPAR)])


# ###############
# Navigation
# ###############


class TestNavigation:
    def test_current_is_first_token(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert cursor.current.token == _LPAR

    def test_advance_returns_consumed_item(self) -> None:
        cursor = _cursor(_LPAR, _RPAR, _EOF)
        assert cursor.advance().token == _LPAR
        assert cursor.current.token == _RPAR

    def test_advance_stops_at_eof(self) -> None:
        cursor = _cursor(_EOF)
        assert cursor.advance().token.is_eof()
        assert cursor.advance().token.is_eof()
        assert cursor.at_end()

    def test_peek_does_not_consume(self) -> None:
        cursor = _cursor(_LPAR, _RPAR, _EOF)
        assert cursor.peek().token == _RPAR
        assert cursor.current.token == _LPAR

    def test_peek_zero_is_current(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert cursor.peek(0) is cursor.current

    def test_peek_clamps_to_eof(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert cursor.peek(10).token.is_eof()

    def test_at_end(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert not cursor.at_end()
        cursor.advance()
        assert cursor.at_end()

    def test_spans_are_kept(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert cursor.current.span == _span(1, 1)


# ###############
# Matching
# ###############


class TestMatching:
    def test_check_uses_kind_only(self) -> None:
        cursor = _cursor(LowerIdToken(name="value"), _EOF)
        assert cursor.check(LowerIdToken(name="anything"))
        assert not cursor.check(UpperIdToken(main="Value"))

    def test_check_any_of(self) -> None:
        cursor = _cursor(_RPAR, _EOF)
        assert cursor.check(_COLON, _RPAR)

    def test_check_does_not_consume(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        cursor.check(_LPAR)
        assert cursor.current.token == _LPAR

    def test_eat_consumes_match(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        item = cursor.eat(_LPAR)
        assert item is not None
        assert item.token == _LPAR
        assert cursor.at_end()

    def test_eat_returns_none_on_mismatch(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        assert cursor.eat(_RPAR) is None
        assert cursor.current.token == _LPAR

    def test_expect_returns_payload_of_actual_token(self) -> None:
        cursor = _cursor(StrToken(value="hello"), _EOF)
        item = cursor.expect(StrToken(value=""))
        assert item.token == StrToken(value="hello")

    def test_expect_mismatch_raises_parse_error(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        with pytest.raises(ParseError) as exc_info:
            cursor.expect(_COLON)
        diagnostic = exc_info.value.diagnostic
        assert diagnostic.message == "Unexpected token '(', expected ':'"
        assert diagnostic.span == _span(1, 1)
        assert str(exc_info.value) == "Line 1, column 1: Unexpected token '(', expected ':'"

    def test_expect_mismatch_lists_alternatives(self) -> None:
        cursor = _cursor(_EOF)
        with pytest.raises(ParseError, match="Unexpected token 'End of file', expected '\\)' or ':'"):
            cursor.expect(_RPAR, _COLON)

    def test_expect_does_not_consume_on_mismatch(self) -> None:
        cursor = _cursor(_LPAR, _EOF)
        with pytest.raises(ParseError):
            cursor.expect(_RPAR)
        assert cursor.current.token == _LPAR


# ###############
# Error Recovery
# ###############


class TestDiagnostics:
    def test_no_diagnostics_initially(self) -> None:
        assert _cursor(_EOF).diagnostics == []

    def test_consuming_error_token_records_diagnostic(self) -> None:
        diagnostic = SyntaxDiagnostic(message="unfinished char", span=_span(1, 1))
        cursor = _cursor(ErrorToken(diagnostic=diagnostic), _EOF)
        cursor.advance()
        assert cursor.diagnostics == [diagnostic]

    def test_peeking_error_token_records_nothing(self) -> None:
        cursor = _cursor(_LPAR, ErrorToken(diagnostic=SyntaxDiagnostic(message="bad")), _EOF)
        cursor.peek()
        assert cursor.diagnostics == []

    def test_multiple_errors_accumulate(self) -> None:
        cursor = _cursor(
            ErrorToken(diagnostic=SyntaxDiagnostic(message="first")),
            _LPAR,
            ErrorToken(diagnostic=SyntaxDiagnostic(message="second")),
            _EOF,
        )
        while not cursor.at_end():
            cursor.advance()
        assert [d.message for d in cursor.diagnostics] == ["first", "second"]

    def test_recorded_diagnostic_is_not_shared_with_token(self) -> None:
        tok = ErrorToken(diagnostic=SyntaxDiagnostic(message="bad"))
        cursor = _cursor(tok, _EOF)
        cursor.advance()
        assert cursor.diagnostics[0] == tok.diagnostic
        assert cursor.diagnostics[0] is not tok.diagnostic

    def test_diagnostics_returns_a_copy_of_the_list(self) -> None:
        cursor = _cursor(ErrorToken(diagnostic=SyntaxDiagnostic(message="bad")), _EOF)
        cursor.advance()
        cursor.diagnostics.clear()
        assert len(cursor.diagnostics) == 1
