"""Tests for quote stripping and escape interpretation."""

import pytest

from argline.escapes import expose, unescape, unquote
from argline.tokens import Token, TokenKind


class TestUnescape:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            (b"abc", b"abc"),
            (b"\\\\", b"\\"),
            (b"\\l", b"l"),
            (b"\\ ", b" "),
            (b'\\"a\\\\b\\\'c\\l', b"\"a\\b'cl"),
            (b"\\\\\\\\", b"\\\\"),
            (b"a\\\nb", b"a\nb"),
        ],
    )
    def test_every_escape_unit_collapses(self, raw: bytes, expected: bytes) -> None:
        assert unescape(raw) == expected


class TestUnquote:
    def test_double_quoted_interprets_two_escapes(self) -> None:
        assert unquote(b'"ab\\\\c\\""') == b'ab\\c"'

    def test_double_quoted_keeps_other_escapes(self) -> None:
        assert unquote(b'"a\\nb\\l"') == b"a\\nb\\l"

    def test_single_quoted_is_literal(self) -> None:
        assert unquote(b"'a\\\"b\\\\c'") == b'a\\"b\\\\c'

    @pytest.mark.parametrize("raw", [b'""', b"''"])
    def test_empty(self, raw: bytes) -> None:
        assert unquote(raw) == b""


class TestExpose:
    def test_whitespace_contributes_nothing(self) -> None:
        assert expose(Token(TokenKind.WHITESPACE, b"  \t")) == b""

    def test_unquoted(self) -> None:
        assert expose(Token(TokenKind.UNQUOTED, b"a\\ b")) == b"a b"

    def test_quoted(self) -> None:
        assert expose(Token(TokenKind.QUOTED, b"'a b'")) == b"a b"
