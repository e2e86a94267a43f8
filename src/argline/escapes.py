"""Quote stripping and escape interpretation for scanned tokens.

Unquoted runs lose the backslash of every escape unit, so `\\l` reads
as `l` even though `l` means nothing special. Double-quoted spans only
interpret `\\\\` and `\\"`; every other backslash sequence is kept as
written. Single-quoted spans are taken literally.
"""

from __future__ import annotations

from argline.lexer.patterns import ESCAPE_ANY, ESCAPE_DOUBLE_QUOTED
from argline.tokens import Token, TokenKind


def unescape(raw: bytes) -> bytes:
    """Replace each escape unit in an unquoted run with its second byte.

    Example:
        >>> unescape(rb'\\"a\\\\b\\l')
        b'"a\\\\bl'
    """
    return ESCAPE_ANY.sub(rb"\1", raw)


def unquote(raw: bytes) -> bytes:
    """Strip the delimiters of a quoted run and interpret its escapes.

    Args:
        raw: Quoted span including both delimiting quote characters

    Returns:
        Interior bytes; \\\\ and \\" unescaped when double-quoted

    """
    quote = raw[:1]
    inner = raw[1:-1]
    if quote == b'"':
        return ESCAPE_DOUBLE_QUOTED.sub(rb"\1", inner)
    return inner


def expose(token: Token) -> bytes:
    """Return the word fragment a token contributes.

    Whitespace contributes nothing; it only ends the current word.
    """
    if token.kind is TokenKind.UNQUOTED:
        return unescape(token.value)
    if token.kind is TokenKind.QUOTED:
        return unquote(token.value)
    return b""
