"""Token-shape scanner.

Classifies the unconsumed prefix of a read buffer as one token, or reports
that the prefix cannot be decided until more input arrives.

Recognition order (first match wins):
1. Whitespace run
2. Unquoted run (plain bytes and escape units)
3. Complete quoted run, "..." or '...'
4. Not at EOF: incomplete quoted run or lone backslash -> NEED_MORE
5. Empty remainder -> END at EOF, NEED_MORE otherwise
6. Anything else -> FAILED

A token that runs up to the buffer edge is still reported as complete.
The parser glues adjacent whitespace runs and adjacent unquoted runs the
same way it would glue one long run, so forcing a refill there would only
cost a read.

Thread Safety:
Scanner holds no per-call state and may be shared freely.

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from argline.errors import TokenizeError
from argline.lexer.patterns import (
    INCOMPLETE_RUN,
    QUOTED_RUN,
    UNQUOTED_RUN,
    WHITESPACE_RUN,
)
from argline.tokens import Token, TokenKind


class ScanStatus(Enum):
    """Outcome of one scan step."""

    TOKEN = auto()  # token found, advance past it
    NEED_MORE = auto()  # undecidable until more input arrives
    END = auto()  # clean end of input
    FAILED = auto()  # remainder matches no token shape


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tagged result of Scanner.scan.

    Attributes:
        status: Which outcome this is
        advance: Bytes to move the read cursor past (TOKEN and FAILED only)
        token: The classified token (TOKEN only)
        error: The failure to raise (FAILED only)

    """

    status: ScanStatus
    advance: int = 0
    token: Token | None = None
    error: TokenizeError | None = None


NEED_MORE = ScanResult(ScanStatus.NEED_MORE)
END = ScanResult(ScanStatus.END)

_SHAPES = (
    (TokenKind.WHITESPACE, WHITESPACE_RUN),
    (TokenKind.UNQUOTED, UNQUOTED_RUN),
    (TokenKind.QUOTED, QUOTED_RUN),
)


class Scanner:
    """Classifies the next token of a partially filled buffer.

    Usage:
            >>> scanner = Scanner()
            >>> scanner.scan(b'"a b" c', 0, at_eof=True)
            ScanResult(status=<ScanStatus.TOKEN: 1>, advance=5, ...)
            >>> scanner.scan(b'"a b', 0, at_eof=False).status
            <ScanStatus.NEED_MORE: 2>

    """

    __slots__ = ("_encoding",)

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize scanner.

        Args:
            encoding: Codec used to render the remainder in error messages
        """
        self._encoding = encoding

    def scan(
        self,
        data: bytes | bytearray,
        pos: int = 0,
        at_eof: bool = False,
        *,
        base: int = 0,
    ) -> ScanResult:
        """Classify the token starting at data[pos].

        Args:
            data: Buffer contents; only data[pos:] is examined
            pos: Start of the unconsumed region
            at_eof: True when no more bytes can be appended to data
            base: Absolute input offset of data[0], used for token offsets

        Returns:
            ScanResult describing the outcome. Never raises for bad input;
            a malformed remainder comes back as a FAILED result.
        """
        end = len(data)
        if pos >= end:
            return END if at_eof else NEED_MORE

        for kind, pattern in _SHAPES:
            match = pattern.match(data, pos)
            if match is not None:
                stop = match.end()
                token = Token(kind, bytes(data[pos:stop]), base + pos)
                return ScanResult(ScanStatus.TOKEN, stop - pos, token)

        if not at_eof and INCOMPLETE_RUN.fullmatch(data, pos) is not None:
            return NEED_MORE

        error = TokenizeError(data[pos:], offset=base + pos, encoding=self._encoding)
        return ScanResult(ScanStatus.FAILED, end - pos, error=error)
