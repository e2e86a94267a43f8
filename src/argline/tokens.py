"""Token and TokenKind definitions for the argline scanner.

The scanner produces classified Token values that the parser consumes
one at a time. A token is never retained past the parser iteration that
handles it.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    """Token shapes recognized by the scanner."""

    WHITESPACE = auto()  # run of [ \t\n\r\f\v]
    UNQUOTED = auto()  # abc, a\ b
    QUOTED = auto()  # "a b" or 'a b', delimiters included


@dataclass(frozen=True, slots=True)
class Token:
    """A classified span of input.

    Attributes:
        kind: The token shape (from TokenKind enum)
        value: Raw bytes from the input, including quote delimiters
            for QUOTED tokens
        offset: Absolute byte offset of the token in the input stream

    """

    kind: TokenKind
    value: bytes
    offset: int = 0

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + b"..."
        return f"Token({self.kind.name}, {val!r}, @{self.offset})"

    @property
    def end_offset(self) -> int:
        """Absolute offset one past the last byte of the token."""
        return self.offset + len(self.value)

    @property
    def quote(self) -> bytes:
        """Delimiting quote of a QUOTED token, empty for other kinds."""
        if self.kind is TokenKind.QUOTED:
            return self.value[:1]
        return b""
