"""Exception classes for argline.

Provides standardized exceptions for error handling throughout argline.

Read failures raised by a byte source are never wrapped: they propagate
out of tokenize() unchanged.
"""

from __future__ import annotations


class ArglineError(Exception):
    """Base exception for all argline errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidSourceError(ArglineError):
    """No byte source was supplied to the parser."""

    def __init__(self, message: str = "nil source passed to parser") -> None:
        super().__init__(message)


class TokenizeError(ArglineError):
    """Input that matches none of the recognized token shapes.

    Raised at end of input for an unterminated quote, a dangling escape
    character, or any other remainder the scanner cannot classify.
    """

    def __init__(
        self,
        remainder: bytes,
        offset: int | None = None,
        encoding: str = "utf-8",
    ) -> None:
        """Initialize tokenize error with the unparseable remainder.

        Args:
            remainder: Raw bytes that could not be tokenized
            offset: Absolute byte offset of the remainder in the input (optional)
            encoding: Encoding used to render the remainder in the message
        """
        self.remainder = bytes(remainder)
        self.offset = offset

        text = self.remainder.decode(encoding, errors="backslashreplace")
        super().__init__(f"unable to tokenize: '{text}'")


class SourceNotReadyError(ArglineError):
    """The source returned None from read(): no data yet, not exhaustion.

    Non-blocking raw streams do this. Only b"" or "" ends the input, so the
    call stops here rather than returning words cut short.
    """

    def __init__(self, offset: int) -> None:
        self.offset = offset
        super().__init__(f"source has no data available at offset {offset}")


class TokenTooLongError(ArglineError):
    """A single undetermined token outgrew the configured buffer limit."""

    def __init__(self, limit: int, size: int) -> None:
        """Initialize with the configured limit and the pending size.

        Args:
            limit: Configured max_token_size
            size: Unconsumed bytes held when the limit was hit
        """
        self.limit = limit
        self.size = size
        super().__init__(f"token too long: {size} bytes pending, limit is {limit}")
