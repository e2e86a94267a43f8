"""Growable read buffer with a single advancing cursor.

The buffer holds every byte read from the source that the parser has not
yet advanced past. Consumed prefixes are dropped only when the buffer is
about to be refilled, and only the unconsumed tail is kept, so bytes of a
token the scanner could not yet decide on are never lost.

Thread Safety:
ReadBuffer instances are single-use. Create one per tokenize call.

"""

from __future__ import annotations

from argline.errors import SourceNotReadyError, TokenTooLongError
from argline.protocols import ByteSource
from argline.utils.logger import get_logger

logger = get_logger(__name__)


class ReadBuffer:
    """Arena-style window over not-yet-consumed input.

    Usage:
            >>> buf = ReadBuffer(io.BytesIO(b"ab cd"), buffer_size=2)
            >>> buf.fill()
            2
            >>> bytes(buf.data[buf.pos:])
            b'ab'
            >>> buf.advance(2)
            >>> buf.offset
            2

    Attributes:
        bytes_read: Total bytes appended from the source
        refills: Number of read() calls issued against the source

    """

    __slots__ = (
        "_source",
        "_data",
        "_pos",
        "_base",  # Absolute offset of _data[0] in the input stream
        "_at_eof",
        "_buffer_size",
        "_max_token_size",
        "_encoding",
        "_errors",
        "bytes_read",
        "refills",
    )

    def __init__(
        self,
        source: ByteSource,
        *,
        buffer_size: int = 4096,
        max_token_size: int = 64 * 1024,
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
    ) -> None:
        """Initialize an empty buffer over source.

        Args:
            source: Object with a read(size) method
            buffer_size: Minimum number of bytes requested per refill
            max_token_size: Pending bytes allowed before a refill is refused
            encoding: Codec used when the source returns str chunks
            errors: Codec error handler for str chunks
        """
        self._source = source
        self._data = bytearray()
        self._pos = 0
        self._base = 0
        self._at_eof = False
        self._buffer_size = buffer_size
        self._max_token_size = max_token_size
        self._encoding = encoding
        self._errors = errors
        self.bytes_read = 0
        self.refills = 0

    @property
    def data(self) -> bytearray:
        """Backing storage. Only data[pos:] is unconsumed."""
        return self._data

    @property
    def pos(self) -> int:
        """Read cursor into data."""
        return self._pos

    @property
    def base(self) -> int:
        """Absolute input offset of data[0]."""
        return self._base

    @property
    def offset(self) -> int:
        """Absolute input offset of the read cursor."""
        return self._base + self._pos

    @property
    def pending(self) -> int:
        """Number of unconsumed bytes."""
        return len(self._data) - self._pos

    @property
    def at_eof(self) -> bool:
        """True once the source has reported exhaustion."""
        return self._at_eof

    def advance(self, count: int) -> None:
        """Move the cursor past count consumed bytes."""
        if count < 0 or count > self.pending:
            raise ValueError(f"cannot advance {count} bytes, {self.pending} pending")
        self._pos += count

    def fill(self) -> int:
        """Append the next chunk from the source.

        Returns:
            Number of bytes appended; 0 once the source is exhausted.

        Raises:
            TokenTooLongError: If max_token_size bytes are already pending.
            SourceNotReadyError: If read() returns None instead of data.
            Exception: Whatever the source's read() raises, unchanged.
        """
        if self._at_eof:
            return 0

        pending = self.pending
        if pending >= self._max_token_size:
            raise TokenTooLongError(self._max_token_size, pending)

        self._compact()
        # Grow the request with the pending span so long tokens need fewer reads
        chunk = self._source.read(max(self._buffer_size, pending))
        self.refills += 1

        if chunk is None:
            logger.debug("source not ready after %d bytes", self.bytes_read)
            raise SourceNotReadyError(self._base + len(self._data))

        if not chunk:
            self._at_eof = True
            logger.debug("source exhausted after %d bytes", self.bytes_read)
            return 0

        if isinstance(chunk, str):
            chunk = chunk.encode(self._encoding, self._errors)
        self._data += chunk
        self.bytes_read += len(chunk)
        logger.debug("read %d bytes, %d pending", len(chunk), self.pending)
        return len(chunk)

    def _compact(self) -> None:
        """Drop the consumed prefix, keeping the unconsumed tail."""
        if self._pos:
            del self._data[: self._pos]
            self._base += self._pos
            self._pos = 0
