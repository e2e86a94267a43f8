"""Tests for ReadBuffer refills, cursor movement and compaction."""

from __future__ import annotations

import io

import pytest

from argline.errors import SourceNotReadyError, TokenTooLongError
from argline.lexer import ReadBuffer


class RecordingSource:
    """BytesIO that remembers every requested read size."""

    def __init__(self, data: bytes) -> None:
        self._stream = io.BytesIO(data)
        self.sizes: list[int] = []

    def read(self, size: int = -1) -> bytes:
        self.sizes.append(size)
        return self._stream.read(size)


class ChunkSource:
    """Hands out a fixed sequence of read() results, ignoring size."""

    def __init__(self, chunks: list[bytes | None]) -> None:
        self._chunks = iter(chunks)

    def read(self, size: int = -1) -> bytes | None:
        return next(self._chunks, b"")


class TestFill:
    def test_fill_appends_chunk(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"abcdef"), buffer_size=4)
        assert buf.fill() == 4
        assert bytes(buf.data[buf.pos :]) == b"abcd"
        assert buf.pending == 4
        assert buf.at_eof is False

    def test_fill_until_exhausted(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"abc"), buffer_size=2)
        assert buf.fill() == 2
        assert buf.fill() == 1
        assert buf.fill() == 0
        assert buf.at_eof is True
        assert buf.bytes_read == 3
        assert buf.refills == 3

    def test_fill_after_eof_does_not_read(self) -> None:
        source = RecordingSource(b"")
        buf = ReadBuffer(source)
        buf.fill()
        buf.fill()
        assert len(source.sizes) == 1

    def test_str_chunks_are_encoded(self) -> None:
        buf = ReadBuffer(io.StringIO("héllo"), buffer_size=16)
        buf.fill()
        assert bytes(buf.data) == "héllo".encode()
        assert buf.bytes_read == 6

    def test_none_chunk_is_not_eof(self) -> None:
        buf = ReadBuffer(ChunkSource([b"ab", None]))
        buf.fill()
        with pytest.raises(SourceNotReadyError) as exc_info:
            buf.fill()
        assert exc_info.value.offset == 2
        assert buf.at_eof is False
        assert bytes(buf.data[buf.pos :]) == b"ab"

    def test_read_size_grows_with_pending(self) -> None:
        source = RecordingSource(b"x" * 64)
        buf = ReadBuffer(source, buffer_size=4)
        buf.fill()
        buf.fill()
        buf.fill()
        assert source.sizes == [4, 4, 8]


class TestAdvance:
    def test_advance_moves_cursor(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"abc def"))
        buf.fill()
        buf.advance(4)
        assert buf.pos == 4
        assert buf.offset == 4
        assert buf.pending == 3

    @pytest.mark.parametrize("count", [-1, 4])
    def test_advance_out_of_range(self, count: int) -> None:
        buf = ReadBuffer(io.BytesIO(b"abc"))
        buf.fill()
        with pytest.raises(ValueError):
            buf.advance(count)

    def test_compaction_keeps_unconsumed_tail(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"abc 'de"), buffer_size=4)
        buf.fill()
        buf.advance(3)
        buf.fill()
        assert buf.pos == 0
        assert buf.base == 3
        assert buf.offset == 3
        assert bytes(buf.data) == b" 'de"


class TestTokenLimit:
    def test_refuses_to_grow_past_limit(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"x" * 32), buffer_size=8, max_token_size=8)
        buf.fill()
        with pytest.raises(TokenTooLongError) as exc_info:
            buf.fill()
        assert exc_info.value.limit == 8
        assert exc_info.value.size == 8

    def test_consumed_bytes_do_not_count(self) -> None:
        buf = ReadBuffer(io.BytesIO(b"x" * 32), buffer_size=8, max_token_size=8)
        buf.fill()
        buf.advance(8)
        assert buf.fill() == 8
