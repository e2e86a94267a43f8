"""Protocols for argline.

Defines the contract for the byte sources the parser pulls input from.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for pull-based input sources.

    Satisfied by io.BytesIO, binary files, socket.makefile("rb") and,
    since str chunks are encoded on arrival, by text streams too.

    Thread Safety:
        The parser reads from one source at a time and never shares it.
        Serializing access to a source shared between calls is the caller's job.

    """

    def read(self, size: int = -1, /) -> bytes | str | None:
        """Read up to size bytes.

        An empty result means the source is exhausted. None means no data
        yet and fails the call with SourceNotReadyError. Any exception
        raised here aborts tokenization and propagates unchanged.
        """
        ...
