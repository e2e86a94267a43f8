"""WordBuilder for accumulating one output word.

Adjacent non-whitespace tokens glue into a single word, so the parser
appends fragments here until whitespace or end of input flushes them.
Fragments are raw bytes and are decoded once on build(): a multi-byte
character split across two buffer refills still decodes correctly.

Thread Safety:
WordBuilder instances are local to each parse() call.
No shared mutable state.

"""

from __future__ import annotations


class WordBuilder:
    """Efficient byte-fragment accumulator.

    Appends to a list, joins once at the end.

    Usage:
            >>> wb = WordBuilder()
            >>> wb.append(b"abc")
            >>> wb.append(b"def")
            >>> wb.build()
            'abcdef'

    """

    __slots__ = ("_encoding", "_errors", "_parts")

    def __init__(self, encoding: str = "utf-8", errors: str = "surrogateescape") -> None:
        """Initialize empty WordBuilder.

        Args:
            encoding: Codec used by build()
            errors: Codec error handler used by build()
        """
        self._parts: list[bytes] = []
        self._encoding = encoding
        self._errors = errors

    def append(self, fragment: bytes) -> WordBuilder:
        """Append a fragment to the word.

        Args:
            fragment: Bytes to append (empty fragments are skipped)

        Returns:
            self for method chaining
        """
        if fragment:
            self._parts.append(fragment)
        return self

    def build(self) -> str:
        """Join and decode all fragments.

        Returns:
            The decoded word
        """
        return b"".join(self._parts).decode(self._encoding, self._errors)

    def clear(self) -> WordBuilder:
        """Clear all accumulated fragments.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any non-empty fragment has been appended."""
        return bool(self._parts)
