"""Reassembler: turns scanned tokens into shell words.

Drives the Scanner over a ReadBuffer, refilling from the source whenever
the scanner cannot decide a token yet. Adjacent non-whitespace tokens are
glued into one word; whitespace ends the current word.

    "abc"def      -> ["abcdef"]
    "abc" 'd e'   -> ["abc", "d e"]
    \\l            -> ["l"]

The first word is an ordinary argument, not a command name: unlike a
shell's argv, nothing is reserved for the program being run.

Thread Safety:
Parser instances are single-use. Create one per source.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from argline.config import TokenizeConfig, get_tokenize_config
from argline.errors import InvalidSourceError
from argline.escapes import expose
from argline.lexer.buffer import ReadBuffer
from argline.lexer.scanner import Scanner, ScanStatus
from argline.profiling import get_tokenize_accumulator
from argline.protocols import ByteSource
from argline.tokens import Token, TokenKind
from argline.utils.logger import get_logger
from argline.wordbuilder import WordBuilder

logger = get_logger(__name__)


class Parser:
    """Single-use tokenizer over one byte source.

    Usage:
            >>> Parser(io.BytesIO(b'cp "my file" dest\\\\ dir')).parse()
            ['cp', 'my file', 'dest dir']

    """

    __slots__ = ("_source", "_config", "_buffer")

    def __init__(
        self,
        source: ByteSource | None,
        config: TokenizeConfig | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            source: Object with a read(size) method
            config: Explicit configuration (defaults to the context's)

        Raises:
            InvalidSourceError: If source is None
        """
        if source is None:
            raise InvalidSourceError()
        self._source = source
        self._config = config if config is not None else get_tokenize_config()
        self._buffer: ReadBuffer | None = None

    def tokens(self) -> Iterator[Token]:
        """Scan the source into classified tokens.

        Escape processing is not applied; tokens carry raw input bytes.

        Returns:
            Iterator of Token objects in input order. Scan errors
            (TokenizeError, TokenTooLongError, SourceNotReadyError) are
            raised while iterating.

        Raises:
            RuntimeError: If this parser has already read its source
        """
        if self._buffer is not None:
            raise RuntimeError("Parser is single-use: its source was already read")
        config = self._config
        self._buffer = ReadBuffer(
            self._source,
            buffer_size=config.buffer_size,
            max_token_size=config.max_token_size,
            encoding=config.encoding,
            errors=config.errors,
        )
        return self._scan(self._buffer, Scanner(config.encoding))

    def _scan(self, buffer: ReadBuffer, scanner: Scanner) -> Iterator[Token]:
        while True:
            result = scanner.scan(buffer.data, buffer.pos, buffer.at_eof, base=buffer.base)
            status = result.status
            if status is ScanStatus.TOKEN:
                buffer.advance(result.advance)
                yield result.token
            elif status is ScanStatus.NEED_MORE:
                buffer.fill()
            elif status is ScanStatus.END:
                return
            else:
                logger.debug("tokenize failed at offset %d", buffer.offset)
                raise result.error

    def parse(self) -> list[str]:
        """Tokenize the whole source into words.

        Returns:
            Words in input order; empty for empty or whitespace-only input

        Raises:
            TokenizeError: If the input ends inside a token. No words are
                returned in that case, even ones already completed.
            TokenTooLongError: If an undecided token exceeds max_token_size
            SourceNotReadyError: If the source returns None from read()
            RuntimeError: If called a second time on the same parser
        """
        config = self._config
        word = WordBuilder(config.encoding, config.errors)
        words: list[str] = []

        for token in self.tokens():
            if token.kind is TokenKind.WHITESPACE:
                if word:
                    words.append(word.build())
                    word.clear()
            else:
                word.append(expose(token))

        if word:
            words.append(word.build())

        acc = get_tokenize_accumulator()
        if acc is not None and self._buffer is not None:
            acc.record_tokenize(
                bytes_read=self._buffer.bytes_read,
                word_count=len(words),
                refills=self._buffer.refills,
            )

        return words
