"""
argline: shell-style argument tokenizer for any byte source

Splits a block of text into argument words the way a command shell splits
its command line: whitespace separates words, single and double quotes
encapsulate text, and the backslash escapes the next character. Input is
pulled from any object with a read(size) method, so the same command
language works for process arguments, interactive consoles and config files.

Quick Start:
    >>> from argline import split, tokenize
    >>> split('git commit -m "first commit"')
    ['git', 'commit', '-m', 'first commit']

    >>> import io
    >>> tokenize(io.BytesIO(b"'a\\\\\\"b' \\"a\\\\\\"b\\""))
    ['a\\\\"b', 'a"b']

    >>> # Or use the high-level Tokenizer class
    >>> from argline import Tokenizer
    >>> tok = Tokenizer(buffer_size=256)
    >>> tok("cp my\\\\ file dest")
    ['cp', 'my file', 'dest']

What it does not do: option parsing, globbing, variable expansion and
command substitution are left to the caller. The first word is an
ordinary argument, not a command name.
"""

import io
from collections.abc import Iterable, Iterator

from argline.config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_MAX_TOKEN_SIZE,
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from argline.errors import (
    ArglineError,
    InvalidSourceError,
    SourceNotReadyError,
    TokenizeError,
    TokenTooLongError,
)
from argline.lexer import ReadBuffer, ScanResult, Scanner, ScanStatus
from argline.parser import Parser
from argline.profiling import TokenizeAccumulator, get_tokenize_accumulator, profiled_tokenize
from argline.protocols import ByteSource
from argline.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(
    source: ByteSource | None,
    *,
    config: TokenizeConfig | None = None,
) -> list[str]:
    """Tokenize everything a byte source provides into argument words.

    All input read from source is treated as a single command line.

    Args:
        source: Object with a read(size) method returning bytes or str
        config: Explicit configuration (defaults to the context's)

    Returns:
        Words in input order; empty for empty or whitespace-only input

    Raises:
        InvalidSourceError: If source is None
        TokenizeError: If the input ends inside a quote or on a lone backslash
        TokenTooLongError: If a single undecided token exceeds max_token_size
        Exception: Any error raised by source.read(), unchanged

    Example:
        >>> tokenize(io.BytesIO(b'"abc"def  ghi'))
        ['abcdef', 'ghi']
    """
    return Parser(source, config).parse()


def split(text: str, *, config: TokenizeConfig | None = None) -> list[str]:
    """Tokenize an in-memory string.

    Args:
        text: Command line text
        config: Explicit configuration (defaults to the context's)

    Returns:
        Words in input order
    """
    cfg = config if config is not None else get_tokenize_config()
    return Parser(io.BytesIO(text.encode(cfg.encoding, cfg.errors)), cfg).parse()


def iter_tokens(
    source: ByteSource | None,
    *,
    config: TokenizeConfig | None = None,
) -> Iterator[Token]:
    """Yield the classified tokens of a source without reassembling words.

    Useful for diagnostics: shows exactly how input was split into
    whitespace, quoted and unquoted runs. Tokens may be split at buffer
    boundaries, so a long run can appear as several adjacent tokens.

    Raises:
        InvalidSourceError: If source is None, at call time. Scan and read
            errors are raised during iteration.
    """
    return Parser(source, config).tokens()


class Tokenizer:
    """High-level tokenizer holding one immutable configuration.

    Usage:
        >>> tok = Tokenizer(buffer_size=64)
        >>> tok('echo "hello world"')
        ['echo', 'hello world']

        >>> with open("commands.txt", "rb") as f:
        ...     words = tok.tokenize(f)

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Tokenizer instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(
        self,
        *,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        max_token_size: int = DEFAULT_MAX_TOKEN_SIZE,
        encoding: str = "utf-8",
        errors: str = "surrogateescape",
    ) -> None:
        """Initialize Tokenizer.

        Args:
            buffer_size: Bytes requested from the source per refill
            max_token_size: Largest undecided span before TokenTooLongError
            encoding: Codec for decoding words and encoding str chunks
            errors: Codec error handler

        Raises:
            ValueError: For a non-positive size
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = TokenizeConfig(
            buffer_size=buffer_size,
            max_token_size=max_token_size,
            encoding=encoding,
            errors=errors,
        )

    @property
    def config(self) -> TokenizeConfig:
        """The configuration every call runs with."""
        return self._config

    def __call__(self, text: str) -> list[str]:
        """Tokenize an in-memory string."""
        return split(text, config=self._config)

    def tokenize(self, source: ByteSource | None) -> list[str]:
        """Tokenize a byte source.

        Sets config via ContextVar for the duration of the call.
        """
        with tokenize_config_context(self._config):
            return Parser(source).parse()

    def tokenize_many(self, sources: Iterable[ByteSource]) -> list[list[str]]:
        """Tokenize several sources, one word list per source.

        Sets config once, tokenizes all, restores once. The first failing
        source aborts the batch.

        Example:
            >>> tok = Tokenizer()
            >>> tok.tokenize_many([io.BytesIO(b"a b"), io.BytesIO(b"'c d'")])
            [['a', 'b'], ['c d']]
        """
        with tokenize_config_context(self._config):
            return [Parser(source).parse() for source in sources]


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "tokenize",
    "split",
    "iter_tokens",
    # High-level
    "Tokenizer",
    "Parser",
    # Scanner components
    "Scanner",
    "ScanResult",
    "ScanStatus",
    "ReadBuffer",
    # Tokens
    "Token",
    "TokenKind",
    # Sources
    "ByteSource",
    # Errors
    "ArglineError",
    "InvalidSourceError",
    "SourceNotReadyError",
    "TokenizeError",
    "TokenTooLongError",
    # Configuration (ContextVar-based)
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
    # Profiling
    "TokenizeAccumulator",
    "get_tokenize_accumulator",
    "profiled_tokenize",
]
