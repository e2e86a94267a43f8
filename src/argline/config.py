"""ContextVar-based tokenize configuration for argline.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Tokenizer instance, read by every parser in the context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In Tokenizer class
    tokenizer = Tokenizer(buffer_size=512)
    words = tokenizer('cp "my file" backup/')  # Sets config internally via ContextVar

    # Direct parser usage (advanced)
    from argline.config import set_tokenize_config, reset_tokenize_config, TokenizeConfig

    set_tokenize_config(TokenizeConfig(buffer_size=64))
    try:
        words = Parser(source).parse()
    finally:
        reset_tokenize_config()

    # Or use the context manager
    with tokenize_config_context(TokenizeConfig(buffer_size=64)):
        words = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Initial read size and token limit of Go's bufio.Scanner
DEFAULT_BUFFER_SIZE = 4096
DEFAULT_MAX_TOKEN_SIZE = 64 * 1024


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenize configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        buffer_size: Bytes requested from the source on each refill
        max_token_size: Largest undetermined span the read buffer may hold
            before TokenTooLongError is raised
        encoding: Codec used to decode words and to encode str chunks
        errors: Codec error handler for both directions

    """

    buffer_size: int = DEFAULT_BUFFER_SIZE
    max_token_size: int = DEFAULT_MAX_TOKEN_SIZE
    encoding: str = "utf-8"
    errors: str = "surrogateescape"

    def __post_init__(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {self.buffer_size}")
        if self.max_token_size < 1:
            raise ValueError(f"max_token_size must be positive, got {self.max_token_size}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizeConfig":
        """Create TokenizeConfig from dictionary.

        Only includes keys that are valid TokenizeConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TokenizeConfig attribute names.

        Returns:
            New TokenizeConfig instance with values from dict.

        Example:
            >>> config = TokenizeConfig.from_dict({
            ...     "buffer_size": 256,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.buffer_size
            256

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get current tokenize configuration (thread-local).

    Returns:
        The active TokenizeConfig for this thread/context.

    """
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set tokenize configuration for current context.

    Args:
        config: TokenizeConfig instance to use for this context.

    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizeConfig to use within the context.

    Yields:
        None

    Example:
        >>> with tokenize_config_context(TokenizeConfig(buffer_size=1)):
        ...     words = split("a b")
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_MAX_TOKEN_SIZE",
    "TokenizeConfig",
    "get_tokenize_config",
    "set_tokenize_config",
    "reset_tokenize_config",
    "tokenize_config_context",
]
