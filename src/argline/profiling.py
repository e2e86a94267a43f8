"""Opt-in counters for tokenize calls.

Parser.parse() reports each successful call to the accumulator installed by
profiled_tokenize(). Refills count read() calls, including the final one
that reports exhaustion, so a low bytes_per_refill points at a source that
hands back short reads or a buffer_size set too small.

When no accumulator is installed, get_tokenize_accumulator() returns None
and the parser skips recording.

Example:
    from argline import split
    from argline.profiling import profiled_tokenize

    with profiled_tokenize() as metrics:
        words = split('git commit -m "first commit"')

    print(metrics.summary())
    # {"total_ms": 0.1, "bytes_read": 28, "word_count": 4, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class TokenizeAccumulator:
    """Accumulated metrics during tokenization.

    Only successful calls are recorded; a call that raises contributes nothing.

    Attributes:
        start_time: Profiling start timestamp.
        bytes_read: Total bytes pulled from sources.
        word_count: Number of words produced.
        refills: Number of source reads performed.
        tokenize_calls: Number of tokenize calls recorded.

    """

    start_time: float = field(default_factory=perf_counter)
    bytes_read: int = 0
    word_count: int = 0
    refills: int = 0
    tokenize_calls: int = 0

    def record_tokenize(self, bytes_read: int, word_count: int, refills: int) -> None:
        """Record a tokenize call.

        Args:
            bytes_read: Bytes read from the source.
            word_count: Number of words in the result.
            refills: Number of reads issued against the source.

        """
        self.tokenize_calls += 1
        self.bytes_read += bytes_read
        self.word_count += word_count
        self.refills += refills

    @property
    def bytes_per_refill(self) -> float:
        """Average bytes delivered by each read() call."""
        return self.bytes_read / self.refills if self.refills else 0.0

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of tokenize metrics.

        Returns:
            Dict with total_ms, bytes_read, word_count, refills,
            bytes_per_refill and tokenize_calls.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "bytes_read": self.bytes_read,
            "word_count": self.word_count,
            "refills": self.refills,
            "bytes_per_refill": round(self.bytes_per_refill, 1),
            "tokenize_calls": self.tokenize_calls,
        }


_accumulator: ContextVar[TokenizeAccumulator | None] = ContextVar(
    "tokenize_accumulator",
    default=None,
)


def get_tokenize_accumulator() -> TokenizeAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_tokenize() -> Iterator[TokenizeAccumulator]:
    """Context manager for profiled tokenization.

    Installs a fresh TokenizeAccumulator in the current context. A worker
    thread that should be counted separately opens its own block.

    """
    acc = TokenizeAccumulator()
    token: Token[TokenizeAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
