"""Buffered token-shape scanner for argline.

Architecture:
lexer/
├── __init__.py          # Re-exports Scanner, ReadBuffer, ScanResult, ScanStatus
├── patterns.py          # Compiled token-shape and escape patterns
├── buffer.py            # ReadBuffer (growable window + read cursor)
└── scanner.py           # Scanner (one classification step per call)

Usage:
    >>> from argline.lexer import Scanner
    >>> result = Scanner().scan(b"ls -l", 0, at_eof=True)
    >>> result.token
    Token(UNQUOTED, b'ls', @0)

"""

from argline.lexer.buffer import ReadBuffer
from argline.lexer.scanner import ScanResult, Scanner, ScanStatus

__all__ = ["ReadBuffer", "ScanResult", "ScanStatus", "Scanner"]
