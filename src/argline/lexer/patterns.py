"""Compiled token-shape patterns.

All patterns are bytes patterns compiled once at import:
- Immutability (thread-safe, shared by every Scanner)
- No per-call compilation

Each alternation is between disjoint character classes, so matching is
linear in the length of the span (no catastrophic backtracking).

Whitespace is the ASCII class [ \\t\\n\\r\\f\\v], the same set a POSIX
shell's [[:space:]] covers in the C locale.
"""

import re

_WS = rb" \t\n\r\f\v"

# One or more whitespace bytes
WHITESPACE_RUN = re.compile(rb"[" + _WS + rb"]+")

# One or more of: a plain byte, or a backslash plus any one byte
UNQUOTED_RUN = re.compile(rb"(?:[^" + _WS + rb"'\"\\]|\\.)+", re.DOTALL)

# "..." with escape units inside, or '...' with no escapes at all
QUOTED_RUN = re.compile(rb"\"(?:[^\\\"]|\\.)*\"|'[^']*'", re.DOTALL)

# Used with fullmatch(): a quoted span still waiting for its closing quote
# (possibly ending on the backslash of an escape unit), or a lone backslash
INCOMPLETE_RUN = re.compile(rb"\"(?:[^\\\"]|\\.)*\\?|'[^']*|\\", re.DOTALL)

# Escape units interpreted in unquoted runs: every one
ESCAPE_ANY = re.compile(rb"\\(.)", re.DOTALL)

# Escape units interpreted inside double quotes: \\ and \" only
ESCAPE_DOUBLE_QUOTED = re.compile(rb"\\([\\\"])")
