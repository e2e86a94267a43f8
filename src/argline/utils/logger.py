"""Logger namespacing for argline.

Every module logs under the "argline" hierarchy, so one
logging.getLogger("argline").setLevel(logging.DEBUG) turns on the
refill and failure trace of the tokenizer. argline installs no handlers.

Example:
    >>> logger = get_logger("argline.lexer.buffer")
    >>> logger.debug("read %d bytes, %d pending", 5, 5)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name under the argline namespace.

    Names already inside the namespace are used as-is; anything else,
    including a look-alike such as "argline_other", is nested under it.

    Example:
        >>> get_logger("mymodule").name
        'argline.mymodule'
    """
    if name != "argline" and not name.startswith("argline."):
        name = "argline." + name
    return logging.getLogger(name)
