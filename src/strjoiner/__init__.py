"""
strjoiner — Streaming delimited-string builder

Writes fragments one at a time, inserting a step (delimiter) between
consecutive writes and wrapping the result in an optional prefix and suffix.
Zero runtime dependencies.

Quick Start:
    >>> from strjoiner import new_joiner, with_joiner
    >>> j = new_joiner(with_joiner("[", ",", "]"))
    >>> j.write_string("a")
    1
    >>> j.write_string("b")
    1
    >>> str(j)
    '[a,b]'

    >>> # One-shot
    >>> from strjoiner import join, with_step
    >>> join(["x", "y", "z"], with_step("-"))
    'x-y-z'
"""

from strjoiner.buffer import ByteBuffer
from strjoiner.config import (
    JoinerConfig,
    JoinerOption,
    apply_options,
    with_joiner,
    with_prefix,
    with_step,
    with_suffix,
)
from strjoiner.errors import (
    InvalidByteError,
    InvalidRuneError,
    JoinerError,
    NegativeGrowError,
)
from strjoiner.joiner import Joiner, join, new_joiner

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "Joiner",
    "join",
    "new_joiner",
    # Options
    "JoinerOption",
    "with_joiner",
    "with_prefix",
    "with_step",
    "with_suffix",
    # Configuration
    "JoinerConfig",
    "apply_options",
    # Buffer
    "ByteBuffer",
    # Errors
    "JoinerError",
    "NegativeGrowError",
    "InvalidRuneError",
    "InvalidByteError",
]
