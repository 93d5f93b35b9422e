"""Exception classes for strjoiner.

All errors are contract violations raised at the call site; nothing in the
package catches them.
"""

from __future__ import annotations


class JoinerError(Exception):
    """Base exception for all strjoiner errors."""

    pass


class NegativeGrowError(JoinerError, ValueError):
    """Raised when a buffer is asked to grow by a negative amount."""

    def __init__(self, requested: int) -> None:
        """Initialize with the rejected growth request.

        Args:
            requested: The negative byte count passed to grow()
        """
        self.requested = requested
        super().__init__(f"negative grow count: {requested}")


class InvalidRuneError(JoinerError, ValueError):
    """Raised when a value passed as a rune is not a single code point."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"not a single code point: {value!r}")


class InvalidByteError(JoinerError, ValueError):
    """Raised when a byte value is outside 0..255."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"byte must be in range(0, 256): {value!r}")
