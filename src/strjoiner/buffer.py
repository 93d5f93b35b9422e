"""Growable byte buffer with explicit capacity accounting.

Appends to a bytearray and tracks a logical capacity so callers can
reserve space up front and report how much is reserved.

The buffer only takes bytes. The encode_* helpers turn each kind of
fragment (text, rune, single byte, bytes-like object) into bytes and
reject bad input, so a caller can validate a fragment before writing
anything else.

Growth policy:
    When a write or grow() needs more room than is reserved, capacity
    becomes ``2 * cap + needed``. Capacity never shrinks except on reset().

Thread Safety:
    ByteBuffer instances are owned by a single writer.
    No shared mutable state.

"""

from __future__ import annotations

from strjoiner.errors import InvalidByteError, InvalidRuneError, NegativeGrowError
from strjoiner.utils.logger import get_logger

logger = get_logger(__name__)

# Encoding written for surrogate code points
_REPLACEMENT = "\ufffd".encode()

_MAX_RUNE = 0x10FFFF


def encode_text(s: str) -> bytes:
    """Return s as UTF-8, mapping surrogate escapes back to raw bytes.

    Raises:
        UnicodeEncodeError: If s holds a lone surrogate outside U+DC80..U+DCFF
    """
    return s.encode("utf-8", "surrogateescape")


def encode_rune(r: str | int) -> bytes:
    """Return the UTF-8 encoding of a single code point.

    Args:
        r: A one-character string or an integer code point

    Returns:
        Encoded bytes (1-4 bytes). Surrogate code points encode as U+FFFD.

    Raises:
        InvalidRuneError: If r is not exactly one code point
    """
    if isinstance(r, str):
        if len(r) != 1:
            raise InvalidRuneError(r)
        cp = ord(r)
    elif isinstance(r, int) and not isinstance(r, bool):
        if not 0 <= r <= _MAX_RUNE:
            raise InvalidRuneError(r)
        cp = r
    else:
        raise InvalidRuneError(r)

    if 0xD800 <= cp <= 0xDFFF:
        return _REPLACEMENT
    return chr(cp).encode()


def is_byte(b: object) -> bool:
    """Return True if b is an int in 0..255 (bools excluded)."""
    return isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 0xFF


def encode_byte(b: int) -> bytes:
    """Return a one-byte bytes object for b.

    Raises:
        InvalidByteError: If b is outside 0..255
    """
    if not is_byte(b):
        raise InvalidByteError(b)
    return bytes((b,))


def as_bytes(p: bytes | bytearray | memoryview) -> bytes:
    """Copy a bytes-like object into bytes.

    Raises:
        TypeError: If p does not support the buffer protocol (str, int, ...)
    """
    return memoryview(p).tobytes()


class ByteBuffer:
    """Append-only byte buffer.

    Usage:
            >>> buf = ByteBuffer()
            >>> buf.write(encode_text("héllo"))
            6
            >>> buf.write(encode_byte(0x21))
            1
            >>> buf.getvalue()
            b'h\\xc3\\xa9llo!'

    """

    __slots__ = ("_cap", "_data")

    def __init__(self) -> None:
        """Initialize an empty buffer with zero capacity."""
        self._data = bytearray()
        self._cap = 0

    def _reserve(self, needed: int) -> None:
        if self._cap - len(self._data) < needed:
            self._cap = 2 * self._cap + needed

    def grow(self, n: int) -> None:
        """Guarantee room for another n bytes without further growth.

        Args:
            n: Number of bytes to reserve

        Raises:
            NegativeGrowError: If n is negative
        """
        if n < 0:
            logger.debug("Rejected negative grow request: %d", n)
            raise NegativeGrowError(n)
        self._reserve(n)

    def write(self, data: bytes) -> int:
        """Append bytes.

        Returns:
            Number of bytes appended (always len(data))
        """
        size = len(data)
        self._reserve(size)
        self._data += data
        return size

    def getvalue(self) -> bytes:
        """Return a copy of the accumulated bytes."""
        return bytes(self._data)

    def cap(self) -> int:
        """Return the reserved capacity, including bytes already written."""
        return self._cap

    def reset(self) -> None:
        """Drop all contents and reserved capacity."""
        self._data = bytearray()
        self._cap = 0

    def __len__(self) -> int:
        """Return number of bytes written."""
        return len(self._data)
