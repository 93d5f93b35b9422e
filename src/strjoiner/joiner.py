"""Joiner: build a delimited string one fragment at a time.

Each write appends one fragment. The configured step is written before
every fragment except the first, so the result equals
``prefix + step.join(fragments) + suffix``.

Prefix and suffix never enter the buffer. They are added by string() and
counted into len() and cap() through the cached affix length.

All accounting is in UTF-8 bytes, so ``len(j) == len(bytes(j))``.

Example:
    >>> j = new_joiner(with_joiner("[", ",", "]"))
    >>> for part in ("a", "b", "c"):
    ...     j.write_string(part)
    >>> str(j)
    '[a,b,c]'
    >>> len(j)
    7

Thread Safety:
    A Joiner is not safe for concurrent use. Keep each instance local to
    the code building the string.

"""

from __future__ import annotations

from collections.abc import Iterable

from strjoiner.buffer import (
    ByteBuffer,
    as_bytes,
    encode_byte,
    encode_rune,
    encode_text,
)
from strjoiner.config import JoinerConfig, JoinerOption, apply_options
from strjoiner.utils.logger import get_logger

logger = get_logger(__name__)


class Joiner:
    """Accumulates fragments separated by a step, wrapped in prefix/suffix.

    The buffer is allocated lazily by the first write or grow() and lives
    as long as the Joiner. Whether the next write needs a step is tracked
    separately: grow() does not count as a write, and reset() makes the
    next write a first write again.

    Every fragment is converted to bytes before the step is written, so a
    rejected fragment leaves the Joiner unchanged.

    """

    __slots__ = ("_affixes", "_buf", "_config", "_has_written", "_n", "_step")

    def __init__(self, *options: JoinerOption) -> None:
        """Build a Joiner from option functions.

        Args:
            *options: Options applied left to right over a zero-valued config
        """
        self._config: JoinerConfig = apply_options(*options)
        self._affixes = (encode_text(self._config.prefix), encode_text(self._config.suffix))
        self._step = encode_text(self._config.step)
        self._n: int = self._config.affix_length
        self._buf: ByteBuffer | None = None
        self._has_written = False

    @property
    def config(self) -> JoinerConfig:
        """The configuration this Joiner was built with."""
        return self._config

    def _ensure_buffer(self) -> ByteBuffer:
        if self._buf is None:
            logger.debug("Allocating joiner buffer")
            self._buf = ByteBuffer()
        return self._buf

    def _write_fragment(self, data: bytes) -> int:
        buf = self._ensure_buffer()
        if self._has_written:
            buf.write(self._step)
        else:
            self._has_written = True
        return buf.write(data)

    def write_rune(self, r: str | int) -> int:
        """Append one code point as a fragment.

        Args:
            r: A one-character string or an integer code point

        Returns:
            UTF-8 byte length of the code point

        Raises:
            InvalidRuneError: If r is not a single code point
        """
        return self._write_fragment(encode_rune(r))

    def write_string(self, s: str) -> int:
        """Append s as a fragment and return its UTF-8 byte length."""
        return self._write_fragment(encode_text(s))

    def write_byte(self, b: int) -> None:
        """Append a single byte as a fragment.

        Raises:
            InvalidByteError: If b is outside 0..255
        """
        self._write_fragment(encode_byte(b))

    def write(self, p: bytes | bytearray | memoryview) -> int:
        """Append a bytes-like object as a fragment and return its byte length.

        Raises:
            TypeError: If p is not bytes-like
        """
        return self._write_fragment(as_bytes(p))

    def extend(self, parts: Iterable[str | bytes]) -> int:
        """Write each part as its own fragment.

        Parts before a rejected one stay written.

        Args:
            parts: Strings and/or bytes-like objects, in order

        Returns:
            Total bytes written, not counting steps

        Raises:
            TypeError: If a part is neither str nor bytes-like
        """
        total = 0
        for part in parts:
            if isinstance(part, str):
                total += self.write_string(part)
            else:
                total += self.write(part)
        return total

    def grow(self, n: int) -> None:
        """Reserve room for another n bytes.

        Allocates the buffer if needed. Does not count as a write.

        Raises:
            NegativeGrowError: If n is negative
        """
        logger.debug("Growing joiner buffer by %d bytes", n)
        self._ensure_buffer().grow(n)

    def cap(self) -> int:
        """Return reserved capacity plus the prefix/suffix length."""
        if self._buf is None:
            return self._n
        return self._buf.cap() + self._n

    def reset(self) -> None:
        """Clear written fragments, keeping the configuration."""
        if self._buf is not None:
            logger.debug("Resetting joiner buffer (%d bytes)", len(self._buf))
            self._buf.reset()
        self._has_written = False

    def __bytes__(self) -> bytes:
        body = b"" if self._buf is None else self._buf.getvalue()
        prefix, suffix = self._affixes
        return prefix + body + suffix

    def string(self) -> str:
        """Return prefix + joined fragments + suffix.

        Raw bytes that are not valid UTF-8 survive as surrogate escapes.
        """
        body = "" if self._buf is None else self._buf.getvalue().decode("utf-8", "surrogateescape")
        return self._config.prefix + body + self._config.suffix

    def __str__(self) -> str:
        return self.string()

    def __len__(self) -> int:
        """Return the byte length of the rendered string."""
        if self._buf is None:
            return self._n
        return len(self._buf) + self._n

    def __bool__(self) -> bool:
        """Return True if a fragment was written since creation or the last reset."""
        return self._has_written

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r}, value={self.string()!r})"


def new_joiner(*options: JoinerOption) -> Joiner:
    """Return a new Joiner configured by options."""
    return Joiner(*options)


def join(parts: Iterable[str | bytes], *options: JoinerOption) -> str:
    """Join parts in one call.

    Example:
        >>> join(["a", "b"], with_joiner("<", "|", ">"))
        '<a|b>'
    """
    j = Joiner(*options)
    j.extend(parts)
    return j.string()


__all__ = ["Joiner", "join", "new_joiner"]
