"""Whitespace-tolerant hex stream reader: hex text in, raw bytes out."""

from __future__ import annotations

from typing import IO

DEFAULT_CHUNK_SIZE = 8192

# ASCII whitespace, skipped before every hex digit
WHITESPACE = frozenset(b" \t\n\r\x0c")

_HEX_VALUES: dict[int, int] = {
    **{c: i for i, c in enumerate(b"0123456789abcdef")},
    **{c: i for i, c in enumerate(b"ABCDEF", start=10)},
}


class DecodeError(Exception):
    """Raised when the input cannot be decoded.

    `offset` is the number of bytes successfully decoded before the failure.
    """

    def __init__(self, message: str, offset: int):
        super().__init__(message)
        self.offset = offset


class InvalidHexError(DecodeError):
    """Raised on a non-whitespace character that is not a hex digit."""

    def __init__(self, message: str, offset: int, char: str):
        super().__init__(message, offset)
        self.char = char


class TruncatedInputError(DecodeError):
    """Raised when input ends in the middle of a byte or an operand."""


class HexReader:
    """Decodes pairs of hex digits from a byte stream, skipping whitespace.

    The source only needs a `read(n)` method. Buffered streams are read with
    `read1` so a pipe yields whatever is already available instead of
    waiting for a full chunk. Text streams are accepted too; their chunks
    are encoded before decoding. At most `chunk_size` bytes are pulled per
    read, so the whole input is never materialized.
    """

    def __init__(self, source: IO[bytes], chunk_size: int = DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._read = getattr(source, "read1", source.read)
        self._chunk_size = chunk_size
        self._buffer = b""
        self._pos = 0
        self._decoded = 0

    @property
    def position(self) -> int:
        """Number of bytes decoded so far."""
        return self._decoded

    def _next_char(self) -> int | None:
        """Return the next non-whitespace character, or None at end of input."""
        while True:
            if self._pos >= len(self._buffer):
                chunk = self._read(self._chunk_size)
                if not chunk:
                    return None
                if isinstance(chunk, str):
                    chunk = chunk.encode("utf-8")
                self._buffer = chunk
                self._pos = 0
            char = self._buffer[self._pos]
            self._pos += 1
            if char not in WHITESPACE:
                return char

    def _next_nibble(self) -> int | None:
        char = self._next_char()
        if char is None:
            return None
        value = _HEX_VALUES.get(char)
        if value is None:
            raise InvalidHexError(
                f"invalid hex character {chr(char)!r} at byte offset {self._decoded}",
                offset=self._decoded,
                char=chr(char),
            )
        return value

    def _truncated(self) -> TruncatedInputError:
        return TruncatedInputError(
            f"unexpected end of input at byte offset {self._decoded}",
            offset=self._decoded,
        )

    def read_one_byte(self) -> int | None:
        """Read one byte.

        Returns None on a clean end of input (no digit of this byte read).
        Raises TruncatedInputError if input ends after the first digit.
        """
        high = self._next_nibble()
        if high is None:
            return None
        low = self._next_nibble()
        if low is None:
            raise self._truncated()
        self._decoded += 1
        return high << 4 | low

    def read_bytes(self, count: int) -> bytes:
        """Read exactly `count` bytes; running out of input is an error."""
        out = bytearray()
        for _ in range(count):
            byte = self.read_one_byte()
            if byte is None:
                raise self._truncated()
            out.append(byte)
        return bytes(out)
