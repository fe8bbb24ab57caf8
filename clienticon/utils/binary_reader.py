# binary_reader.py
# Little-endian primitive reads over a seekable binary stream

import io
import struct


class VdfFormatError(ValueError):
    """Raised when bytes read from a VDF stream are not valid text."""


class BinaryReader:
    """Thin wrapper around a binary file object with fixed-width reads."""

    def __init__(self, stream):
        self.stream = stream

    @classmethod
    def from_bytes(cls, data: bytes) -> "BinaryReader":
        """Reader over an in-memory buffer (used to isolate one entry's payload)."""
        return cls(io.BytesIO(data))

    def read_exact(self, size: int) -> bytes:
        """Read exactly `size` bytes or raise EOFError."""
        if size < 0:
            raise ValueError(f"Cannot read a negative byte count ({size})")
        data = self.stream.read(size)
        if len(data) < size:
            raise EOFError(f"Expected {size} bytes, got {len(data)}")
        return data

    def _unpack(self, fmt: str, size: int):
        return struct.unpack(fmt, self.read_exact(size))[0]

    def read_u8(self) -> int:
        return self._unpack('<B', 1)

    def read_u32(self) -> int:
        return self._unpack('<I', 4)

    def read_i32(self) -> int:
        return self._unpack('<i', 4)

    def read_u64(self) -> int:
        return self._unpack('<Q', 8)

    def read_i64(self) -> int:
        return self._unpack('<q', 8)

    def read_cstring(self) -> str:
        """Read a null-terminated UTF-8 string.

        Raises EOFError if the stream ends before the terminator and
        VdfFormatError if the collected bytes are not valid UTF-8.
        """
        chars = bytearray()
        while True:
            c = self.stream.read(1)
            if not c:
                raise EOFError("Unterminated string")
            if c == b'\x00':
                break
            chars += c
        try:
            return chars.decode('utf-8')
        except UnicodeDecodeError as e:
            raise VdfFormatError(f"Invalid UTF-8 in string: {e}") from e

    def tell(self) -> int:
        return self.stream.tell()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self.stream.seek(offset, whence)

    def skip(self, size: int) -> int:
        return self.stream.seek(size, io.SEEK_CUR)
