"""
Positional little-endian reader over an in-memory package buffer.

The cursor is the only mutable state of a decode. It is passed to every
record decoder, which advances it by exactly the bytes it consumes.
Tables stored out-of-line ("deferred arrays") are read through a
position snapshot so the inline field sequence continues where it left
off, even when the nested decode fails.
"""

import struct
from contextlib import contextmanager
from typing import Callable, Iterator, List, Tuple, TypeVar

from uasset_outline.errors import MalformedInput, UnexpectedEndOfBuffer

T = TypeVar('T')

GUID_SIZE = 16

_UINT8 = struct.Struct('<B')
_UINT16 = struct.Struct('<H')
_INT16 = struct.Struct('<h')
_UINT32 = struct.Struct('<I')
_INT32 = struct.Struct('<i')
_UINT64 = struct.Struct('<Q')
_INT64 = struct.Struct('<q')
_GUID = struct.Struct('<4I')


class ByteCursor:
    """
    Reader over an immutable byte buffer.

    Usage:
        cursor = ByteCursor(data)
        magic = cursor.read_u32()
        names = cursor.read_deferred_array(read_name_entry)
    """

    def __init__(self, data: bytes, position: int = 0):
        self._data = memoryview(data)
        self._position = 0
        self.seek(position)

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, offset: int):
        self.seek(offset)

    @property
    def remaining(self) -> int:
        return len(self._data) - self._position

    def seek(self, offset: int):
        """Move to an absolute offset; the end of the buffer is a valid position."""
        if offset < 0:
            raise MalformedInput(f"Cannot seek to negative offset {offset}")
        if offset > len(self._data):
            raise UnexpectedEndOfBuffer(self._position, offset - self._position, self.remaining)
        self._position = offset

    def skip(self, count: int):
        """Advance past ``count`` bytes without decoding them."""
        if count < 0:
            raise MalformedInput(f"Cannot skip a negative byte count ({count}) at offset {self._position}")
        self._require(count)
        self._position += count

    @contextmanager
    def snapshot(self) -> Iterator['ByteCursor']:
        """Save the position and restore it when the block exits, however it exits."""
        saved = self._position
        try:
            yield self
        finally:
            self._position = saved

    def _require(self, count: int):
        if count > self.remaining:
            raise UnexpectedEndOfBuffer(self._position, count, self.remaining)

    def _unpack(self, fmt: struct.Struct):
        self._require(fmt.size)
        value = fmt.unpack_from(self._data, self._position)
        self._position += fmt.size
        return value

    def read_bytes(self, count: int) -> bytes:
        self._require(count)
        start = self._position
        self._position += count
        return bytes(self._data[start:self._position])

    def read_u8(self) -> int:
        return self._unpack(_UINT8)[0]

    def read_u16(self) -> int:
        return self._unpack(_UINT16)[0]

    def read_i16(self) -> int:
        return self._unpack(_INT16)[0]

    def read_u32(self) -> int:
        return self._unpack(_UINT32)[0]

    def read_i32(self) -> int:
        return self._unpack(_INT32)[0]

    def read_u64(self) -> int:
        return self._unpack(_UINT64)[0]

    def read_i64(self) -> int:
        return self._unpack(_INT64)[0]

    def read_guid(self) -> Tuple[int, int, int, int]:
        """Read a GUID as its four 32-bit words."""
        return self._unpack(_GUID)

    def read_bool_byte(self) -> bool:
        return self.read_u8() != 0

    def read_bool_from_int32(self, strict: bool = True) -> bool:
        """
        Read a 32-bit boolean.

        Args:
            strict: Reject values other than 0 and 1 instead of treating
                any non-zero value as true

        Returns:
            The decoded flag
        """
        offset = self._position
        value = self.read_i32()
        if strict and value not in (0, 1):
            raise MalformedInput(f"Expected a 32-bit boolean at offset {offset}, got {value}")
        return value != 0

    def read_string(self) -> str:
        """
        Read an FString.

        A non-negative length counts single-byte characters, a negative
        length counts UCS-2 code units. In both cases the length includes
        the NUL terminator, which is consumed but not returned.
        """
        offset = self._position
        length = self.read_i32()
        if length == 0:
            return ""

        if length > 0:
            raw = self.read_bytes(length)[:-1]
            try:
                return raw.decode('utf-8')
            except UnicodeDecodeError:
                return raw.decode('latin-1')

        raw = self.read_bytes(-length * 2)[:-2]
        try:
            return raw.decode('utf-16-le')
        except UnicodeDecodeError as e:
            raise MalformedInput(f"Invalid UCS-2 string at offset {offset}: {e}") from e

    def _read_count(self) -> int:
        offset = self._position
        count = self.read_i32()
        if count < 0:
            raise MalformedInput(f"Negative array count {count} at offset {offset}")
        return count

    def read_inline_array(self, read_element: Callable[['ByteCursor'], T]) -> List[T]:
        """Read an int32 count followed by that many elements in place."""
        count = self._read_count()
        return [read_element(self) for _ in range(count)]

    def read_deferred_array(self, read_element: Callable[['ByteCursor'], T]) -> List[T]:
        """
        Read a table declared inline as (count, offset) but stored elsewhere.

        The cursor ends up directly after the count/offset pair no matter
        where the table lives.
        """
        count = self._read_count()
        offset = self.read_i32()
        if count == 0:
            return []
        with self.snapshot():
            self.seek(offset)
            return [read_element(self) for _ in range(count)]
