"""
Tests for the byte cursor

Primitive reads, FString decoding, inline and deferred arrays, and
position snapshots.
"""

import struct
import pytest
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from uasset_outline.cursor import ByteCursor
from uasset_outline.errors import MalformedInput, UnexpectedEndOfBuffer

from package_builder import Writer


class TestPrimitives:
    """Test fixed-width little-endian reads."""

    def test_reads_advance_by_width(self):
        """Each read advances the position by the type's width."""
        data = (struct.pack('<B', 0xAB) + struct.pack('<H', 0xBEEF) + struct.pack('<h', -2)
                + struct.pack('<I', 0x9E2A83C1) + struct.pack('<i', -7)
                + struct.pack('<Q', 2 ** 40) + struct.pack('<q', -(2 ** 40)))
        c = ByteCursor(data)
        assert c.read_u8() == 0xAB
        assert c.position == 1
        assert c.read_u16() == 0xBEEF
        assert c.read_i16() == -2
        assert c.read_u32() == 0x9E2A83C1
        assert c.read_i32() == -7
        assert c.position == 13
        assert c.read_u64() == 2 ** 40
        assert c.read_i64() == -(2 ** 40)
        assert c.remaining == 0

    def test_read_past_end(self):
        """Reading more bytes than remain fails without moving."""
        c = ByteCursor(b'\x01\x02\x03')
        with pytest.raises(UnexpectedEndOfBuffer) as exc:
            c.read_i32()
        assert exc.value.offset == 0
        assert exc.value.wanted == 4
        assert exc.value.available == 3
        assert c.position == 0

    def test_guid(self):
        """GUIDs read as four 32-bit words."""
        c = ByteCursor(struct.pack('<4I', 1, 2, 3, 4))
        assert c.read_guid() == (1, 2, 3, 4)
        assert c.position == 16

    def test_bool_byte(self):
        """A single-byte boolean is true for any non-zero value."""
        c = ByteCursor(b'\x00\x02')
        assert c.read_bool_byte() is False
        assert c.read_bool_byte() is True


class TestBoolFromInt32:
    """Test 32-bit boolean decoding."""

    def test_zero_and_one(self):
        c = ByteCursor(Writer().i32(0).i32(1).getvalue())
        assert c.read_bool_from_int32() is False
        assert c.read_bool_from_int32() is True

    def test_strict_rejects_other_values(self):
        """Strict mode refuses values outside {0, 1}."""
        c = ByteCursor(Writer().i32(2).getvalue())
        with pytest.raises(MalformedInput):
            c.read_bool_from_int32()

    def test_lenient_coerces(self):
        """Lenient mode treats any non-zero value as true."""
        c = ByteCursor(Writer().i32(7).getvalue())
        assert c.read_bool_from_int32(strict=False) is True


class TestStrings:
    """Test FString decoding."""

    def test_empty(self):
        """Length 0 is the empty string and consumes only the length."""
        c = ByteCursor(Writer().i32(0).i32(99).getvalue())
        assert c.read_string() == ""
        assert c.position == 4

    def test_single_byte_string(self):
        """The trailing NUL is consumed but not returned."""
        data = Writer().string('Blueprint').i32(5).getvalue()
        c = ByteCursor(data)
        assert c.read_string() == 'Blueprint'
        assert c.position == 4 + len('Blueprint') + 1
        assert c.read_i32() == 5

    def test_utf8_content(self):
        """UTF-8 encoded content is decoded as written."""
        c = ByteCursor(Writer().string('Größe').getvalue())
        assert c.read_string() == 'Größe'

    def test_latin1_fallback(self):
        """Bytes that are not valid UTF-8 fall back to Latin-1."""
        c = ByteCursor(Writer().i32(3).raw(b'\xe9t\x00').getvalue())
        assert c.read_string() == 'ét'

    def test_only_terminator(self):
        c = ByteCursor(Writer().i32(1).raw(b'\x00').getvalue())
        assert c.read_string() == ""
        assert c.remaining == 0

    def test_ucs2_string(self):
        """Length -3 with 'Hi' and a NUL code unit decodes to 'Hi'."""
        data = Writer().i32(-3).raw('Hi'.encode('utf-16-le') + b'\x00\x00').getvalue()
        c = ByteCursor(data)
        assert c.read_string() == 'Hi'
        assert c.position == 4 + 6
        assert c.remaining == 0

    def test_ucs2_non_ascii(self):
        c = ByteCursor(Writer().string('Привет', wide=True).getvalue())
        assert c.read_string() == 'Привет'

    def test_truncated_string(self):
        """A length that runs past the buffer is an end-of-buffer error."""
        c = ByteCursor(Writer().i32(10).raw(b'abc').getvalue())
        with pytest.raises(UnexpectedEndOfBuffer):
            c.read_string()

    def test_truncated_ucs2_string(self):
        c = ByteCursor(Writer().i32(-4).raw(b'a\x00').getvalue())
        with pytest.raises(UnexpectedEndOfBuffer):
            c.read_string()


class TestArrays:
    """Test inline and deferred arrays."""

    def test_inline_array(self):
        c = ByteCursor(Writer().i32(3).i32(10).i32(20).i32(30).i32(-1).getvalue())
        assert c.read_inline_array(ByteCursor.read_i32) == [10, 20, 30]
        assert c.read_i32() == -1

    def test_negative_count(self):
        c = ByteCursor(Writer().i32(-2).getvalue())
        with pytest.raises(MalformedInput):
            c.read_inline_array(ByteCursor.read_i32)

    def test_deferred_array_restores_position(self):
        """The cursor ends right after the count/offset pair."""
        w = Writer()
        w.i32(2).i32(0)        # count, offset (patched)
        w.i32(0x1234)          # next inline field
        table = w.tell()
        w.string('None').string('Blueprint')
        w.patch_i32(4, table)

        c = ByteCursor(w.getvalue())
        assert c.read_deferred_array(ByteCursor.read_string) == ['None', 'Blueprint']
        assert c.position == 8
        assert c.read_i32() == 0x1234

    def test_deferred_array_before_declaration(self):
        """Tables may live before their declaration in the buffer."""
        w = Writer()
        w.i32(7).i32(8)        # table at offset 0
        declaration = w.tell()
        w.i32(2).i32(0)

        c = ByteCursor(w.getvalue(), declaration)
        assert c.read_deferred_array(ByteCursor.read_i32) == [7, 8]
        assert c.position == declaration + 8

    def test_deferred_array_restores_on_failure(self):
        """A failing element decode still restores the position."""
        w = Writer()
        w.i32(5).i32(8)        # five elements at offset 8, only one present
        w.i32(1)
        c = ByteCursor(w.getvalue())
        with pytest.raises(UnexpectedEndOfBuffer):
            c.read_deferred_array(ByteCursor.read_i32)
        assert c.position == 8

    def test_empty_deferred_array_ignores_offset(self):
        c = ByteCursor(Writer().i32(0).i32(5000).getvalue())
        assert c.read_deferred_array(ByteCursor.read_i32) == []
        assert c.position == 8

    def test_deferred_array_offset_out_of_range(self):
        c = ByteCursor(Writer().i32(1).i32(5000).getvalue())
        with pytest.raises(UnexpectedEndOfBuffer):
            c.read_deferred_array(ByteCursor.read_i32)
        assert c.position == 8


class TestPositioning:
    """Test seek, skip and snapshots."""

    def test_seek_to_end_is_allowed(self):
        c = ByteCursor(b'\x00' * 4)
        c.seek(4)
        assert c.remaining == 0

    def test_seek_past_end(self):
        c = ByteCursor(b'\x00' * 4)
        with pytest.raises(UnexpectedEndOfBuffer):
            c.seek(5)

    def test_seek_negative(self):
        c = ByteCursor(b'\x00' * 4)
        with pytest.raises(MalformedInput):
            c.position = -1

    def test_skip(self):
        c = ByteCursor(b'\x00' * 20)
        c.skip(16)
        assert c.position == 16
        with pytest.raises(UnexpectedEndOfBuffer):
            c.skip(5)
        assert c.position == 16

    def test_snapshot_restores_after_exception(self):
        c = ByteCursor(b'\x00' * 8)
        with pytest.raises(UnexpectedEndOfBuffer):
            with c.snapshot():
                c.seek(6)
                c.read_i32()
        assert c.position == 0
