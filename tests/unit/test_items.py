"""Unit tests for the item slot codec."""

from __future__ import annotations

import pytest

from underlords.codec.items import ITEM_SLOT_SIZE, decode_item_slot, encode_item_slot


class TestEncodeItemSlot:
    """Test item slot encoding."""

    def test_low_byte_first(self) -> None:
        """Test the ID is stored low byte first with a zero reserved byte."""
        assert encode_item_slot(10211) == b"\xe3\x27\x00"
        assert encode_item_slot(0) == b"\x00\x00\x00"
        assert encode_item_slot(0xFFFF) == b"\xff\xff\x00"

    def test_slot_size(self) -> None:
        """Test every slot is 3 bytes."""
        assert len(encode_item_slot(1)) == ITEM_SLOT_SIZE == 3

    @pytest.mark.parametrize("item_id", [-1, 0x10000])
    def test_out_of_range(self, item_id: int) -> None:
        """Test IDs that do not fit in 16 bits."""
        with pytest.raises(ValueError, match="Item ID"):
            encode_item_slot(item_id)


class TestDecodeItemSlot:
    """Test item slot decoding."""

    def test_decode(self) -> None:
        """Test decoding a slot."""
        assert decode_item_slot(b"\xe3\x27\x00") == 10211
        assert decode_item_slot(b"\x00\x01\x00") == 256

    def test_reserved_byte_ignored(self) -> None:
        """Test a non-zero reserved byte is read but discarded."""
        assert decode_item_slot(b"\xe3\x27\xff") == 10211
        assert encode_item_slot(decode_item_slot(b"\xe3\x27\xff")) == b"\xe3\x27\x00"

    def test_wrong_length(self) -> None:
        """Test slots must be exactly 3 bytes."""
        with pytest.raises(ValueError, match="3 bytes"):
            decode_item_slot(b"\x01\x02")


def test_roundtrip_every_item_id() -> None:
    """Test every 16-bit item ID survives a round trip."""
    for item_id in range(0x10000):
        assert decode_item_slot(encode_item_slot(item_id)) == item_id
