"""Equipped item slot codec.

Each item slot is 3 bytes: the 16-bit item ID stored low byte first, followed
by one reserved byte. The reserved byte is always written as zero and ignored
when reading, so any non-zero content it carries is lost on re-encode.
"""

from __future__ import annotations

ITEM_SLOT_SIZE = 3
MAX_ITEM_ID = 0xFFFF


def encode_item_slot(item_id: int) -> bytes:
    """Encode an item ID into its 3-byte slot.

    Args:
        item_id: Item ID (0-65535)

    Returns:
        ``[low(id), high(id), 0x00]``

    Raises:
        ValueError: If item_id is out of range

    Example:
        >>> encode_item_slot(10211).hex()
        'e32700'
    """
    if not 0 <= item_id <= MAX_ITEM_ID:
        raise ValueError(f"Item ID must be 0-{MAX_ITEM_ID}, got {item_id}")

    return bytes((item_id & 0xFF, (item_id >> 8) & 0xFF, 0x00))


def decode_item_slot(slot: bytes) -> int:
    """Decode a 3-byte item slot into its item ID.

    Args:
        slot: Exactly 3 bytes

    Returns:
        Item ID (0-65535)

    Raises:
        ValueError: If slot is not 3 bytes long
    """
    if len(slot) != ITEM_SLOT_SIZE:
        raise ValueError(f"Item slot must be {ITEM_SLOT_SIZE} bytes, got {len(slot)}")

    return slot[1] * 256 + slot[0]
