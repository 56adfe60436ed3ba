"""Static byte layout of the version 8 share code record.

Every field of the record lives at a fixed byte offset. Fields are listed in
the order they are encoded and decoded.
"""

from __future__ import annotations

from dataclasses import dataclass

# Grid dimensions
BOARD_CELL_NUM = 8
MAX_TALENTS = 16
MAX_UNEQUIPPED_ITEMS = 8
PLAYER_COUNT = 2

# unequippedItems holds 20 slots worth of bytes but only the first 16 are used
UNEQUIPPED_ITEM_SLOTS = MAX_UNEQUIPPED_ITEMS * PLAYER_COUNT

RECORD_SIZE_V8 = 424


@dataclass(frozen=True)
class FieldLayout:
    """Position of a single field inside the record.

    Attributes:
        name: Field name as used in the record format
        offset: Byte offset from the start of the record
        length: Field length in bytes
    """

    name: str
    offset: int
    length: int

    @property
    def end(self) -> int:
        """Byte offset one past the last byte of the field."""
        return self.offset + self.length

    @property
    def bit_offset(self) -> int:
        return self.offset * 8

    @property
    def bit_length(self) -> int:
        return self.length * 8


RECORD_LAYOUT_V8: tuple[FieldLayout, ...] = (
    FieldLayout("version", 0, 1),
    FieldLayout("unitItems", 1, 192),  # 8 x 8 x 3
    FieldLayout("boardUnitIDs", 193, 64),  # 8 x 8
    FieldLayout("selectedTalents", 257, 32),  # 16 x 2
    # 289..291 unused
    FieldLayout("packedUnitRanks", 292, 32),  # 8 rows x uint32
    FieldLayout("benchUnitItems", 324, 24),  # 8 x 3
    FieldLayout("benchedUnitIDs", 348, 8),
    FieldLayout("packedBenchUnitRanks", 356, 4),
    FieldLayout("underlordIDs", 360, 2),
    FieldLayout("underlordRanks", 362, 2),
    FieldLayout("unequippedItems", 364, 60),  # 8 x 2 x 3, then 412..423 unused
)

LAYOUT_V8: dict[str, FieldLayout] = {field.name: field for field in RECORD_LAYOUT_V8}


def _check_layout(layout: tuple[FieldLayout, ...], record_size: int) -> None:
    previous_end = 0
    for field in layout:
        if field.offset < previous_end:
            raise AssertionError(f"Field {field.name} overlaps the previous field")
        previous_end = field.end
    if previous_end != record_size:
        raise AssertionError(f"Layout ends at byte {previous_end}, expected {record_size}")


_check_layout(RECORD_LAYOUT_V8, RECORD_SIZE_V8)


def field_sizes(layout: tuple[FieldLayout, ...] = RECORD_LAYOUT_V8) -> dict[str, int]:
    """Get the size in bytes of each field in a record layout.

    Args:
        layout: Record layout to analyze (defaults to version 8)

    Returns:
        Dictionary mapping field names to their size in bytes, in record order

    Example:
        >>> field_sizes()["unitItems"]
        192
    """
    return {field.name: field.length for field in layout}
