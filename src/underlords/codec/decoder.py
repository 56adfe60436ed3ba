"""Share code record decoder.

This module provides the decode_record() function that converts a raw,
uncompressed binary record back to a share code model.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ..exceptions import DecodeError, UnexpectedRecordLengthError
from .bitbuffer import BitBuffer
from .items import ITEM_SLOT_SIZE, decode_item_slot
from .layout import (
    BOARD_CELL_NUM,
    LAYOUT_V8,
    PLAYER_COUNT,
    RECORD_SIZE_V8,
    UNEQUIPPED_ITEM_SLOTS,
    FieldLayout,
)
from .ranks import PACKED_RANKS_SIZE, unpack_ranks

if TYPE_CHECKING:
    from ..models.base import BaseShareCode

    T = TypeVar("T", bound=BaseShareCode)

logger = logging.getLogger(__name__)

FieldReader = Callable[[BitBuffer, FieldLayout], Any]


def decode_record(message_class: type[T], data: bytes) -> T:
    """Decode a raw record to a share code model.

    Every field is read in layout order before the model is constructed, so
    no partially decoded object is ever returned.

    Args:
        message_class: Share code class to decode to
        data: Uncompressed record bytes

    Returns:
        Decoded share code instance

    Raises:
        UnexpectedRecordLengthError: If data is not exactly one record long
        DecodeError: If the format is unknown or a field cannot be decoded

    Example:
        >>> code = decode_record(ShareCodeV8, bytes(424))
        >>> code.underlord_ids
        [0, 0]
    """
    marker = message_class.sharecode_version
    record_format = _RECORD_FORMATS.get(marker) if marker is not None else None
    if record_format is None:
        raise DecodeError(f"No record format for {message_class.__name__} (version {marker!r})")

    record_size, fields = record_format
    if len(data) != record_size:
        raise UnexpectedRecordLengthError(
            f"Expected a {record_size}-byte record, got {len(data)} bytes"
        )

    buffer = BitBuffer.from_bytes(data)

    field_values: dict[str, Any] = {}
    for field_name, attribute, reader in fields:
        field = _LAYOUTS[marker][field_name]
        try:
            field_values[attribute] = reader(buffer, field)
        except IndexError as e:
            raise DecodeError(f"Truncated data while decoding field {field_name}: {e}") from e
        except Exception as e:
            raise DecodeError(f"Error decoding field {field_name}: {e}") from e

    try:
        decoded = message_class(**field_values)
    except Exception as e:
        raise DecodeError(f"Failed to construct {message_class.__name__}: {e}") from e

    logger.debug("Decoded %s record (%d bytes)", message_class.__name__, record_size)
    return decoded


def _rows(values: list[Any], cols: int | None) -> list[Any]:
    """Split a row-major list into rows of ``cols`` values (or keep it flat)."""
    if cols is None:
        return values
    return [values[i : i + cols] for i in range(0, len(values), cols)]


def _read_byte(buffer: BitBuffer, field: FieldLayout) -> int:
    return buffer.read_uint(field.bit_offset, 8)


def _read_byte_values(buffer: BitBuffer, field: FieldLayout, cols: int | None = None) -> list[Any]:
    values = [buffer.read_uint(field.bit_offset + i * 8, 8) for i in range(field.length)]
    return _rows(values, cols)


def _read_items(
    buffer: BitBuffer, field: FieldLayout, cols: int | None = None, slots: int | None = None
) -> list[Any]:
    if slots is None:
        slots = field.length // ITEM_SLOT_SIZE
    offsets = range(field.offset, field.offset + slots * ITEM_SLOT_SIZE, ITEM_SLOT_SIZE)
    items = [
        {"item_id": decode_item_slot(buffer.read_bytes(offset, ITEM_SLOT_SIZE))}
        for offset in offsets
    ]
    return _rows(items, cols)


def _read_rank_columns(buffer: BitBuffer, field: FieldLayout) -> list[list[int]]:
    return [
        unpack_ranks(buffer.read_bytes(offset, PACKED_RANKS_SIZE))
        for offset in range(field.offset, field.end, PACKED_RANKS_SIZE)
    ]


def _read_rank_column(buffer: BitBuffer, field: FieldLayout) -> list[int]:
    (column,) = _read_rank_columns(buffer, field)
    return column


_V8_FIELDS: tuple[tuple[str, str, FieldReader], ...] = (
    ("version", "version", _read_byte),
    ("unitItems", "unit_items", partial(_read_items, cols=BOARD_CELL_NUM)),
    ("boardUnitIDs", "board_unit_ids", partial(_read_byte_values, cols=BOARD_CELL_NUM)),
    ("selectedTalents", "selected_talents", partial(_read_byte_values, cols=PLAYER_COUNT)),
    ("packedUnitRanks", "unit_ranks", _read_rank_columns),
    ("benchUnitItems", "bench_unit_items", _read_items),
    ("benchedUnitIDs", "benched_unit_ids", _read_byte_values),
    ("packedBenchUnitRanks", "bench_unit_ranks", _read_rank_column),
    ("underlordIDs", "underlord_ids", _read_byte_values),
    ("underlordRanks", "underlord_ranks", _read_byte_values),
    (
        "unequippedItems",
        "unequipped_items",
        partial(_read_items, cols=PLAYER_COUNT, slots=UNEQUIPPED_ITEM_SLOTS),
    ),
)

_LAYOUTS: dict[str, dict[str, FieldLayout]] = {"8": LAYOUT_V8}
_RECORD_FORMATS = {"8": (RECORD_SIZE_V8, _V8_FIELDS)}
