"""Share code record encoder.

This module provides the encode_record() function that converts a share code
model to its raw, uncompressed binary record.
"""

from __future__ import annotations

import logging
from functools import partial
from operator import attrgetter
from typing import TYPE_CHECKING, Any, Callable

from ..exceptions import EncodeError
from .bitbuffer import BitBuffer
from .items import ITEM_SLOT_SIZE, encode_item_slot
from .layout import LAYOUT_V8, RECORD_SIZE_V8, UNEQUIPPED_ITEM_SLOTS, FieldLayout
from .ranks import PACKED_RANKS_SIZE, pack_ranks

if TYPE_CHECKING:
    from ..models.base import BaseShareCode

logger = logging.getLogger(__name__)

FieldWriter = Callable[[BitBuffer, FieldLayout, Any], None]


def encode_record(share_code: BaseShareCode) -> bytes:
    """Encode a share code model to its raw record.

    The record starts zeroed and every field is written in layout order.

    Args:
        share_code: Share code model instance to encode

    Returns:
        Uncompressed record bytes

    Raises:
        EncodeError: If the format is unknown or a field value cannot be stored

    Example:
        >>> record = encode_record(ShareCodeV8())
        >>> len(record)
        424
    """
    marker = type(share_code).sharecode_version
    record_format = _RECORD_FORMATS.get(marker) if marker is not None else None
    if record_format is None:
        raise EncodeError(f"No record format for {type(share_code).__name__} (version {marker!r})")

    record_size, fields = record_format
    buffer = BitBuffer(record_size)

    for field_name, getter, writer in fields:
        field = _LAYOUTS[marker][field_name]
        try:
            writer(buffer, field, getter(share_code))
        except (ValueError, IndexError, TypeError, AttributeError) as e:
            raise EncodeError(f"Field {field_name}: {e}") from e

    logger.debug("Encoded %s record (%d bytes)", type(share_code).__name__, record_size)
    return buffer.to_bytes()


def _flatten(value: Any) -> list[Any]:
    """Flatten nested lists into a single row-major list."""
    if isinstance(value, (list, tuple)):
        flat: list[Any] = []
        for element in value:
            flat.extend(_flatten(element))
        return flat
    return [value]


def _write_byte_values(buffer: BitBuffer, field: FieldLayout, value: Any) -> None:
    values = _flatten(value)
    if len(values) != field.length:
        raise ValueError(f"expected {field.length} values, got {len(values)}")

    for i, byte_value in enumerate(values):
        buffer.write_uint(field.bit_offset + i * 8, 8, byte_value)


def _write_items(
    buffer: BitBuffer, field: FieldLayout, value: Any, slots: int | None = None
) -> None:
    items = _flatten(value)
    expected = field.length // ITEM_SLOT_SIZE if slots is None else slots
    if len(items) != expected:
        raise ValueError(f"expected {expected} items, got {len(items)}")

    for i, item in enumerate(items):
        buffer.write_bytes(field.offset + i * ITEM_SLOT_SIZE, encode_item_slot(item.item_id))


def _write_rank_columns(buffer: BitBuffer, field: FieldLayout, columns: Any) -> None:
    expected = field.length // PACKED_RANKS_SIZE
    if len(columns) != expected:
        raise ValueError(f"expected {expected} rank columns, got {len(columns)}")

    for i, column in enumerate(columns):
        buffer.write_bytes(field.offset + i * PACKED_RANKS_SIZE, pack_ranks(column))


_V8_FIELDS: tuple[tuple[str, Callable[[Any], Any], FieldWriter], ...] = (
    ("version", attrgetter("version"), _write_byte_values),
    ("unitItems", attrgetter("unit_items"), _write_items),
    ("boardUnitIDs", attrgetter("board_unit_ids"), _write_byte_values),
    ("selectedTalents", attrgetter("selected_talents"), _write_byte_values),
    ("packedUnitRanks", attrgetter("unit_ranks"), _write_rank_columns),
    ("benchUnitItems", attrgetter("bench_unit_items"), _write_items),
    ("benchedUnitIDs", attrgetter("benched_unit_ids"), _write_byte_values),
    ("packedBenchUnitRanks", lambda code: [code.bench_unit_ranks], _write_rank_columns),
    ("underlordIDs", attrgetter("underlord_ids"), _write_byte_values),
    ("underlordRanks", attrgetter("underlord_ranks"), _write_byte_values),
    (
        "unequippedItems",
        attrgetter("unequipped_items"),
        partial(_write_items, slots=UNEQUIPPED_ITEM_SLOTS),
    ),
)

_LAYOUTS: dict[str, dict[str, FieldLayout]] = {"8": LAYOUT_V8}
_RECORD_FORMATS = {"8": (RECORD_SIZE_V8, _V8_FIELDS)}
