"""underlords: Dota Underlords share code codec

A Python library for reading and writing the share codes Dota Underlords uses
to exchange board snapshots as text. A share code is a version marker followed
by a base64 encoded, snappy compressed, fixed-size binary record.

Key Features:
- Pydantic-based board model
- Bit-exact record layout, including packed unit ranks
- Version dispatch keyed by the share code marker

Quick Start:
    >>> from underlords import ShareCodeV8, EquippedItem, decode_sharecode
    >>>
    >>> board = ShareCodeV8()
    >>> board.board_unit_ids[0][0] = 32
    >>> board.unit_items[0][0] = EquippedItem(item_id=10211)
    >>> code = board.to_share_code()
    >>> decode_sharecode(code) == board
    True
"""

from __future__ import annotations

import logging

from .codec import (
    RECORD_LAYOUT_V8,
    RECORD_SIZE_V8,
    BitBuffer,
    FieldLayout,
    decode_item_slot,
    decode_record,
    encode_item_slot,
    encode_record,
    field_sizes,
    pack_ranks,
    unpack_ranks,
)
from .exceptions import (
    Base64DecodeError,
    CorruptShareCodeError,
    DecodeError,
    DecompressionError,
    EncodeError,
    UnderlordsError,
    UnexpectedRecordLengthError,
    UnsupportedVersionError,
)
from .framing import peek_marker, unwrap_record, wrap_record
from .models import BaseShareCode, EquippedItem, ShareCodeV8
from .registry import SHARECODE_REGISTRY, decode_sharecode, encode_sharecode, register_sharecode

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "ShareCodeV8",
    "EquippedItem",
    "BaseShareCode",
    "decode_sharecode",
    "encode_sharecode",
    "register_sharecode",
    "SHARECODE_REGISTRY",
    # Record codec
    "encode_record",
    "decode_record",
    "BitBuffer",
    "FieldLayout",
    "RECORD_LAYOUT_V8",
    "RECORD_SIZE_V8",
    "field_sizes",
    "encode_item_slot",
    "decode_item_slot",
    "pack_ranks",
    "unpack_ranks",
    # Envelope
    "wrap_record",
    "unwrap_record",
    "peek_marker",
    # Exceptions
    "UnderlordsError",
    "EncodeError",
    "DecodeError",
    "UnsupportedVersionError",
    "CorruptShareCodeError",
    "Base64DecodeError",
    "DecompressionError",
    "UnexpectedRecordLengthError",
    # Version
    "__version__",
]
