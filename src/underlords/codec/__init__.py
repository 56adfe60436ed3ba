"""Binary record codec for underlords.

This module provides the bit buffer, the record layout, the item slot and
rank sub-codecs, and the whole-record encode/decode functions.
"""

from __future__ import annotations

from .bitbuffer import BitBuffer
from .decoder import decode_record
from .encoder import encode_record
from .items import decode_item_slot, encode_item_slot
from .layout import RECORD_LAYOUT_V8, RECORD_SIZE_V8, FieldLayout, field_sizes
from .ranks import pack_ranks, unpack_ranks

__all__ = [
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
]
