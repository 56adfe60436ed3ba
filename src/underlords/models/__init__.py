"""Pydantic share code modeling for underlords.

This module provides the BaseShareCode class, the concrete share code
formats and field utilities.
"""

from __future__ import annotations

from .base import BaseShareCode, EquippedItem
from .fields import BoundedInt, ByteInt, FixedList, ItemID
from .v8 import ShareCodeV8

__all__ = [
    "BaseShareCode",
    "EquippedItem",
    "ShareCodeV8",
    "BoundedInt",
    "ByteInt",
    "FixedList",
    "ItemID",
]
