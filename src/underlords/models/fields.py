"""Field type helpers and utilities.

This module provides convenience functions and type aliases for defining
share code fields with storage-width constraints.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, cast

from pydantic import Field
from pydantic.fields import FieldInfo


def BoundedInt(*, ge: int | None = None, le: int | None = None, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() for values that
    must fit a fixed number of bits in the record.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Message(BaseShareCode):
        ...     unit_id: Annotated[int, BoundedInt(ge=0, le=255)]
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


def FixedList(*, length: int, **kwargs: Any) -> FieldInfo:
    """Create a fixed-length list field.

    Args:
        length: Exact number of elements
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Message(BaseShareCode):
        ...     underlord_ids: Annotated[list[ByteInt], FixedList(length=2)]
    """
    return cast(FieldInfo, Field(min_length=length, max_length=length, **kwargs))


# One byte of the record
ByteInt = Annotated[int, BoundedInt(ge=0, le=0xFF)]

# Item IDs occupy the low 16 bits of a 3-byte slot
ItemID = Annotated[int, BoundedInt(ge=0, le=0xFFFF)]


def zero_list(length: int) -> Callable[[], list[int]]:
    """Return a default factory building a list of ``length`` zeros."""
    return lambda: [0] * length


def zero_grid(rows: int, cols: int) -> Callable[[], list[list[int]]]:
    """Return a default factory building a ``rows`` x ``cols`` grid of zeros."""
    return lambda: [[0] * cols for _ in range(rows)]
