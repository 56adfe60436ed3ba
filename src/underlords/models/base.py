"""Base share code class and underlords-specific Pydantic configuration.

This module provides the BaseShareCode class that every share code format
inherits from, together with the EquippedItem slot model.
"""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

from .fields import ItemID

S = TypeVar("S", bound="BaseShareCode")

_MODEL_CONFIG = ConfigDict(
    # Lax mode so decoded values coerce into item models
    strict=False,
    # Validate on assignment
    validate_assignment=True,
    # Forbid extra fields not defined in schema
    extra="forbid",
)


class EquippedItem(BaseModel):
    """An item held in a unit, bench or reserve slot.

    Attributes:
        item_id: Item ID (0 means no item)
    """

    model_config = _MODEL_CONFIG

    item_id: ItemID = 0


class BaseShareCode(BaseModel):
    """Base class for all share code formats.

    Subclasses declare their fields with Pydantic constraints and describe
    their wire format through ClassVar attributes:

    Attributes:
        sharecode_version: Envelope marker character identifying the format
        sharecode_record_size: Size in bytes of the uncompressed record
    """

    model_config = _MODEL_CONFIG

    sharecode_version: ClassVar[str | None] = None
    sharecode_record_size: ClassVar[int | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Check the format options of concrete share code classes."""
        super().__init_subclass__(**kwargs)

        marker = cls.__dict__.get("sharecode_version")
        if marker is not None and (len(marker) != 1 or not marker.isascii()):
            raise TypeError(
                f"{cls.__name__}.sharecode_version must be a single ASCII character, "
                f"got {marker!r}"
            )

    def to_bytes(self) -> bytes:
        """Return the raw uncompressed record."""
        from ..codec.encoder import encode_record

        return encode_record(self)

    @classmethod
    def from_bytes(cls: type[S], data: bytes) -> S:
        """Decode a raw uncompressed record."""
        from ..codec.decoder import decode_record

        return decode_record(cls, data)

    def to_share_code(self) -> str:
        """Return the share code text for this board.

        Example:
            >>> ShareCodeV8().to_share_code()
            '8qAMAAP4BAP4BAP4BAP4BAP4BAP4BAJoBAA=='
        """
        from ..framing.envelope import wrap_record

        return wrap_record(self.to_bytes(), marker=self._marker())

    @classmethod
    def from_share_code(cls: type[S], code: str) -> S:
        """Decode share code text.

        Raises:
            UnsupportedVersionError: If the code is not of this format
            CorruptShareCodeError: If the payload cannot be read
        """
        from ..framing.envelope import unwrap_record

        record = unwrap_record(
            code, marker=cls._marker(), record_size=cls.sharecode_record_size
        )
        return cls.from_bytes(record)

    @classmethod
    def _marker(cls) -> str:
        if cls.sharecode_version is None:
            raise TypeError(f"{cls.__name__} does not define sharecode_version")
        return cls.sharecode_version

    def __str__(self) -> str:
        return self.to_share_code()
