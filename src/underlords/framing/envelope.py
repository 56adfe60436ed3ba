"""Share code envelope.

The envelope turns a raw record into copyable text:

- [Version marker (1 character)] [base64(snappy block(record))]
"""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Optional

import snappy

from ..codec.layout import RECORD_SIZE_V8
from ..exceptions import (
    Base64DecodeError,
    DecompressionError,
    UnexpectedRecordLengthError,
    UnsupportedVersionError,
)

logger = logging.getLogger(__name__)

DEFAULT_MARKER = "8"


def peek_marker(code: str) -> str:
    """Return the version marker of a share code without decoding it.

    Raises:
        UnsupportedVersionError: If the code is empty
    """
    if not code:
        raise UnsupportedVersionError("Empty share code has no version marker")
    return code[0]


def wrap_record(record: bytes, *, marker: str = DEFAULT_MARKER) -> str:
    """Compress, base64-encode and tag a raw record.

    Args:
        record: Uncompressed record bytes
        marker: Version marker character to prepend

    Returns:
        Share code text

    Example:
        >>> wrap_record(bytes(424))
        '8qAMAAP4BAP4BAP4BAP4BAP4BAP4BAJoBAA=='
    """
    if len(marker) != 1:
        raise ValueError(f"Version marker must be a single character, got {marker!r}")

    compressed = snappy.compress(bytes(record))
    code = marker + base64.b64encode(compressed).decode("ascii")

    logger.debug(
        "Wrapped %d-byte record into %d-character share code", len(record), len(code)
    )
    return code


def unwrap_record(
    code: str,
    *,
    marker: str = DEFAULT_MARKER,
    record_size: Optional[int] = RECORD_SIZE_V8,
) -> bytes:
    """Check the marker of a share code and recover its raw record.

    The marker is checked before anything else; a code of another version is
    rejected without looking at its payload.

    Args:
        code: Share code text
        marker: Expected version marker character
        record_size: Expected record size in bytes, or None to skip the check

    Returns:
        Uncompressed record bytes

    Raises:
        UnsupportedVersionError: If the code is empty or has another marker
        Base64DecodeError: If the payload is not valid base64
        DecompressionError: If the payload is not a valid snappy block
        UnexpectedRecordLengthError: If the record has the wrong size

    Example:
        >>> unwrap_record("8qAMAAP4BAP4BAP4BAP4BAP4BAP4BAJoBAA==") == bytes(424)
        True
    """
    found = peek_marker(code)
    if found != marker:
        raise UnsupportedVersionError(
            f"Unsupported share code version {found!r}, expected {marker!r}"
        )

    try:
        compressed = base64.b64decode(code[1:], validate=True)
    except (binascii.Error, ValueError) as e:
        raise Base64DecodeError(f"Share code payload is not valid base64: {e}") from e

    try:
        record = snappy.uncompress(compressed)
    except (snappy.UncompressError, ValueError) as e:
        raise DecompressionError(f"Share code payload is not a valid snappy block: {e}") from e

    if record_size is not None and len(record) != record_size:
        raise UnexpectedRecordLengthError(
            f"Decompressed record is {len(record)} bytes, expected {record_size}"
        )

    logger.debug("Unwrapped version %s share code into %d-byte record", marker, len(record))
    return bytes(record)
