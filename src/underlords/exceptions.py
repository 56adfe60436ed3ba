"""Exception hierarchy for underlords.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UnderlordsError for easy catching of any
share code error.
"""

from __future__ import annotations


class UnderlordsError(Exception):
    """Base exception for all underlords errors."""

    pass


class EncodeError(UnderlordsError):
    """Raised when encoding a share code fails.

    Examples:
        - Item ID does not fit in 16 bits
        - Unit ID, talent or underlord value does not fit in one byte
        - Grid has the wrong dimensions
    """

    pass


class DecodeError(UnderlordsError):
    """Raised when decoding a share code fails.

    Catch this to handle any malformed input. Use the subclasses to tell an
    unsupported version apart from a corrupt code.
    """

    pass


class UnsupportedVersionError(DecodeError):
    """Raised when the share code does not start with a known version marker.

    Examples:
        - Empty input
        - Share code of an older format (e.g. leading "7")
        - Arbitrary text without a marker
    """

    pass


class CorruptShareCodeError(DecodeError):
    """Raised when a share code has a supported version but cannot be read."""

    pass


class Base64DecodeError(CorruptShareCodeError):
    """Raised when the share code payload is not valid base64."""

    pass


class DecompressionError(CorruptShareCodeError):
    """Raised when the compressed payload is not a valid snappy block."""

    pass


class UnexpectedRecordLengthError(CorruptShareCodeError):
    """Raised when the decompressed record does not have the expected size.

    Examples:
        - Truncated record (fewer than 424 bytes for version 8)
        - Trailing data after the record
    """

    pass
