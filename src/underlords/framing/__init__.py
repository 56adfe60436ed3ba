"""Share code envelope utilities for underlords.

This module provides the version marker, compression and base64 wrapping
that turns a raw record into share code text.
"""

from __future__ import annotations

from .envelope import peek_marker, unwrap_record, wrap_record

__all__ = [
    "wrap_record",
    "unwrap_record",
    "peek_marker",
]
