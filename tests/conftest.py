"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from underlords import ShareCodeV8

DEFAULT_CODE = "8qAMAAP4BAP4BAP4BAP4BAP4BAP4BAJoBAA=="

KNOWN_CODE = (
    "8qAMAAP4BAK4BAATjJ/5uAEZuAAAgEVM0LgAAAG0AbQAACwAAAP8BDAABCRsI/wAJARcBAQAOAQUBAQAGES0QbUBHOlcBEmoB"
    "AAFIACABaBABAyAAEAEpLAIgIAAwAAAGAgEgAAWCAHUR2gB0EQkBAQRjAAVyLBAAAgABBAMGdycAdy4fAK4BAA=="
)


@pytest.fixture
def default_code() -> str:
    """Share code of an empty board."""
    return DEFAULT_CODE


@pytest.fixture
def known_code() -> str:
    """Share code of a real board with units, items, talents and underlords."""
    return KNOWN_CODE


@pytest.fixture
def known_board(known_code: str) -> ShareCodeV8:
    """Decoded known share code."""
    return ShareCodeV8.from_share_code(known_code)
