"""Unit tests for share code version dispatch."""

from __future__ import annotations

from typing import ClassVar

import pytest

from underlords import (
    BaseShareCode,
    ShareCodeV8,
    UnsupportedVersionError,
    decode_sharecode,
    encode_sharecode,
    register_sharecode,
)
from underlords import registry


@pytest.fixture
def isolated_registry(monkeypatch: pytest.MonkeyPatch) -> dict[str, type[BaseShareCode]]:
    """Registry copy that is discarded after the test."""
    snapshot = dict(registry.SHARECODE_REGISTRY)
    monkeypatch.setattr(registry, "SHARECODE_REGISTRY", snapshot)
    return snapshot


class TestRegisterSharecode:
    """Test registering share code classes."""

    def test_v8_registered(self) -> None:
        """Test version 8 is available on import."""
        assert registry.SHARECODE_REGISTRY["8"] is ShareCodeV8

    def test_register_idempotent(self, isolated_registry: dict[str, type[BaseShareCode]]) -> None:
        """Test registering the same class twice is a no-op."""
        register_sharecode(ShareCodeV8)

        assert isolated_registry == {"8": ShareCodeV8}

    def test_register_conflict(self, isolated_registry: dict[str, type[BaseShareCode]]) -> None:
        """Test two classes cannot share a marker."""

        class OtherV8(BaseShareCode):
            sharecode_version: ClassVar[str | None] = "8"

        with pytest.raises(ValueError, match="already registered to ShareCodeV8"):
            register_sharecode(OtherV8)

    def test_register_without_marker(
        self, isolated_registry: dict[str, type[BaseShareCode]]
    ) -> None:
        """Test classes must declare a marker."""

        class Unversioned(BaseShareCode):
            pass

        with pytest.raises(ValueError, match="no sharecode_version"):
            register_sharecode(Unversioned)

    def test_register_new_version(
        self, isolated_registry: dict[str, type[BaseShareCode]]
    ) -> None:
        """Test a new marker is added to the registry."""

        class ShareCodeV9(BaseShareCode):
            sharecode_version: ClassVar[str | None] = "9"

        register_sharecode(ShareCodeV9)

        assert isolated_registry["9"] is ShareCodeV9


class TestDecodeSharecode:
    """Test decoding by marker."""

    def test_dispatch(self, known_code: str, known_board: ShareCodeV8) -> None:
        """Test a version 8 code decodes to ShareCodeV8."""
        board = decode_sharecode(known_code)

        assert isinstance(board, ShareCodeV8)
        assert board == known_board

    @pytest.mark.parametrize("code", ["7unnecessaryContent", "dummyContent", ""])
    def test_unsupported_version(self, code: str) -> None:
        """Test unknown markers and empty codes."""
        with pytest.raises(UnsupportedVersionError):
            decode_sharecode(code)

    def test_error_lists_versions(self) -> None:
        """Test the error names the registered versions."""
        with pytest.raises(UnsupportedVersionError, match=r"Registered versions: \['8'\]"):
            decode_sharecode("7abc")


def test_encode_sharecode(default_code: str) -> None:
    """Test encoding uses the model's own version."""
    assert encode_sharecode(ShareCodeV8()) == default_code
