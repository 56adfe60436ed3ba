"""Share code version dispatch.

Each share code format registers under its version marker character, so a
share code can be decoded without knowing its format in advance.
"""

from __future__ import annotations

import logging

from .exceptions import UnsupportedVersionError
from .framing.envelope import peek_marker
from .models.base import BaseShareCode
from .models.v8 import ShareCodeV8

logger = logging.getLogger(__name__)

# Global registry: version marker -> share code class
SHARECODE_REGISTRY: dict[str, type[BaseShareCode]] = {}


def register_sharecode(sharecode_class: type[BaseShareCode]) -> None:
    """Register a share code class for decoding by version marker.

    Args:
        sharecode_class: Share code class with a sharecode_version attribute

    Raises:
        ValueError: If the class has no marker or the marker is already
            registered to another class

    Example:
        >>> register_sharecode(ShareCodeV8)
        >>> SHARECODE_REGISTRY["8"] is ShareCodeV8
        True
    """
    marker = getattr(sharecode_class, "sharecode_version", None)
    if marker is None:
        raise ValueError(
            f"{sharecode_class.__name__} has no sharecode_version attribute. "
            f"Cannot register for decoding."
        )

    existing = SHARECODE_REGISTRY.get(marker)
    if existing is not None:
        if existing is not sharecode_class:
            raise ValueError(
                f"Version {marker!r} already registered to {existing.__name__}. "
                f"Cannot register {sharecode_class.__name__} with the same version."
            )
        # Already registered, no-op
        return

    SHARECODE_REGISTRY[marker] = sharecode_class
    logger.debug("Registered %s for share code version %r", sharecode_class.__name__, marker)


def decode_sharecode(code: str) -> BaseShareCode:
    """Decode a share code of any registered version.

    Args:
        code: Share code text

    Returns:
        Decoded share code (type determined by the version marker)

    Raises:
        UnsupportedVersionError: If the code is empty or its marker is not registered
        CorruptShareCodeError: If the payload cannot be read

    Example:
        >>> board = decode_sharecode("8qAMAAP4BAP4BAP4BAP4BAP4BAP4BAJoBAA==")
        >>> isinstance(board, ShareCodeV8)
        True
    """
    marker = peek_marker(code)

    sharecode_class = SHARECODE_REGISTRY.get(marker)
    if sharecode_class is None:
        registered = sorted(SHARECODE_REGISTRY)
        raise UnsupportedVersionError(
            f"Unsupported share code version {marker!r}. Registered versions: {registered}"
        )

    return sharecode_class.from_share_code(code)


def encode_sharecode(share_code: BaseShareCode) -> str:
    """Encode a share code model to text using its own version."""
    return share_code.to_share_code()


register_sharecode(ShareCodeV8)
