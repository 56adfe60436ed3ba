"""Bit-addressable record buffer.

This module provides random-access bit manipulation over a fixed-size byte
buffer. All bit ranges are read and written most-significant-bit first.
"""

from __future__ import annotations


class BitBuffer:
    """Fixed-length, zero-initialised buffer addressable by bit offset.

    Unlike a stream packer, every read and write names its absolute position,
    so fields can be filled in any order.

    Example:
        >>> buf = BitBuffer(2)
        >>> buf.write_uint(0, 4, 0b1010)
        >>> buf.write_uint(12, 4, 0xF)
        >>> buf.to_bytes()
        b'\\xa0\\x0f'
        >>> buf.read_uint(0, 8)
        160
    """

    def __init__(self, size_bytes: int) -> None:
        """Initialize a zeroed buffer.

        Args:
            size_bytes: Buffer length in bytes (must be >= 0)
        """
        if size_bytes < 0:
            raise ValueError(f"size_bytes must be non-negative, got {size_bytes}")
        self._data = bytearray(size_bytes)

    @classmethod
    def from_bytes(cls, data: bytes) -> BitBuffer:
        """Create a buffer holding a copy of ``data``."""
        buffer = cls(0)
        buffer._data = bytearray(data)
        return buffer

    def bit_length(self) -> int:
        """Return the buffer length in bits."""
        return len(self._data) * 8

    def __len__(self) -> int:
        return len(self._data)

    def _check_range(self, offset_bits: int, num_bits: int) -> None:
        if num_bits < 1:
            raise ValueError(f"num_bits must be positive, got {num_bits}")
        if offset_bits < 0 or offset_bits + num_bits > self.bit_length():
            raise IndexError(
                f"Bit range [{offset_bits}, {offset_bits + num_bits}) outside buffer "
                f"of {self.bit_length()} bits"
            )

    def read_uint(self, offset_bits: int, num_bits: int) -> int:
        """Read an unsigned integer from a bit range.

        Args:
            offset_bits: Absolute position of the first (most significant) bit
            num_bits: Width of the range in bits

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bits is not positive
            IndexError: If the range exceeds the buffer
        """
        self._check_range(offset_bits, num_bits)

        first_byte = offset_bits // 8
        last_byte = (offset_bits + num_bits - 1) // 8
        chunk = int.from_bytes(self._data[first_byte : last_byte + 1], "big")

        # Drop the bits past the end of the range, then mask off the ones before it
        trailing = (last_byte + 1) * 8 - (offset_bits + num_bits)
        return (chunk >> trailing) & ((1 << num_bits) - 1)

    def write_uint(self, offset_bits: int, num_bits: int, value: int) -> None:
        """Write an unsigned integer into a bit range.

        Exactly ``num_bits`` bits are overwritten; smaller values are
        left-padded with zeros.

        Args:
            offset_bits: Absolute position of the first (most significant) bit
            num_bits: Width of the range in bits
            value: Unsigned integer value to write

        Raises:
            ValueError: If value is negative or doesn't fit in num_bits
            IndexError: If the range exceeds the buffer
        """
        self._check_range(offset_bits, num_bits)
        if value < 0:
            raise ValueError(f"write_uint requires non-negative value, got {value}")

        max_value = (1 << num_bits) - 1
        if value > max_value:
            raise ValueError(f"Value {value} requires more than {num_bits} bits (max: {max_value})")

        first_byte = offset_bits // 8
        last_byte = (offset_bits + num_bits - 1) // 8
        chunk_bits = (last_byte - first_byte + 1) * 8
        chunk = int.from_bytes(self._data[first_byte : last_byte + 1], "big")

        trailing = (last_byte + 1) * 8 - (offset_bits + num_bits)
        mask = max_value << trailing
        chunk = (chunk & ~mask) | (value << trailing)

        self._data[first_byte : last_byte + 1] = chunk.to_bytes(chunk_bits // 8, "big")

    def read_bytes(self, offset_bytes: int, length: int) -> bytes:
        """Read a byte-aligned slice.

        Raises:
            IndexError: If the slice exceeds the buffer
        """
        if offset_bytes < 0 or length < 0 or offset_bytes + length > len(self._data):
            raise IndexError(
                f"Byte range [{offset_bytes}, {offset_bytes + length}) outside buffer "
                f"of {len(self._data)} bytes"
            )
        return bytes(self._data[offset_bytes : offset_bytes + length])

    def write_bytes(self, offset_bytes: int, data: bytes) -> None:
        """Overwrite a byte-aligned slice with ``data``.

        Raises:
            IndexError: If the slice exceeds the buffer
        """
        if offset_bytes < 0 or offset_bytes + len(data) > len(self._data):
            raise IndexError(
                f"Byte range [{offset_bytes}, {offset_bytes + len(data)}) outside buffer "
                f"of {len(self._data)} bytes"
            )
        self._data[offset_bytes : offset_bytes + len(data)] = data

    def to_bytes(self) -> bytes:
        """Return the buffer contents."""
        return bytes(self._data)
