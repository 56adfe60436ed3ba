"""Packed unit rank codec.

A column of 8 ranks is folded into a 32-bit integer, 4 bits per rank, and
stored as little-endian bytes.

The decode table does not mirror the encode table at index 3: bit 3 of a rank
is written from mask 8 but read back as ``1 << 4``. Ranks 0-7 round-trip;
ranks 8-15 come back with 8 replaced by 16. Existing share codes depend on
this, so both tables are kept as they are.
"""

from __future__ import annotations

from collections.abc import Sequence

RANKS_PER_COLUMN = 8
PACKED_RANKS_SIZE = 4

RANK_ENCODE_MASKS = (1, 2, 4, 8)
RANK_DECODE_SHIFTS = (0, 1, 2, 4)


def pack_ranks(ranks: Sequence[int]) -> bytes:
    """Pack a column of 8 ranks into 4 bytes.

    Bits of a rank outside ``RANK_ENCODE_MASKS`` are not stored.

    Args:
        ranks: 8 non-negative rank values

    Returns:
        Packed little-endian uint32

    Raises:
        ValueError: If the column does not hold 8 values or a rank is negative
    """
    if len(ranks) != RANKS_PER_COLUMN:
        raise ValueError(f"Rank column must hold {RANKS_PER_COLUMN} values, got {len(ranks)}")

    packed = 0
    for j, rank in enumerate(ranks):
        if rank < 0:
            raise ValueError(f"Rank must be non-negative, got {rank}")
        for k, mask in enumerate(RANK_ENCODE_MASKS):
            if rank & mask:
                packed |= 1 << (j * 4 + k)

    # Most significant byte first, then swapped: ABCD -> DCBA
    return bytes(reversed(packed.to_bytes(PACKED_RANKS_SIZE, "big")))


def unpack_ranks(packed: bytes) -> list[int]:
    """Unpack 4 packed bytes into a column of 8 ranks.

    Args:
        packed: 4 bytes as written by :func:`pack_ranks`

    Returns:
        List of 8 rank values

    Raises:
        ValueError: If packed is not 4 bytes long
    """
    if len(packed) != PACKED_RANKS_SIZE:
        raise ValueError(f"Packed ranks must be {PACKED_RANKS_SIZE} bytes, got {len(packed)}")

    value = int.from_bytes(bytes(reversed(packed)), "big")

    ranks = [0] * RANKS_PER_COLUMN
    for j in range(RANKS_PER_COLUMN):
        for k, shift in enumerate(RANK_DECODE_SHIFTS):
            if value & (1 << (j * 4 + k)):
                ranks[j] |= 1 << shift

    return ranks
