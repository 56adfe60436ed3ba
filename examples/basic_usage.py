#!/usr/bin/env python3
"""Basic usage example for underlords.

This example demonstrates:
1. Decoding a share code into a board
2. Inspecting units, ranks and underlords
3. Editing the board and sharing it again
4. Looking at the raw record layout
"""

from __future__ import annotations

from underlords import (
    CorruptShareCodeError,
    EquippedItem,
    ShareCodeV8,
    UnsupportedVersionError,
    decode_sharecode,
    field_sizes,
)

SHARE_CODE = (
    "8qAMAAP4BAK4BAATjJ/5uAEZuAAAgEVM0LgAAAG0AbQAACwAAAP8BDAABCRsI/wAJARcBAQAOAQUBAQAGES0QbUBHOlcBEmoB"
    "AAFIACABaBABAyAAEAEpLAIgIAAwAAAGAgEgAAWCAHUR2gB0EQkBAQRjAAVyLBAAAgABBAMGdycAdy4fAK4BAA=="
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("underlords Basic Usage Example")
    print("=" * 60)
    print()

    # Decode a share code
    print("1. Decoding a share code...")
    board = decode_sharecode(SHARE_CODE)
    assert isinstance(board, ShareCodeV8)

    print(f"   Share code: {len(SHARE_CODE)} characters")
    print(f"   Underlords: {board.underlord_ids} (ranks {board.underlord_ranks})")
    print()

    # Show the board
    print("2. Board units (id:rank)...")
    for row_ids, row_ranks in zip(board.board_unit_ids, board.unit_ranks):
        cells = [f"{u:3d}:{r}" if u else "  .  " for u, r in zip(row_ids, row_ranks)]
        print("   " + " ".join(cells))
    print(f"   Bench: {board.benched_unit_ids}")
    print()

    # Edit and share again
    print("3. Editing the board...")
    board.board_unit_ids[0][1] = 46
    board.unit_ranks[0][1] = 2
    board.unit_items[0][1] = EquippedItem(item_id=10101)
    new_code = board.to_share_code()

    print(f"   New share code: {new_code}")
    print(f"   Round-trip matches: {decode_sharecode(new_code) == board}")
    print()

    # Record layout
    print("4. Record layout...")
    for field_name, size in field_sizes().items():
        print(f"   {field_name}: {size} bytes")
    print(f"   Raw record: {len(board.to_bytes())} bytes")
    print()

    # Malformed input
    print("5. Handling malformed codes...")
    for code in ("7oldFormat", "8!!corrupt!!"):
        try:
            decode_sharecode(code)
        except UnsupportedVersionError as e:
            print(f"   {code!r}: unsupported version ({e})")
        except CorruptShareCodeError as e:
            print(f"   {code!r}: corrupt code ({e})")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
