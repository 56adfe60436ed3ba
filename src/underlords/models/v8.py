"""Version 8 share code model."""

from __future__ import annotations

from typing import Annotated, ClassVar

from pydantic import Field

from ..codec.layout import (
    BOARD_CELL_NUM,
    MAX_TALENTS,
    MAX_UNEQUIPPED_ITEMS,
    PLAYER_COUNT,
    RECORD_SIZE_V8,
)
from .base import BaseShareCode, EquippedItem
from .fields import ByteInt, FixedList, zero_grid, zero_list

BoardRow = Annotated[list[ByteInt], FixedList(length=BOARD_CELL_NUM)]
ItemRow = Annotated[list[EquippedItem], FixedList(length=BOARD_CELL_NUM)]
PlayerPair = Annotated[list[ByteInt], FixedList(length=PLAYER_COUNT)]
ItemPair = Annotated[list[EquippedItem], FixedList(length=PLAYER_COUNT)]


def _item_grid(rows: int, cols: int) -> list[list[EquippedItem]]:
    return [[EquippedItem() for _ in range(cols)] for _ in range(rows)]


class ShareCodeV8(BaseShareCode):
    """Board snapshot carried by a version 8 share code.

    Grids are indexed ``[row][column]`` for the board, ``[tier][player]`` for
    talents and ``[slot][player]`` for unequipped items.

    Rank values are nominally 0-3 and validate as bytes so that decoded
    values up to 23 fit. Encoding keeps only the low 4 bits of a rank without
    raising, and a stored bit 3 reads back as 16: 9 comes back as 17 and
    255 as 23 (see ``underlords.codec.ranks``). Assigning into a nested list
    bypasses validation; out-of-range bytes are still rejected on encode.

    Example:
        >>> code = ShareCodeV8()
        >>> code.board_unit_ids[0][0] = 32
        >>> code.unit_ranks[0][0] = 1
        >>> ShareCodeV8.from_share_code(code.to_share_code()) == code
        True
    """

    version: ByteInt = 0
    unit_items: Annotated[list[ItemRow], FixedList(length=BOARD_CELL_NUM)] = Field(
        default_factory=lambda: _item_grid(BOARD_CELL_NUM, BOARD_CELL_NUM)
    )
    board_unit_ids: Annotated[list[BoardRow], FixedList(length=BOARD_CELL_NUM)] = Field(
        default_factory=zero_grid(BOARD_CELL_NUM, BOARD_CELL_NUM)
    )
    selected_talents: Annotated[list[PlayerPair], FixedList(length=MAX_TALENTS)] = Field(
        default_factory=zero_grid(MAX_TALENTS, PLAYER_COUNT)
    )
    unit_ranks: Annotated[list[BoardRow], FixedList(length=BOARD_CELL_NUM)] = Field(
        default_factory=zero_grid(BOARD_CELL_NUM, BOARD_CELL_NUM)
    )
    bench_unit_items: ItemRow = Field(
        default_factory=lambda: [EquippedItem() for _ in range(BOARD_CELL_NUM)]
    )
    benched_unit_ids: BoardRow = Field(default_factory=zero_list(BOARD_CELL_NUM))
    bench_unit_ranks: BoardRow = Field(default_factory=zero_list(BOARD_CELL_NUM))
    underlord_ids: PlayerPair = Field(default_factory=zero_list(PLAYER_COUNT))
    underlord_ranks: PlayerPair = Field(default_factory=zero_list(PLAYER_COUNT))
    unequipped_items: Annotated[list[ItemPair], FixedList(length=MAX_UNEQUIPPED_ITEMS)] = Field(
        default_factory=lambda: _item_grid(MAX_UNEQUIPPED_ITEMS, PLAYER_COUNT)
    )

    sharecode_version: ClassVar[str | None] = "8"
    sharecode_record_size: ClassVar[int | None] = RECORD_SIZE_V8
