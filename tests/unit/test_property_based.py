"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from underlords import EquippedItem, ShareCodeV8, decode_record, encode_record
from underlords.codec.items import decode_item_slot, encode_item_slot
from underlords.codec.ranks import pack_ranks, unpack_ranks
from underlords.framing import unwrap_record, wrap_record

byte_values = st.integers(min_value=0, max_value=255)
ranks = st.integers(min_value=0, max_value=7)
items = st.builds(EquippedItem, item_id=st.integers(min_value=0, max_value=0xFFFF))


def grid(elements: st.SearchStrategy, rows: int, cols: int) -> st.SearchStrategy:
    return st.lists(
        st.lists(elements, min_size=cols, max_size=cols), min_size=rows, max_size=rows
    )


def row(elements: st.SearchStrategy, size: int) -> st.SearchStrategy:
    return st.lists(elements, min_size=size, max_size=size)


boards = st.builds(
    ShareCodeV8,
    version=byte_values,
    unit_items=grid(items, 8, 8),
    board_unit_ids=grid(byte_values, 8, 8),
    selected_talents=grid(byte_values, 16, 2),
    unit_ranks=grid(ranks, 8, 8),
    bench_unit_items=row(items, 8),
    benched_unit_ids=row(byte_values, 8),
    bench_unit_ranks=row(ranks, 8),
    underlord_ids=row(byte_values, 2),
    underlord_ranks=row(byte_values, 2),
    unequipped_items=grid(items, 8, 2),
)

# Boards are large; keep the example count down
board_settings = settings(
    max_examples=50,
    suppress_health_check=list(HealthCheck),
)


class TestCodecProperties:
    """Property-based tests for the record codec."""

    @board_settings
    @given(board=boards)
    def test_record_roundtrip(self, board: ShareCodeV8) -> None:
        """Test encode/decode is invertible for in-domain values."""
        assert decode_record(ShareCodeV8, encode_record(board)) == board

    @board_settings
    @given(board=boards)
    def test_share_code_roundtrip(self, board: ShareCodeV8) -> None:
        """Test the full text pipeline is invertible."""
        assert ShareCodeV8.from_share_code(board.to_share_code()) == board

    @board_settings
    @given(board=boards)
    def test_encode_deterministic(self, board: ShareCodeV8) -> None:
        """Test encoding is deterministic."""
        assert board.to_share_code() == board.model_copy(deep=True).to_share_code()


class TestSubCodecProperties:
    """Property-based tests for item slots and packed ranks."""

    @given(item_id=st.integers(min_value=0, max_value=0xFFFF), reserved=byte_values)
    def test_item_slot_ignores_reserved(self, item_id: int, reserved: int) -> None:
        """Test the reserved byte never affects the decoded ID."""
        slot = encode_item_slot(item_id)[:2] + bytes([reserved])
        assert decode_item_slot(slot) == item_id

    @given(column=row(ranks, 8))
    def test_rank_roundtrip(self, column: list[int]) -> None:
        """Test in-range columns survive packing."""
        assert unpack_ranks(pack_ranks(column)) == column

    @given(packed=st.binary(min_size=4, max_size=4))
    def test_packed_ranks_repack(self, packed: bytes) -> None:
        """Test packing an unpacked column reproduces the bytes."""
        # bit 3 decodes as 16
        column = [r & 0b0111 | (8 if r & 16 else 0) for r in unpack_ranks(packed)]
        assert pack_ranks(column) == packed


class TestEnvelopeProperties:
    """Property-based tests for the envelope."""

    @given(record=st.binary(min_size=424, max_size=424))
    def test_envelope_roundtrip(self, record: bytes) -> None:
        """Test wrap/unwrap is invertible for any record."""
        assert unwrap_record(wrap_record(record)) == record

    @given(record=st.binary(min_size=424, max_size=424))
    def test_text_roundtrip(self, record: bytes) -> None:
        """Test unwrap/wrap reproduces well-formed text."""
        code = wrap_record(record)
        assert wrap_record(unwrap_record(code)) == code
