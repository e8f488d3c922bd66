"""Tests for swiss_uid.nibbles — digit codec."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from swiss_uid.nibbles import pack_nibbles, pack_payload, unpack_nibbles, unpack_payload

from .conftest import payloads


class TestPackNibbles:
    def test_most_significant_first(self) -> None:
        assert pack_nibbles([1, 0, 9, 3]) == 0x1093

    def test_all_zero(self) -> None:
        assert pack_nibbles([0, 0, 0, 0]) == 0

    def test_values_above_nine_are_not_rejected(self) -> None:
        assert pack_nibbles([11, 12, 13, 14]) == 0xBCDE

    def test_only_low_four_bits_kept(self) -> None:
        assert pack_nibbles([0x1F, 0, 0, 0]) == 0xF000

    def test_extra_digits_ignored(self) -> None:
        assert pack_nibbles([1, 2, 3, 4, 5]) == 0x1234


class TestUnpackNibbles:
    def test_split_word(self) -> None:
        assert unpack_nibbles(0x1234) == (1, 2, 3, 4)

    def test_leading_zero_nibbles(self) -> None:
        assert unpack_nibbles(0x0200) == (0, 2, 0, 0)

    def test_custom_count(self) -> None:
        assert unpack_nibbles(0x12345678, count=8) == (1, 2, 3, 4, 5, 6, 7, 8)


class TestPayload:
    def test_pack_payload_splits_halves(self) -> None:
        assert pack_payload((1, 0, 9, 3, 2, 2, 5, 5)) == (0x1093, 0x2255)

    def test_unpack_payload(self) -> None:
        assert unpack_payload(0x1000, 0x0200) == (1, 0, 0, 0, 0, 2, 0, 0)

    @given(payloads())
    def test_lossless_for_decimal_digits(self, digits: tuple[int, ...]) -> None:
        assert unpack_payload(*pack_payload(digits)) == digits

    @given(st.integers(min_value=0, max_value=0xFFFF))
    def test_word_fits_sixteen_bits(self, word: int) -> None:
        assert pack_nibbles(unpack_nibbles(word)) == word
