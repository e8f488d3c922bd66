"""Digit codec: 8 decimal digits <-> two 16-bit nibble words.

Each digit occupies one nibble, most significant first, so the word for
digits (1, 0, 9, 3) is 0x1093. The codec masks but does not range-check:
callers validate digits before packing.
"""

from __future__ import annotations

from collections.abc import Sequence

NIBBLE_BITS = 4
NIBBLE_MASK = 0x0F
NIBBLES_PER_WORD = 4


def pack_nibbles(digits: Sequence[int]) -> int:
    """Fold up to four digits into one word, most significant nibble first."""
    word = 0
    for d in digits[:NIBBLES_PER_WORD]:
        word = (word << NIBBLE_BITS) | (d & NIBBLE_MASK)
    return word


def unpack_nibbles(word: int, count: int = NIBBLES_PER_WORD) -> tuple[int, ...]:
    """Split a word into `count` nibbles, most significant first."""
    return tuple(
        (word >> (i * NIBBLE_BITS)) & NIBBLE_MASK
        for i in reversed(range(count))
    )


def pack_payload(digits: Sequence[int]) -> tuple[int, int]:
    """Digits 0-3 -> high word, digits 4-7 -> low word."""
    return (
        pack_nibbles(digits[:NIBBLES_PER_WORD]),
        pack_nibbles(digits[NIBBLES_PER_WORD:2 * NIBBLES_PER_WORD]),
    )


def unpack_payload(high: int, low: int) -> tuple[int, ...]:
    return unpack_nibbles(high) + unpack_nibbles(low)
