"""Check digit engine: weighted digit sum reduced modulo 11.

The 8 payload digits are multiplied by DIGIT_WEIGHTS and summed; the check
digit is 11 - (sum % 11), with 11 mapped to 0. A result of 10 has no
single-digit representative, so such payloads can never be issued.
"""

from __future__ import annotations

from collections.abc import Sequence

from swiss_uid.config import CHECKSUM_MODULUS, DIGIT_WEIGHTS, NUM_PAYLOAD_DIGITS
from swiss_uid.errors import InvalidCheckDigitError, InvalidFormatError, UidError
from swiss_uid.result import Err, Ok

_SOURCE = "checksum.compute_check_digit"


def _is_decimal_digit(d: object) -> bool:
    # bool is a subclass of int
    return isinstance(d, int) and not isinstance(d, bool) and 0 <= d <= 9


def weighted_sum(digits: Sequence[int]) -> int:
    return sum(w * d for w, d in zip(DIGIT_WEIGHTS, digits, strict=True))


def compute_check_digit(digits: Sequence[int]) -> Ok[int] | Err[UidError]:
    """Compute the check digit of an 8-digit payload.

    Returns Err(InvalidFormatError) when the payload is not exactly 8
    decimal digits, Err(InvalidCheckDigitError) when the payload reduces
    to 10, Ok(0..9) otherwise.
    """
    if len(digits) != NUM_PAYLOAD_DIGITS:
        return Err(InvalidFormatError.create(
            "".join(str(d) for d in digits),
            f"UID must have {NUM_PAYLOAD_DIGITS} digits, got {len(digits)}",
            _SOURCE,
        ))
    if not all(_is_decimal_digit(d) for d in digits):
        return Err(InvalidFormatError.create(
            repr(tuple(digits)), "digits must be integers in [0, 9]", _SOURCE,
        ))

    match CHECKSUM_MODULUS - weighted_sum(digits) % CHECKSUM_MODULUS:
        case 11:
            return Ok(0)
        case 10:
            return Err(InvalidCheckDigitError.create(
                "".join(str(d) for d in digits), _SOURCE,
            ))
        case n:
            return Ok(n)


def is_issuable(digits: Sequence[int]) -> bool:
    """True iff the payload has a valid single-digit check digit."""
    return isinstance(compute_check_digit(digits), Ok)
