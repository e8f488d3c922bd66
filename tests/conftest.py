"""Hypothesis strategies and pytest fixtures for swiss_uid.

Strategies are composable: UID values are built from payload strategies,
UID texts from UID values.
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from swiss_uid.checksum import is_issuable, weighted_sum
from swiss_uid.config import CHECKSUM_MODULUS, DIGIT_WEIGHTS, NUM_PAYLOAD_DIGITS
from swiss_uid.result import unwrap
from swiss_uid.types import UidPrefix
from swiss_uid.uid import SwissUid

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=500,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=100,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# PAYLOAD STRATEGIES
# ===================================================================


def payloads() -> SearchStrategy[tuple[int, ...]]:
    """Any 8 decimal digits, issuable or not."""
    return st.tuples(*(st.integers(min_value=0, max_value=9) for _ in range(8)))


def issuable_payloads() -> SearchStrategy[tuple[int, ...]]:
    """8 digits with a valid single-digit check digit."""
    return payloads().filter(is_issuable)


@st.composite
def degenerate_payloads(draw: st.DrawFn) -> tuple[int, ...]:
    """8 digits whose checksum reduces to 10, built without filtering.

    Seven digits are drawn and the remaining position is solved so that
    the weighted sum is 1 mod 11. When the solution would be 10, a
    neighbouring digit is moved by one and the position is solved again.
    """
    digits = list(draw(payloads()))
    pos = draw(st.integers(min_value=0, max_value=NUM_PAYLOAD_DIGITS - 1))
    other = (pos + 1) % NUM_PAYLOAD_DIGITS
    for _ in range(2):
        digits[pos] = 0
        rest = weighted_sum(digits)
        solved = (1 - rest) * pow(DIGIT_WEIGHTS[pos], -1, CHECKSUM_MODULUS) % CHECKSUM_MODULUS
        if solved <= 9:
            digits[pos] = solved
            return tuple(digits)
        digits[other] = digits[other] + 1 if digits[other] < 9 else digits[other] - 1
    raise AssertionError("moving a second digit always yields a solvable position")


def prefixes() -> SearchStrategy[UidPrefix]:
    return st.sampled_from(list(UidPrefix))


# ===================================================================
# UID STRATEGIES
# ===================================================================


@st.composite
def swiss_uids(draw: st.DrawFn) -> SwissUid:
    """Generate valid SwissUid values via from_digits."""
    return unwrap(SwissUid.from_digits(draw(prefixes()), draw(issuable_payloads())))


@st.composite
def uid_texts(draw: st.DrawFn) -> tuple[SwissUid, str]:
    """A UID together with one of the free-form spellings the parser accepts."""
    uid = draw(swiss_uids())
    digits = "".join(str(d) for d in uid.digits) + str(uid.check_digit)
    pfx = uid.prefix.value
    pfx = draw(st.sampled_from([pfx, pfx.lower(), pfx.capitalize()]))
    sep1 = draw(st.sampled_from(["", " ", "-", "."]))
    sep2 = draw(st.sampled_from(["", " ", ".", "-"]))
    sep3 = draw(st.sampled_from(["", " ", ".", "-"]))
    tail = draw(st.sampled_from(["", " HR", " MWST", " (Handelsregister)"]))
    lead = draw(st.sampled_from(["", " ", "\t"]))
    text = f"{lead}{pfx}{sep1}{digits[0:3]}{sep2}{digits[3:6]}{sep3}{digits[6:9]}{tail}"
    return uid, text
