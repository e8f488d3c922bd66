"""SwissUid: validated Swiss Business Identification Number.

A UID is a 3-letter prefix (CHE or ADM) followed by 9 digits, the last of
which is a check digit over the first 8. The payload is stored as two
16-bit nibble words; the checksum is verified once, at construction.
"""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import final

from swiss_uid.checksum import compute_check_digit
from swiss_uid.config import DEFAULT_PARSER_CONFIG, NUM_PAYLOAD_DIGITS, ParserConfig
from swiss_uid.errors import UidError
from swiss_uid.nibbles import pack_payload, unpack_payload
from swiss_uid.parser import ScannedUid, scan_and_validate
from swiss_uid.render import format_compact, format_debug, format_plain
from swiss_uid.result import Err, Ok, sequence
from swiss_uid.types import UidPrefix, UidSuffix

_system_random = random.SystemRandom()


@final
@dataclass(frozen=True, slots=True, repr=False)
class SwissUid:
    """Swiss UID (Unternehmens-Identifikationsnummer).

    Build it with ``SwissUid.parse()``, ``SwissUid.from_digits()`` or
    ``SwissUid.generate()``; direct construction is checked as well and
    raises TypeError on an inconsistent value.

    >>> uid = SwissUid.parse("CHE-109.322.551 MWST").unwrap()
    >>> str(uid)
    'CHE-109.322.551'
    >>> uid.render_debug()
    'CHE-109.322.55[1]'
    >>> uid.to_string_hr()
    'CHE-109.322.551 HR'
    """

    prefix: UidPrefix
    high: int  # digits 0-3, one nibble each
    low: int  # digits 4-7
    check_digit: int

    def __post_init__(self) -> None:
        if not isinstance(self.prefix, UidPrefix):
            raise TypeError(
                f"SwissUid.prefix must be UidPrefix, got {type(self.prefix).__name__}"
            )
        for name in ("high", "low"):
            word = getattr(self, name)
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= 0xFFFF:
                raise TypeError(f"SwissUid.{name} must be a 16-bit int, got {word!r}")
        if isinstance(self.check_digit, bool) or not isinstance(self.check_digit, int):
            raise TypeError(
                f"SwissUid.check_digit must be int, got {type(self.check_digit).__name__}"
            )
        match compute_check_digit(unpack_payload(self.high, self.low)):
            case Err(e):
                raise TypeError(f"SwissUid payload rejected: {e}")
            case Ok(expected) if expected != self.check_digit:
                raise TypeError(
                    f"SwissUid.check_digit must be {expected}, got {self.check_digit!r}"
                )
            case _:
                pass

    # --- construction ---

    @staticmethod
    def parse(
        raw: str, config: ParserConfig = DEFAULT_PARSER_CONFIG,
    ) -> Ok[SwissUid] | Err[UidError]:
        """Parse free-form text such as ``CHE-109.322.551``, ``che109322551``
        or ``CHE-109.322.551 MWST`` (the suffix is ignored).
        """
        return scan_and_validate(raw, config).map(SwissUid._from_scanned)

    @staticmethod
    def from_digits(
        prefix: UidPrefix, digits: Sequence[int],
    ) -> Ok[SwissUid] | Err[UidError]:
        """Build a UID from its 8 payload digits, computing the check digit."""
        return compute_check_digit(digits).map(
            lambda check: SwissUid._pack(prefix, digits, check)
        )

    @staticmethod
    def generate(rng: random.Random | None = None) -> Ok[SwissUid] | Err[UidError]:
        """Random valid CHE UID; the first payload digit is never 0.

        A payload that reduces to 10 gets its first digit bumped by one,
        which moves the weighted sum by 5 and yields a valid check digit.
        """
        rng = rng or _system_random
        digits = [rng.randint(1, 9)] + [rng.randint(0, 9) for _ in range(NUM_PAYLOAD_DIGITS - 1)]
        first = compute_check_digit(digits)
        if isinstance(first, Ok):
            return Ok(SwissUid._pack(UidPrefix.CHE, digits, first.value))
        digits[0] = digits[0] + 1 if digits[0] <= 1 else digits[0] - 1
        return SwissUid.from_digits(UidPrefix.CHE, digits)

    @staticmethod
    def _pack(prefix: UidPrefix, digits: Sequence[int], check: int) -> SwissUid:
        high, low = pack_payload(digits)
        return SwissUid(prefix=prefix, high=high, low=low, check_digit=check)

    @staticmethod
    def _from_scanned(scanned: ScannedUid) -> SwissUid:
        return SwissUid._pack(scanned.prefix, scanned.payload, scanned.declared)

    # --- accessors ---

    @property
    def digits(self) -> tuple[int, ...]:
        """The 8 payload digits, most significant first."""
        return unpack_payload(self.high, self.low)

    # --- rendering ---

    def render_plain(self) -> str:
        return format_plain(self.prefix, self.digits, self.check_digit)

    def render_with_suffix(self, suffix: UidSuffix) -> str:
        return f"{self.render_plain()} {suffix.value}"

    def to_string_hr(self) -> str:
        return self.render_with_suffix(UidSuffix.HR)

    def to_string_mwst(self) -> str:
        return self.render_with_suffix(UidSuffix.MWST)

    def render_debug(self) -> str:
        return format_debug(self.prefix, self.digits, self.check_digit)

    def render_compact(self) -> str:
        return format_compact(self.prefix, self.digits, self.check_digit)

    def __str__(self) -> str:
        return self.render_plain()

    def __repr__(self) -> str:
        return f"SwissUid({self.render_debug()!r})"


def parse_many(
    texts: Iterable[str], config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Ok[list[SwissUid]] | Err[UidError]:
    """Parse every text; the first failure short-circuits."""
    return sequence(SwissUid.parse(t, config) for t in texts)
