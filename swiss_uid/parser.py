"""Tolerant UID scanner.

Accepts ``[ws] PFX [sep] DDD [sep] DDD [sep] DDC [free text]``:

- ws is ASCII whitespace only, like the separators;
- PFX is CHE or ADM (case-folded unless the profile is case sensitive);
- one optional separator (space, hyphen or dot) after the prefix and
  after the 3rd and 6th digit;
- anything after the 9th digit is ignored unless it is a 10th digit.

scan() only decomposes the text; validate() applies the checksum engine.
Neither raises: every rejection is returned as Err.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

from swiss_uid.checksum import compute_check_digit
from swiss_uid.config import (
    ASCII_DIGITS,
    ASCII_LETTERS,
    ASCII_WHITESPACE,
    DEFAULT_PARSER_CONFIG,
    GROUP_SEPARATORS,
    GROUP_SIZES,
    NUM_PAYLOAD_DIGITS,
    NUM_PREFIX_CHARS,
    NUM_UID_DIGITS,
    PREFIX_SEPARATORS,
    ParserConfig,
)
from swiss_uid.errors import (
    InvalidFormatError,
    LeadingZeroNotAllowedError,
    MismatchedCheckDigitError,
    UidError,
)
from swiss_uid.render import format_debug
from swiss_uid.result import Err, Ok
from swiss_uid.types import UidPrefix

_SCAN = "parser.scan"
_VALIDATE = "parser.validate"

_PREFIX_REASON = "prefix must be 'CHE' or 'ADM'"
_MISSING_PREFIX_REASON = "is missing the 'CHE' or 'ADM' prefix"

# digit indexes that may be preceded by a group separator
_GROUP_STARTS: frozenset[int] = frozenset(
    sum(GROUP_SIZES[:i]) for i in range(1, len(GROUP_SIZES))
)


@final
@dataclass(frozen=True, slots=True)
class ScannedUid:
    """Prefix, 8 payload digits and the declared (unverified) check digit."""

    prefix: UidPrefix
    payload: tuple[int, ...]
    declared: int

    def render_debug(self) -> str:
        return format_debug(self.prefix, self.payload, self.declared)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in ASCII_WHITESPACE:
        pos += 1
    return pos


def _skip_one(text: str, pos: int, separators: frozenset[str]) -> int:
    if pos < len(text) and text[pos] in separators:
        return pos + 1
    return pos


def _scan_prefix(
    text: str, pos: int, config: ParserConfig,
) -> Ok[tuple[UidPrefix, int]] | Err[UidError]:
    end = pos
    while end < len(text) and text[end] in ASCII_LETTERS:
        end += 1
    token = text[pos:end]
    if not token:
        return Err(InvalidFormatError.create(text, _MISSING_PREFIX_REASON, _SCAN))
    if len(token) != NUM_PREFIX_CHARS:
        return Err(InvalidFormatError.create(token, _PREFIX_REASON, _SCAN))
    key = token if config.case_sensitive_prefix else token.upper()
    prefix = UidPrefix.__members__.get(key)
    if prefix is None:
        return Err(InvalidFormatError.create(token, _PREFIX_REASON, _SCAN))
    return Ok((prefix, end))


def _scan_digits(text: str, pos: int) -> Ok[tuple[int, ...]] | Err[UidError]:
    digits: list[int] = []
    for i in range(NUM_UID_DIGITS):
        if i in _GROUP_STARTS:
            pos = _skip_one(text, pos, GROUP_SEPARATORS)
        if pos >= len(text) or text[pos] not in ASCII_DIGITS:
            return Err(InvalidFormatError.create(
                text, f"must have {NUM_UID_DIGITS} digits grouped XXX.XXX.XXX", _SCAN,
            ))
        digits.append(ASCII_DIGITS.index(text[pos]))
        pos += 1
    if pos < len(text) and text[pos] in ASCII_DIGITS:
        return Err(InvalidFormatError.create(
            text, f"has more than {NUM_UID_DIGITS} digits", _SCAN,
        ))
    return Ok(tuple(digits))


def scan(
    text: str, config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Ok[ScannedUid] | Err[UidError]:
    """Decompose text into prefix, payload and declared check digit."""
    if not isinstance(text, str):
        return Err(InvalidFormatError.create(
            type(text).__name__, "input must be a string", _SCAN,
        ))

    prefix_result = _scan_prefix(text, _skip_whitespace(text, 0), config)
    if isinstance(prefix_result, Err):
        return prefix_result
    prefix, pos = prefix_result.value
    pos = _skip_one(text, pos, PREFIX_SEPARATORS)

    digits_result = _scan_digits(text, pos)
    if isinstance(digits_result, Err):
        return digits_result
    digits = digits_result.value
    payload = digits[:NUM_PAYLOAD_DIGITS]

    if not config.allow_leading_zero and payload[0] == 0:
        return Err(LeadingZeroNotAllowedError.create(
            "".join(str(d) for d in payload), _SCAN,
        ))
    return Ok(ScannedUid(prefix=prefix, payload=payload, declared=digits[NUM_PAYLOAD_DIGITS]))


def validate(scanned: ScannedUid) -> Ok[ScannedUid] | Err[UidError]:
    """Check the declared digit against the checksum engine."""
    match compute_check_digit(scanned.payload):
        case Err() as e:
            return e
        case Ok(computed) if computed != scanned.declared:
            return Err(MismatchedCheckDigitError.create(
                scanned.render_debug(), computed, scanned.declared, _VALIDATE,
            ))
        case _:
            return Ok(scanned)


def scan_and_validate(
    text: str, config: ParserConfig = DEFAULT_PARSER_CONFIG,
) -> Ok[ScannedUid] | Err[UidError]:
    return scan(text, config).and_then(validate)
