"""Text forms of a UID: plain, debug and compact.

Digits are grouped XXX.XXX.XX; the check digit follows the last group,
bracketed in the debug form.
"""

from __future__ import annotations

from collections.abc import Sequence

from swiss_uid.types import UidPrefix


def _grouped(digits: Sequence[int]) -> str:
    s = "".join(str(d) for d in digits)
    return f"{s[0:3]}.{s[3:6]}.{s[6:8]}"


def format_plain(prefix: UidPrefix, digits: Sequence[int], check_digit: int) -> str:
    return f"{prefix.value}-{_grouped(digits)}{check_digit}"


def format_debug(prefix: UidPrefix, digits: Sequence[int], check_digit: int) -> str:
    return f"{prefix.value}-{_grouped(digits)}[{check_digit}]"


def format_compact(prefix: UidPrefix, digits: Sequence[int], check_digit: int) -> str:
    return prefix.value + "".join(str(d) for d in digits) + str(check_digit)
