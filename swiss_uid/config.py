"""UID format constants and parser profiles.

No environment is read. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Format constants
# ---------------------------------------------------------------------------

NUM_PREFIX_CHARS: int = 3
NUM_PAYLOAD_DIGITS: int = 8

# eCH-0097 section 2.4.2
DIGIT_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4)
CHECKSUM_MODULUS: int = 11

# XXX.XXX.XXC: a separator may follow the 3rd and the 6th digit
GROUP_SIZES: tuple[int, ...] = (3, 3, 3)
NUM_UID_DIGITS: int = NUM_PAYLOAD_DIGITS + 1

PREFIX_SEPARATORS: frozenset[str] = frozenset({" ", "-", "."})
GROUP_SEPARATORS: frozenset[str] = frozenset({" ", ".", "-"})

ASCII_DIGITS: str = "0123456789"
ASCII_LETTERS: str = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
ASCII_WHITESPACE: str = " \t\n\r\x0b\x0c"


# ---------------------------------------------------------------------------
# Parser profiles
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Policies on which historical UID variants disagree."""

    allow_leading_zero: bool = True
    case_sensitive_prefix: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.allow_leading_zero, bool):
            raise TypeError(
                f"ParserConfig.allow_leading_zero must be bool, "
                f"got {type(self.allow_leading_zero).__name__}"
            )
        if not isinstance(self.case_sensitive_prefix, bool):
            raise TypeError(
                f"ParserConfig.case_sensitive_prefix must be bool, "
                f"got {type(self.case_sensitive_prefix).__name__}"
            )


DEFAULT_PARSER_CONFIG = ParserConfig()
STRICT_PARSER_CONFIG = ParserConfig(allow_leading_zero=False, case_sensitive_prefix=True)
