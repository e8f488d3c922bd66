"""Error value hierarchy. No parsing function raises exceptions.

Every error is a frozen dataclass value that can be pattern-matched,
compared and serialized. Base class UidError, four @final subclasses.
Errors carry no timestamp, so parsing the same text twice yields equal
errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

CODE_INVALID_FORMAT = "UID-FORMAT"
CODE_INVALID_CHECK_DIGIT = "UID-CHECK"
CODE_MISMATCHED_CHECK_DIGIT = "UID-MISMATCH"
CODE_LEADING_ZERO = "UID-LEADING-ZERO"


@dataclass(frozen=True, slots=True)
class UidError:
    """Base error value. NOT @final, has subclasses."""

    message: str
    code: str
    source: str  # "module.function" that produced this error

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class InvalidFormatError(UidError):
    """Input cannot be split into a known prefix and a 9-digit payload."""

    token: str  # offending input or token

    @staticmethod
    def create(token: str, reason: str, source: str) -> InvalidFormatError:
        return InvalidFormatError(
            message=f"Invalid format: '{token}' {reason}",
            code=CODE_INVALID_FORMAT,
            source=source,
            token=token,
        )

    def to_dict(self) -> dict[str, object]:
        return {**UidError.to_dict(self), "token": self.token}


@final
@dataclass(frozen=True, slots=True)
class InvalidCheckDigitError(UidError):
    """Payload checksums to 10: no UID can ever be issued with it."""

    payload: str  # the 8 payload digits

    @staticmethod
    def create(payload: str, source: str) -> InvalidCheckDigitError:
        return InvalidCheckDigitError(
            message=f"Invalid check digit: payload '{payload}' is prohibited from use",
            code=CODE_INVALID_CHECK_DIGIT,
            source=source,
            payload=payload,
        )

    def to_dict(self) -> dict[str, object]:
        return {**UidError.to_dict(self), "payload": self.payload}


@final
@dataclass(frozen=True, slots=True)
class MismatchedCheckDigitError(UidError):
    """Declared 9th digit differs from the one computed over the payload."""

    computed: int
    declared: int

    @staticmethod
    def create(
        rendered: str, computed: int, declared: int, source: str,
    ) -> MismatchedCheckDigitError:
        return MismatchedCheckDigitError(
            message=(
                f"Mismatched check digit: '{rendered}' "
                f"should have the check digit [{computed}]"
            ),
            code=CODE_MISMATCHED_CHECK_DIGIT,
            source=source,
            computed=computed,
            declared=declared,
        )

    def to_dict(self) -> dict[str, object]:
        return {
            **UidError.to_dict(self),
            "computed": self.computed,
            "declared": self.declared,
        }


@final
@dataclass(frozen=True, slots=True)
class LeadingZeroNotAllowedError(UidError):
    """Payload starts with 0 under the strict parser profile."""

    payload: str

    @staticmethod
    def create(payload: str, source: str) -> LeadingZeroNotAllowedError:
        return LeadingZeroNotAllowedError(
            message=f"Leading zero is not allowed: payload '{payload}'",
            code=CODE_LEADING_ZERO,
            source=source,
            payload=payload,
        )

    def to_dict(self) -> dict[str, object]:
        return {**UidError.to_dict(self), "payload": self.payload}
