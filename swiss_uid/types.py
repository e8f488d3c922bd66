"""Closed vocabularies of the UID text format."""

from __future__ import annotations

from enum import Enum


class UidPrefix(Enum):
    """Category tag in front of the 9 digits."""

    CHE = "CHE"  # commercial registry
    ADM = "ADM"  # administration


class UidSuffix(Enum):
    """Cosmetic annotation after a rendered UID. Not part of the checksum."""

    HR = "HR"  # Handelsregister
    MWST = "MWST"  # Mehrwertsteuer
