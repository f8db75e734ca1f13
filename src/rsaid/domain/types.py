"""Classification enums decoded from an ID number."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Gender encoded by the sequence block (7th digit)."""

    FEMALE = "female"
    MALE = "male"
