"""Immutable value produced by :func:`rsaid.domain.decoder.parse`."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from rsaid.domain.types import Gender


class ParsedIdentity(BaseModel):
    """Snapshot of the fields decoded from one ID number.

    Attributes:
        birth_date: Midnight on the birth date, in the issuing time zone.
        gender: Gender from the sequence block.
        is_citizen: False for permanent residents.
    """

    model_config = {"frozen": True}

    birth_date: datetime
    gender: Gender
    is_citizen: bool
