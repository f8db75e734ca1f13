"""Pydantic configuration models with code-baked defaults.

No environment variables and no config files: callers that need other
values construct a :class:`DecoderConfig` and hand it to the service.
Defaults come from :mod:`rsaid.domain.decoder`.
"""

from __future__ import annotations

from datetime import timedelta, timezone

from pydantic import BaseModel, Field

from rsaid.domain.decoder import MINIMUM_AGE, SAST

_SAST_OFFSET_HOURS = SAST.utcoffset(None) // timedelta(hours=1)


class DecoderConfig(BaseModel):
    """Rules for interpreting the date of birth."""

    model_config = {"frozen": True}

    minimum_age: int = Field(default=MINIMUM_AGE, ge=0, le=99)
    utc_offset_hours: int = Field(default=_SAST_OFFSET_HOURS, ge=-12, le=14)

    @property
    def tzinfo(self) -> timezone:
        """Fixed-offset zone birth dates are expressed in."""
        if self.utc_offset_hours == _SAST_OFFSET_HOURS:
            return SAST
        return timezone(timedelta(hours=self.utc_offset_hours))


DEFAULT_CONFIG = DecoderConfig()
