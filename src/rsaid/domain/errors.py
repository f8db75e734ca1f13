"""Error taxonomy for ID decoding.

A closed set of variants, each tagged with an :class:`ErrorCode`.
``is_valid`` never raises; these are only raised when a caller asks
for a derived field.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable error kinds."""

    INVALID_IDENTITY = "INVALID_IDENTITY"
    DATE_PARSE_ERROR = "DATE_PARSE_ERROR"


class IdentityError(ValueError):
    """Base class for all decoding failures."""

    code: ErrorCode
    default_message: str = "identity error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidIdentity(IdentityError):
    """Wrong length, non-digit characters, or a failing checksum."""

    code = ErrorCode.INVALID_IDENTITY
    default_message = "invalid south african id number"


class DateParseError(IdentityError):
    """The date digits do not form a real calendar date."""

    code = ErrorCode.DATE_PARSE_ERROR
    default_message = "cannot parse date of birth from id number"
