"""Validate and decode South African identity numbers.

Usage::

    import rsaid

    rsaid.is_valid("9506245120008")          # True
    person = rsaid.parse("9506245120008")
    person.birth_date.date()                 # datetime.date(1995, 6, 24)
    person.gender                            # Gender.MALE
    person.is_citizen                        # True

Every function is pure and thread-safe.
"""

__version__ = "1.0.0"

from rsaid.domain.decoder import MINIMUM_AGE, SAST, birth_date, gender, is_citizen, parse
from rsaid.domain.errors import DateParseError, ErrorCode, IdentityError, InvalidIdentity
from rsaid.domain.ids import check_digit, is_valid
from rsaid.domain.models import ParsedIdentity
from rsaid.domain.types import Gender

__all__ = [
    "MINIMUM_AGE",
    "SAST",
    "DateParseError",
    "ErrorCode",
    "Gender",
    "IdentityError",
    "InvalidIdentity",
    "ParsedIdentity",
    "birth_date",
    "check_digit",
    "gender",
    "is_citizen",
    "is_valid",
    "parse",
]
