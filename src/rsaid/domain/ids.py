"""ID number layout, pattern, and Luhn checksum.

A South African ID number is 13 ASCII digits::

    YYMMDD SSSS C A Z
    |      |    | | +-- Luhn check digit
    |      |    | +---- historical race digit, now always 8 or 9
    |      |    +------ citizenship: 0 citizen, anything else resident
    |      +----------- sequence; 0000-4999 female, 5000-9999 male
    +------------------ date of birth

INVARIANT: ``is_valid`` classifies, it never raises.
"""

from __future__ import annotations

import re

from stdnum import luhn

ID_LENGTH = 13

ID_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{13}")
STEM_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{12}")

# Slices into the 13-character string.
YEAR_SLICE = slice(0, 2)
MONTH_SLICE = slice(2, 4)
DAY_SLICE = slice(4, 6)
GENDER_INDEX = 6
CITIZENSHIP_INDEX = 10

CITIZEN_CODE = "0"


def is_valid(id_number: str) -> bool:
    """Return True if *id_number* is 13 digits and passes the Luhn check."""
    if not isinstance(id_number, str) or len(id_number) != ID_LENGTH:
        return False
    # str.isdigit() accepts non-ASCII digits; the pattern does not.
    if ID_PATTERN.fullmatch(id_number) is None:
        return False
    return luhn.checksum(id_number) == 0


def check_digit(stem: str) -> int:
    """Compute the Luhn digit that completes a 12-digit *stem*.

    Raises:
        ValueError: If *stem* is not exactly 12 ASCII digits.
    """
    if not isinstance(stem, str) or STEM_PATTERN.fullmatch(stem) is None:
        msg = f"stem must be {ID_LENGTH - 1} digits"
        raise ValueError(msg)
    return int(luhn.calc_check_digit(stem))


def mask(id_number: str) -> str:
    """Hide everything after the date of birth, for log output."""
    return id_number[:6] + "*" * max(len(id_number) - 6, 0)
