"""Field extraction from a validated ID number.

Every public extractor gates on :func:`rsaid.domain.ids.is_valid` and
raises :class:`InvalidIdentity` before doing any field-specific work.

All functions here are pure. The only clock read happens in
:func:`birth_date` and :func:`parse` when no reference date is passed;
:func:`resolve_birth_year` never reads it. Nothing holds shared mutable
state, so every function is safe to call from any number of threads.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo

from rsaid.domain.errors import DateParseError, InvalidIdentity
from rsaid.domain.ids import (
    CITIZEN_CODE,
    CITIZENSHIP_INDEX,
    DAY_SLICE,
    GENDER_INDEX,
    MONTH_SLICE,
    YEAR_SLICE,
    is_valid,
)
from rsaid.domain.models import ParsedIdentity
from rsaid.domain.types import Gender

# Youngest age at which an ID number is issued.
MINIMUM_AGE = 16

# South African Standard Time. Registration happens in South Africa
# whatever the holder's citizenship, so one zone applies to everyone.
SAST = timezone(timedelta(hours=2), "SAST")


def _require_valid(id_number: str) -> None:
    if not is_valid(id_number):
        raise InvalidIdentity


def _reference_day(reference_date: date | datetime | None, tz: tzinfo) -> date:
    if reference_date is None:
        return datetime.now(tz).date()
    if isinstance(reference_date, datetime):
        if reference_date.tzinfo is not None:
            reference_date = reference_date.astimezone(tz)
        return reference_date.date()
    return reference_date


def resolve_birth_year(
    yy: int,
    month: int,
    day: int,
    reference: date,
    *,
    minimum_age: int = MINIMUM_AGE,
) -> int:
    """Expand a two-digit year into a four-digit one.

    Assume the reference century first. If that makes the holder younger
    than *minimum_age* on *reference*, the birth year belongs to the
    previous century.
    """
    year = (reference.year // 100) * 100 + yy
    eligible_year = reference.year - minimum_age
    if year > eligible_year or (
        year == eligible_year and (month, day) > (reference.month, reference.day)
    ):
        year -= 100
    return year


def _gender(id_number: str) -> Gender:
    if int(id_number[GENDER_INDEX]) < 5:
        return Gender.FEMALE
    return Gender.MALE


def _is_citizen(id_number: str) -> bool:
    return id_number[CITIZENSHIP_INDEX] == CITIZEN_CODE


def _birth_date(id_number: str, reference: date, minimum_age: int, tz: tzinfo) -> datetime:
    yy = int(id_number[YEAR_SLICE])
    month = int(id_number[MONTH_SLICE])
    day = int(id_number[DAY_SLICE])
    year = resolve_birth_year(yy, month, day, reference, minimum_age=minimum_age)
    try:
        return datetime(year, month, day, tzinfo=tz)
    except ValueError as exc:
        raise DateParseError from exc


def gender(id_number: str) -> Gender:
    """Return the holder's gender.

    A 7th digit of 0-4 is female, 5-9 is male.

    Raises:
        InvalidIdentity: If *id_number* fails validation.
    """
    _require_valid(id_number)
    return _gender(id_number)


def is_citizen(id_number: str) -> bool:
    """Return True for a citizen, False for a permanent resident.

    Only an 11th digit of exactly ``"0"`` marks a citizen.

    Raises:
        InvalidIdentity: If *id_number* fails validation.
    """
    _require_valid(id_number)
    return _is_citizen(id_number)


def birth_date(
    id_number: str,
    reference_date: date | datetime | None = None,
    *,
    minimum_age: int = MINIMUM_AGE,
    tz: tzinfo = SAST,
) -> datetime:
    """Return midnight on the holder's date of birth in *tz*.

    Args:
        id_number: 13-digit ID number.
        reference_date: Day used to pick the century. Defaults to today in
            *tz*. Aware datetimes are converted to *tz* first.
        minimum_age: Youngest age at which a number is issued.
        tz: Zone the birth date is expressed in.

    Raises:
        InvalidIdentity: If *id_number* fails validation.
        DateParseError: If the date digits are not a real calendar date.
    """
    _require_valid(id_number)
    reference = _reference_day(reference_date, tz)
    return _birth_date(id_number, reference, minimum_age, tz)


def parse(
    id_number: str,
    reference_date: date | datetime | None = None,
    *,
    minimum_age: int = MINIMUM_AGE,
    tz: tzinfo = SAST,
) -> ParsedIdentity:
    """Decode all fields at once. Either everything is returned or an error is raised.

    Raises:
        InvalidIdentity: If *id_number* fails validation.
        DateParseError: If the date digits are not a real calendar date.
    """
    _require_valid(id_number)
    reference = _reference_day(reference_date, tz)
    dob = _birth_date(id_number, reference, minimum_age, tz)
    return ParsedIdentity(
        birth_date=dob,
        gender=_gender(id_number),
        is_citizen=_is_citizen(id_number),
    )
