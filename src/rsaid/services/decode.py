"""DecodeService — the decoder behind a ServiceResult contract.

Domain functions raise; this service catches the two domain error
kinds and returns them as ``ok=False`` results. Anything else is a bug
and propagates.

The service holds only a frozen config, so one instance can be shared
across threads.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from datetime import date, datetime
from typing import Any, Concatenate, ParamSpec

from rsaid.config.models import DEFAULT_CONFIG, DecoderConfig
from rsaid.domain import decoder
from rsaid.domain.errors import IdentityError
from rsaid.domain.ids import is_valid, mask
from rsaid.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)

P = ParamSpec("P")


def _masked(id_number: object) -> str:
    if isinstance(id_number, str):
        return mask(id_number)
    return f"<{type(id_number).__name__}>"


def _guarded(
    op: str,
) -> Callable[
    [Callable[Concatenate[DecodeService, str, P], dict[str, Any]]],
    Callable[Concatenate[DecodeService, str, P], ServiceResult],
]:
    """Wrap a method returning a payload dict into one returning ServiceResult."""

    def decorator(
        func: Callable[Concatenate[DecodeService, str, P], dict[str, Any]],
    ) -> Callable[Concatenate[DecodeService, str, P], ServiceResult]:
        @functools.wraps(func)
        def wrapper(
            self: DecodeService, id_number: str, *args: P.args, **kwargs: P.kwargs
        ) -> ServiceResult:
            masked = _masked(id_number)
            try:
                data = func(self, id_number, *args, **kwargs)
            except IdentityError as exc:
                logger.debug("%s failed for %s: %s", op, masked, exc.code)
                return ServiceResult.failure(
                    op, ServiceError.from_exception(exc, id_number=masked)
                )
            logger.debug("%s succeeded for %s", op, masked)
            return ServiceResult.success(op, **data)

        return wrapper

    return decorator


class DecodeService:
    """Decode ID numbers into ServiceResult envelopes.

    Usage::

        service = DecodeService()
        result = service.parse("9506245120008")
        if result.ok:
            result.data["birth_date"]  # "1995-06-24"
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self._config = config or DEFAULT_CONFIG

    @property
    def config(self) -> DecoderConfig:
        return self._config

    @_guarded("validate")
    def validate(self, id_number: str) -> dict[str, Any]:
        return {"valid": is_valid(id_number)}

    @_guarded("gender")
    def gender(self, id_number: str) -> dict[str, Any]:
        return {"gender": str(decoder.gender(id_number))}

    @_guarded("citizenship")
    def citizenship(self, id_number: str) -> dict[str, Any]:
        return {"is_citizen": decoder.is_citizen(id_number)}

    @_guarded("birth_date")
    def birth_date(
        self, id_number: str, reference_date: date | datetime | None = None
    ) -> dict[str, Any]:
        dob = decoder.birth_date(
            id_number,
            reference_date,
            minimum_age=self._config.minimum_age,
            tz=self._config.tzinfo,
        )
        return {"birth_date": dob.date().isoformat()}

    @_guarded("parse")
    def parse(
        self, id_number: str, reference_date: date | datetime | None = None
    ) -> dict[str, Any]:
        """Decode every field; on failure ``data`` stays empty."""
        parsed = decoder.parse(
            id_number,
            reference_date,
            minimum_age=self._config.minimum_age,
            tz=self._config.tzinfo,
        )
        return {
            "birth_date": parsed.birth_date.date().isoformat(),
            "gender": str(parsed.gender),
            "is_citizen": parsed.is_citizen,
        }
