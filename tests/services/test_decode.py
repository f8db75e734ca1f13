"""Tests for DecodeService."""

from __future__ import annotations

import logging
from datetime import date
from unittest.mock import patch

import pytest

from rsaid.config.models import DecoderConfig
from rsaid.services.decode import DecodeService

VALID_MALE = "9506245120008"
INVALID_CHECKSUM = "9506245120009"
IMPOSSIBLE_DATE = "9502305120004"


class TestValidate:
    def test_valid(self, service: DecodeService) -> None:
        result = service.validate(VALID_MALE)
        assert result.ok is True
        assert result.op == "validate"
        assert result.data == {"valid": True}

    def test_invalid_is_still_ok(self, service: DecodeService) -> None:
        """Validation classifies; it never fails."""
        result = service.validate("950624")
        assert result.ok is True
        assert result.data == {"valid": False}


class TestExtractors:
    def test_gender(self, service: DecodeService) -> None:
        result = service.gender("9506244120009")
        assert result.ok is True
        assert result.data == {"gender": "female"}

    def test_citizenship(self, service: DecodeService) -> None:
        result = service.citizenship("9506245120107")
        assert result.data == {"is_citizen": False}

    def test_birth_date(self, service: DecodeService, reference_date: date) -> None:
        result = service.birth_date(VALID_MALE, reference_date)
        assert result.ok is True
        assert result.data == {"birth_date": "1995-06-24"}

    @pytest.mark.parametrize("op", ["gender", "citizenship", "birth_date", "parse"])
    def test_invalid_number_fails(self, service: DecodeService, op: str) -> None:
        result = getattr(service, op)(INVALID_CHECKSUM)
        assert result.ok is False
        assert result.op == op
        assert result.data == {}
        assert result.error is not None
        assert result.error.code == "INVALID_IDENTITY"

    def test_impossible_date_fails(self, service: DecodeService, reference_date: date) -> None:
        result = service.birth_date(IMPOSSIBLE_DATE, reference_date)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "DATE_PARSE_ERROR"
        assert result.error.message == "cannot parse date of birth from id number"


class TestParse:
    def test_success(self, service: DecodeService, reference_date: date) -> None:
        result = service.parse(VALID_MALE, reference_date)
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {
            "birth_date": "1995-06-24",
            "gender": "male",
            "is_citizen": True,
        }

    def test_no_partial_result(self, service: DecodeService, reference_date: date) -> None:
        result = service.parse(IMPOSSIBLE_DATE, reference_date)
        assert result.ok is False
        assert result.data == {}

    def test_error_detail_is_masked(self, service: DecodeService) -> None:
        result = service.parse(INVALID_CHECKSUM)
        assert result.error is not None
        assert result.error.detail == {"id_number": "950624*******"}
        assert INVALID_CHECKSUM not in result.model_dump_json()

    def test_non_string_input(self, service: DecodeService) -> None:
        result = service.parse(9506245120008)  # type: ignore[arg-type]
        assert result.ok is False
        assert result.error is not None
        assert result.error.detail == {"id_number": "<int>"}

    def test_unexpected_errors_propagate(self, service: DecodeService) -> None:
        with (
            patch("rsaid.services.decode.decoder.parse", side_effect=RuntimeError("boom")),
            pytest.raises(RuntimeError, match="boom"),
        ):
            service.parse(VALID_MALE)


class TestConfig:
    def test_default_config(self, service: DecodeService) -> None:
        assert service.config == DecoderConfig()

    def test_minimum_age_applied(self, reference_date: date) -> None:
        service = DecodeService(DecoderConfig(minimum_age=0))
        result = service.birth_date("2001015800085", reference_date)
        assert result.data == {"birth_date": "2020-01-01"}

    def test_default_minimum_age(self, service: DecodeService, reference_date: date) -> None:
        result = service.birth_date("2001015800085", reference_date)
        assert result.data == {"birth_date": "1920-01-01"}


class TestLogging:
    def test_failures_logged_masked(
        self, service: DecodeService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="rsaid"):
            service.parse(INVALID_CHECKSUM)
        assert "parse failed for 950624*******" in caplog.text
        assert INVALID_CHECKSUM not in caplog.text

    def test_success_logged(
        self, service: DecodeService, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="rsaid"):
            service.gender(VALID_MALE)
        assert "gender succeeded for 950624*******" in caplog.text
