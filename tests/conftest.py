"""Shared pytest fixtures for rsaid tests."""

from __future__ import annotations

from datetime import date

import pytest

from rsaid.services.decode import DecodeService


@pytest.fixture
def reference_date() -> date:
    """Fixed 'today' so century resolution never depends on the clock."""
    return date(2026, 6, 24)


@pytest.fixture
def service() -> DecodeService:
    """DecodeService with default rules."""
    return DecodeService()
