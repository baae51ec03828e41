"""Shared fixtures for holidaycal tests."""

import logging
from collections.abc import Generator
from datetime import date
from typing import Any

import pytest

from holidaycal.logging_config import PACKAGE_LOGGERS
from holidaycal.models import HolidayRecord


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")
    config.addinivalue_line("markers", "integration: End-to-end CLI tests")


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: Any) -> Generator[None, Any, None]:
    """Clear HOLIDAYCAL_* environment variables around each test."""
    for name in (
        "HOLIDAYCAL_DEBUG",
        "HOLIDAYCAL_LOG_LEVEL",
        "HOLIDAYCAL_DATA_FILE",
        "HOLIDAYCAL_STORE_KEY",
        "HOLIDAYCAL_YEAR_SPAN",
        "HOLIDAYCAL_RENDERER",
        "HOLIDAYCAL_CONSOLE_WIDTH",
        "HOLIDAYCAL_HIGHLIGHT_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture(autouse=True)
def restore_logger_levels() -> Generator[None, Any, None]:
    """Restore logger levels changed by logging configuration under test."""
    names = ["", *PACKAGE_LOGGERS]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.fixture
def christmas() -> HolidayRecord:
    """Two-day Christmas break in 2024."""
    return HolidayRecord(name="Christmas", start_date="2024-12-25", end_date="2024-12-26")


@pytest.fixture
def new_year_span() -> HolidayRecord:
    """Break that starts in 2023 and runs into 2024."""
    return HolidayRecord(name="New Year", start_date="2023-12-31", end_date="2024-01-02")


@pytest.fixture
def sample_holidays(christmas: HolidayRecord, new_year_span: HolidayRecord) -> list[HolidayRecord]:
    """Small holiday collection in upstream order."""
    return [
        HolidayRecord(name="Republic Day", start_date="2024-01-26", end_date="2024-01-26"),
        new_year_span,
        HolidayRecord(name="Spring Break", start_date="2024-03-25", end_date="2024-03-29"),
        christmas,
    ]


@pytest.fixture
def sample_state(sample_holidays: list[HolidayRecord]) -> dict[str, Any]:
    """Application state snapshot with records under academicCalendar.data."""
    return {
        "academicCalendar": {
            "data": [h.model_dump() for h in sample_holidays],
        },
        "auth": {"user": "someone"},
    }


@pytest.fixture
def reference_today() -> date:
    """Fixed 'today' for year selector tests."""
    return date(2024, 6, 15)
