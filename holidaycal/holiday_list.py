"""Flat holiday list for the list view."""

import logging
from collections.abc import Iterable
from typing import Optional

from .date_utils import format_display_date
from .models import HolidayList, HolidayListEntry, HolidayRecord

logger = logging.getLogger(__name__)


def holidays_starting_in(
    holidays: Optional[Iterable[HolidayRecord]], year: int
) -> list[HolidayRecord]:
    """Return holidays whose start date falls in ``year``, in upstream order."""
    if not holidays:
        return []
    return [h for h in holidays if h.start is not None and h.start.year == year]


def build_holiday_list(
    holidays: Optional[Iterable[HolidayRecord]], year: int
) -> HolidayList:
    """Build the list view entries for a year.

    Args:
        holidays: Holiday collection, may be None
        year: Year to list

    Returns:
        HolidayList, empty when nothing starts in the year
    """
    entries = [
        HolidayListEntry(
            name=holiday.name,
            start_label=format_display_date(holiday.start_date),
            end_label=format_display_date(holiday.end_date),
        )
        for holiday in holidays_starting_in(holidays, year)
    ]
    logger.debug(f"Holiday list for {year}: {len(entries)} entries")
    return HolidayList(year=year, entries=entries)
