"""Map calendar days to the holiday record covering them."""

import logging
from collections.abc import Iterable
from datetime import date
from typing import Optional

from .date_utils import is_within
from .models import HolidayRecord

logger = logging.getLogger(__name__)


def find_holiday(
    holidays: Optional[Iterable[HolidayRecord]],
    target: date,
    year: Optional[int] = None,
) -> Optional[HolidayRecord]:
    """Find the first holiday whose inclusive range contains ``target``.

    A record is only eligible in the year its range starts in: a holiday that
    starts on 2023-12-31 and ends on 2024-01-02 never matches days of 2024.
    When several records match, the first one in iteration order wins.

    Args:
        holidays: Holiday collection to scan, may be None
        target: Day to look up
        year: Displayed (cursor) year, defaults to ``target.year``

    Returns:
        Matching holiday record, or None
    """
    if not holidays:
        return None

    cursor_year = target.year if year is None else year

    for holiday in holidays:
        start = holiday.start
        if start is None or start.year != cursor_year:
            continue
        if is_within(target, start, holiday.end):
            return holiday

    return None
