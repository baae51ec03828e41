"""Month grid construction for the calendar view."""

import logging
from collections.abc import Sequence
from datetime import date
from typing import Optional

from .date_utils import days_in_month, first_weekday, month_name
from .matcher import find_holiday
from .models import BlankCell, DayCell, GridCell, HolidayRecord, MonthGrid

logger = logging.getLogger(__name__)


def build_month_grid(
    cursor: date, holidays: Optional[Sequence[HolidayRecord]] = None
) -> MonthGrid:
    """Build the seven-column day grid for the cursor's month.

    The grid starts with one blank cell per weekday before the 1st (Sunday
    first) followed by one cell per day. It is not padded after the last day.

    Args:
        cursor: Any date in the month to display
        holidays: Holiday collection used to decorate day cells

    Returns:
        MonthGrid for the month
    """
    year, month = cursor.year, cursor.month
    leading = first_weekday(year, month)
    total_days = days_in_month(year, month)

    cells: list[GridCell] = [BlankCell() for _ in range(leading)]

    for day in range(1, total_days + 1):
        current = date(year, month, day)
        holiday = find_holiday(holidays, current, year)
        cells.append(DayCell(day=day, full_date=current, holiday=holiday))

    grid = MonthGrid(
        year=year,
        month=month,
        month_name=month_name(month),
        leading_blanks=leading,
        cells=cells,
    )
    logger.debug(
        f"Built grid for {year}-{month:02d}: {leading} blanks, {total_days} days, "
        f"{len(grid.holiday_cells)} holiday days"
    )
    return grid
