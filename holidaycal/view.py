"""Assemble the per-render view model from state and holidays."""

from collections.abc import Sequence
from datetime import date
from typing import Optional

from .grid import build_month_grid
from .holiday_list import build_holiday_list
from .models import CalendarViewModel, HolidayRecord, ViewMode
from .state import DEFAULT_YEAR_SPAN, CalendarState, year_options

TOGGLE_LABELS = {
    ViewMode.GRID: "View Holidays",
    ViewMode.LIST: "Back to Calendar",
}


def build_view_model(
    state: CalendarState,
    holidays: Optional[Sequence[HolidayRecord]] = None,
    today: Optional[date] = None,
    year_span: int = DEFAULT_YEAR_SPAN,
) -> CalendarViewModel:
    """Build the view model for the current state.

    Only the active view is computed. The previous-month arrow and the
    month/year controls belong to the grid view; the next-month arrow is
    always shown.

    Args:
        state: Calendar state
        holidays: Holiday collection
        today: Reference date for the year selector, defaults to today
        year_span: Years on each side of today's year in the selector

    Returns:
        CalendarViewModel for one render pass
    """
    is_grid = state.view_mode == ViewMode.GRID

    return CalendarViewModel(
        view_mode=state.view_mode,
        current_date=state.current_date,
        month_name=state.month_name,
        year=state.year,
        year_options=year_options(today, year_span),
        toggle_label=TOGGLE_LABELS[state.view_mode],
        show_previous=is_grid,
        show_next=True,
        show_month_controls=is_grid,
        grid=build_month_grid(state.current_date, holidays) if is_grid else None,
        holiday_list=None if is_grid else build_holiday_list(holidays, state.year),
    )
