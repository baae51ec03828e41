"""Calendar cursor and view mode state management."""

import logging
from datetime import date
from typing import Callable, List, Optional

from .date_utils import add_months, month_name, replace_year
from .models import ViewMode

logger = logging.getLogger(__name__)

DEFAULT_YEAR_SPAN = 5


def year_options(today: Optional[date] = None, span: int = DEFAULT_YEAR_SPAN) -> list[int]:
    """Get the years offered by the year selector.

    The range is anchored on today's year, not on the displayed year.

    Args:
        today: Reference date, defaults to today
        span: Years on each side of the reference year

    Returns:
        Ascending list of ``2 * span + 1`` years
    """
    current_year = (today or date.today()).year
    return list(range(current_year - span, current_year + span + 1))


class CalendarState:
    """Manages the displayed month cursor and the active view."""

    def __init__(
        self,
        initial_date: Optional[date] = None,
        view_mode: ViewMode = ViewMode.GRID,
    ):
        """Initialize calendar state.

        Args:
            initial_date: Initial cursor date, defaults to today
            view_mode: Initial view, defaults to the grid
        """
        self._current_date = initial_date or date.today()
        self._view_mode = ViewMode(view_mode)
        self._change_callbacks: List[Callable[["CalendarState"], None]] = []

        logger.debug(
            f"Calendar state initialized with date: {self._current_date}, view: {self._view_mode.value}"
        )

    @property
    def current_date(self) -> date:
        """Get the cursor date."""
        return self._current_date

    @property
    def year(self) -> int:
        """Get the displayed year."""
        return self._current_date.year

    @property
    def month(self) -> int:
        """Get the displayed month (1-12)."""
        return self._current_date.month

    @property
    def month_name(self) -> str:
        """Get the displayed month's name."""
        return month_name(self._current_date.month)

    @property
    def view_mode(self) -> ViewMode:
        """Get the active view."""
        return self._view_mode

    def go_to_previous_month(self) -> date:
        """Move the cursor back one month, rolling over the year boundary.

        Returns:
            New cursor date
        """
        old_date = self._current_date
        self._current_date = add_months(self._current_date, -1)

        logger.debug(f"Navigated to previous month: {old_date} -> {self._current_date}")
        self._notify_change()
        return self._current_date

    def go_to_next_month(self) -> date:
        """Move the cursor forward one month, rolling over the year boundary.

        Returns:
            New cursor date
        """
        old_date = self._current_date
        self._current_date = add_months(self._current_date, 1)

        logger.debug(f"Navigated to next month: {old_date} -> {self._current_date}")
        self._notify_change()
        return self._current_date

    def set_year(self, year: int) -> date:
        """Replace the cursor's year, keeping month and day.

        A day that does not exist in the target year (February 29) is clamped
        to the last day of the month. Any year is accepted.

        Args:
            year: Target year

        Returns:
            New cursor date
        """
        old_date = self._current_date
        self._current_date = replace_year(self._current_date, year)

        logger.debug(f"Changed year to {year}: {old_date} -> {self._current_date}")
        self._notify_change()
        return self._current_date

    def toggle_view(self) -> ViewMode:
        """Swap between the grid and list views.

        Returns:
            New view mode
        """
        old_mode = self._view_mode
        self._view_mode = ViewMode.LIST if old_mode == ViewMode.GRID else ViewMode.GRID

        logger.debug(f"Toggled view: {old_mode.value} -> {self._view_mode.value}")
        self._notify_change()
        return self._view_mode

    def add_change_callback(self, callback: Callable[["CalendarState"], None]) -> None:
        """Add a callback to be called after every state change.

        Args:
            callback: Function called with this state object
        """
        self._change_callbacks.append(callback)
        logger.debug("Added state change callback")

    def remove_change_callback(self, callback: Callable[["CalendarState"], None]) -> None:
        """Remove a state change callback.

        Args:
            callback: Callback function to remove
        """
        if callback in self._change_callbacks:
            self._change_callbacks.remove(callback)
            logger.debug("Removed state change callback")

    def _notify_change(self) -> None:
        """Notify all registered callbacks of a state change."""
        for callback in self._change_callbacks:
            try:
                callback(self)
            except Exception as e:
                logger.error(f"Error in state change callback: {e}")

    def __str__(self) -> str:
        """String representation of calendar state."""
        return f"CalendarState(date={self._current_date}, view={self._view_mode.value})"

    def __repr__(self) -> str:
        """Detailed string representation."""
        return (
            f"CalendarState(current_date={self._current_date!r}, "
            f"view_mode={self._view_mode!r})"
        )
