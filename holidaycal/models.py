"""Data models for holiday calendar rendering."""

from datetime import date
from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .date_utils import WEEKDAY_HEADERS, parse_date


class ViewMode(str, Enum):
    """Active calendar view."""

    GRID = "grid"
    LIST = "list"


class HolidayRecord(BaseModel):
    """A named, inclusive holiday date range supplied by the data source.

    Date fields keep the raw upstream value; ``start`` and ``end`` expose the
    parsed whole-day dates (``None`` when the raw value is unparseable).
    """

    name: str = Field(default="", description="Display name of the holiday")
    start_date: Any = Field(default=None, description="Raw start date (inclusive)")
    end_date: Any = Field(default=None, description="Raw end date (inclusive)")

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    @property
    def start(self) -> Optional[date]:
        """Parsed start date."""
        return parse_date(self.start_date)

    @property
    def end(self) -> Optional[date]:
        """Parsed end date."""
        return parse_date(self.end_date)


class BlankCell(BaseModel):
    """Placeholder cell before the first day of the month."""

    kind: str = "blank"


class DayCell(BaseModel):
    """A single day of the displayed month."""

    kind: str = "day"
    day: int = Field(..., ge=1, le=31, description="Day of month")
    full_date: date = Field(..., description="Calendar date of the cell")
    holiday: Optional[HolidayRecord] = Field(
        default=None, description="First matching holiday, if any"
    )

    @property
    def is_holiday(self) -> bool:
        """Check if this day falls within a holiday."""
        return self.holiday is not None

    @property
    def holiday_name(self) -> Optional[str]:
        """Name of the matching holiday, if any."""
        return self.holiday.name if self.holiday is not None else None


GridCell = Union[BlankCell, DayCell]


class MonthGrid(BaseModel):
    """Seven-column day grid for one month."""

    year: int
    month: int
    month_name: str
    weekday_headers: tuple[str, ...] = WEEKDAY_HEADERS
    leading_blanks: int = Field(..., ge=0, le=6)
    cells: list[GridCell] = Field(default_factory=list)

    @property
    def day_cells(self) -> list[DayCell]:
        """Only the day cells, in order."""
        return [cell for cell in self.cells if isinstance(cell, DayCell)]

    @property
    def holiday_cells(self) -> list[DayCell]:
        """Day cells that fall within a holiday."""
        return [cell for cell in self.day_cells if cell.is_holiday]

    def weeks(self) -> list[list[GridCell]]:
        """Split the cells into rows of seven. The last row may be short."""
        return [self.cells[i : i + 7] for i in range(0, len(self.cells), 7)]


class HolidayListEntry(BaseModel):
    """One line of the holiday list view."""

    name: str
    start_label: str
    end_label: str

    @property
    def date_range(self) -> str:
        """Formatted inclusive range, e.g. ``25 Dec 2024 - 26 Dec 2024``."""
        return f"{self.start_label} - {self.end_label}"


class HolidayList(BaseModel):
    """Holidays starting in a given year, in upstream order."""

    year: int
    entries: list[HolidayListEntry] = Field(default_factory=list)
    empty_message: str = "No holidays found for this year."

    @property
    def is_empty(self) -> bool:
        """Check if no holidays start in the year."""
        return not self.entries


class CalendarViewModel(BaseModel):
    """Everything a renderer needs for one render pass."""

    view_mode: ViewMode
    current_date: date
    month_name: str
    year: int
    year_options: list[int] = Field(default_factory=list)
    toggle_label: str
    show_previous: bool = True
    show_next: bool = True
    show_month_controls: bool = True
    grid: Optional[MonthGrid] = None
    holiday_list: Optional[HolidayList] = None

    @property
    def is_grid(self) -> bool:
        """Check if the grid view is active."""
        return self.view_mode == ViewMode.GRID
