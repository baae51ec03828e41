"""Console-based calendar renderer."""

import logging
from typing import Any, List, Optional

from ..models import CalendarViewModel, DayCell, HolidayList, MonthGrid
from ..utils import secure_clear_screen, truncate_text

logger = logging.getLogger(__name__)

HOLIDAY_MARKER = "*"
MIN_COLUMN_WIDTH = 5


class ConsoleRenderer:
    """Renders the holiday calendar to console/terminal text."""

    def __init__(self, settings: Optional[Any] = None) -> None:
        """Initialize console renderer.

        Args:
            settings: Application settings (uses ``console_width`` if present)
        """
        self.settings = settings
        self.width = int(getattr(settings, "console_width", 70) or 70)
        self.column_width = max(MIN_COLUMN_WIDTH, self.width // 7)

        logger.debug("Console renderer initialized")

    def render(self, view_model: CalendarViewModel, interactive: bool = False) -> str:
        """Render the view model to formatted console output.

        Args:
            view_model: View model for this render pass
            interactive: Whether to include key bindings help

        Returns:
            Formatted string for console display
        """
        lines: List[str] = []

        lines.append("=" * self.width)
        if view_model.is_grid:
            lines.append(f"📅 HOLIDAY CALENDAR - {view_model.month_name} {view_model.year}")
        else:
            lines.append(f"📅 HOLIDAY CALENDAR - Holidays {view_model.year}")
        lines.append("=" * self.width)

        lines.append(self._render_controls(view_model))
        if interactive:
            lines.append(self._render_navigation_help(view_model))
        lines.append("-" * self.width)

        if view_model.is_grid and view_model.grid is not None:
            lines.extend(self._render_grid(view_model.grid))
        elif view_model.holiday_list is not None:
            lines.extend(self._render_holiday_list(view_model.holiday_list))

        lines.append("=" * self.width)
        return "\n".join(lines)

    def _render_controls(self, view_model: CalendarViewModel) -> str:
        """Render the header controls line.

        Args:
            view_model: View model for this render pass

        Returns:
            Controls line mirroring the available interactions
        """
        parts = []

        if view_model.show_previous:
            parts.append("◀ Prev")

        if view_model.show_month_controls:
            parts.append(view_model.month_name)
            if view_model.year_options:
                parts.append(
                    f"Year: {view_model.year} "
                    f"({view_model.year_options[0]}-{view_model.year_options[-1]})"
                )
            else:
                parts.append(f"Year: {view_model.year}")

        parts.append(f"[{view_model.toggle_label}]")

        if view_model.show_next:
            parts.append("Next ▶")

        return " | ".join(parts)

    def _render_navigation_help(self, view_model: CalendarViewModel) -> str:
        """Render key bindings help for interactive mode."""
        help_parts = []
        if view_model.show_previous:
            help_parts.append("← → Month")
        else:
            help_parts.append("→ Month")
        if view_model.show_month_controls:
            help_parts.append("↑ ↓ Year")
        help_parts.append(f"T: {view_model.toggle_label}")
        help_parts.append("Q: Exit")
        return " | ".join(help_parts)

    def _render_grid(self, grid: MonthGrid) -> List[str]:
        """Render the month grid.

        Each week is one line of day numbers, followed by a line of holiday
        names when any day of that week is a holiday.

        Args:
            grid: Month grid to render

        Returns:
            List of lines
        """
        cw = self.column_width
        lines = ["".join(header.center(cw) for header in grid.weekday_headers)]

        for week in grid.weeks():
            day_parts = []
            name_parts = []
            for cell in week:
                if isinstance(cell, DayCell):
                    label = f"{cell.day}{HOLIDAY_MARKER}" if cell.is_holiday else str(cell.day)
                    day_parts.append(label.center(cw))
                    name = truncate_text(cell.holiday_name or "", cw - 1)
                    name_parts.append(name.center(cw))
                else:
                    day_parts.append(" " * cw)
                    name_parts.append(" " * cw)

            lines.append("".join(day_parts).rstrip())
            if any(isinstance(cell, DayCell) and cell.is_holiday for cell in week):
                lines.append("".join(name_parts).rstrip())

        if grid.holiday_cells:
            lines.append("")
            lines.append(f"{HOLIDAY_MARKER} holiday")

        return lines

    def _render_holiday_list(self, holiday_list: HolidayList) -> List[str]:
        """Render the holiday list.

        Args:
            holiday_list: Holidays for the displayed year

        Returns:
            List of lines
        """
        if holiday_list.is_empty:
            return ["", holiday_list.empty_message, ""]

        lines = [""]
        for entry in holiday_list.entries:
            lines.append(f"• {truncate_text(entry.name, self.width - 2)}")
            lines.append(f"  {entry.date_range}")
            lines.append("")
        return lines

    def clear_screen(self) -> bool:
        """Clear the console screen securely.

        Returns:
            True if screen was cleared successfully, False otherwise
        """
        return secure_clear_screen()

    def display_with_clear(self, content: str) -> None:
        """Display content after clearing screen.

        Args:
            content: Content to display
        """
        self.clear_screen()
        print(content)
        print()
