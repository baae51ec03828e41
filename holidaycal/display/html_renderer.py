"""HTML-based calendar renderer."""

import logging
from typing import Any, List, Optional

from ..models import CalendarViewModel, DayCell, HolidayList, MonthGrid

logger = logging.getLogger(__name__)

DEFAULT_HIGHLIGHT_COLOR = "#f48665"


class HTMLRenderer:
    """Renders the holiday calendar to a standalone HTML document."""

    def __init__(self, settings: Optional[Any] = None) -> None:
        """Initialize HTML renderer.

        Args:
            settings: Application settings (uses ``highlight_color`` if present)
        """
        self.settings = settings
        self.highlight_color = getattr(settings, "highlight_color", None) or DEFAULT_HIGHLIGHT_COLOR

        logger.debug(f"HTML renderer initialized with highlight color {self.highlight_color}")

    def render(self, view_model: CalendarViewModel, interactive: bool = False) -> str:
        """Render the view model to HTML.

        Args:
            view_model: View model for this render pass
            interactive: Whether to render the controls as clickable buttons

        Returns:
            Complete HTML document
        """
        header = self._render_header(view_model, interactive)

        if view_model.is_grid and view_model.grid is not None:
            body = self._render_grid(view_model.grid)
            title = f"{view_model.month_name} {view_model.year}"
        elif view_model.holiday_list is not None:
            body = self._render_holiday_list(view_model.holiday_list)
            title = f"Holidays {view_model.year}"
        else:
            body = ""
            title = str(view_model.year)

        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Holiday Calendar - {self._escape_html(title)}</title>
<style>
{self._build_styles()}
</style>
</head>
<body>
<div class="calendar view-{view_model.view_mode.value}">
{header}
{body}
</div>
</body>
</html>
"""

    def _build_styles(self) -> str:
        return f"""
.calendar-header {{ background: linear-gradient(135deg, {self.highlight_color} 0%, #fda23f 100%);
  color: white; border-radius: 8px; padding: 12px; display: flex;
  align-items: center; justify-content: space-between; font-weight: bold; }}
.calendar-grid {{ display: grid; grid-template-columns: repeat(7, 1fr); gap: 4px; }}
.weekday {{ font-weight: bold; text-align: center; }}
.day {{ border-radius: 8px; background: #fff; text-align: center; font-size: 18px;
  font-weight: bold; position: relative; padding: 8px 2px 20px; }}
.day.holiday {{ background: {self.highlight_color}; }}
.holiday-name {{ font-size: 12px; color: #fff; position: absolute; bottom: 4px; width: 100%; }}
.holiday-entry {{ background: #fff; color: #4fa2fa; border-radius: 8px; padding: 12px;
  margin-bottom: 8px; box-shadow: 0 5px 15px rgba(0, 0, 0, 0.2); }}
""".strip()

    def _render_header(self, view_model: CalendarViewModel, interactive: bool) -> str:
        """Render the header controls.

        Args:
            view_model: View model for this render pass
            interactive: Whether controls are clickable

        Returns:
            Header HTML
        """

        def control(action: str, label: str) -> str:
            if interactive:
                return f'<button data-action="{action}">{self._escape_html(label)}</button>'
            return f'<span class="control" data-action="{action}">{self._escape_html(label)}</span>'

        parts: List[str] = []
        if view_model.show_previous:
            parts.append(control("previous-month", "◀"))

        parts.append('<div class="header-center">')
        if view_model.show_month_controls:
            parts.append(f'<span class="month-name">{self._escape_html(view_model.month_name)}</span>')
            options = []
            for year in view_model.year_options:
                selected = " selected" if year == view_model.year else ""
                options.append(f'<option value="{year}"{selected}>{year}</option>')
            parts.append(f'<select class="year-select" data-action="year-select">{"".join(options)}</select>')
        parts.append(control("toggle-view", view_model.toggle_label))
        parts.append("</div>")

        if view_model.show_next:
            parts.append(control("next-month", "▶"))

        return f'<div class="calendar-header">{"".join(parts)}</div>'

    def _render_grid(self, grid: MonthGrid) -> str:
        """Render the month grid as a CSS grid."""
        items = [f'<div class="weekday">{name}</div>' for name in grid.weekday_headers]

        for cell in grid.cells:
            if not isinstance(cell, DayCell):
                items.append('<div class="blank"></div>')
                continue
            if cell.is_holiday:
                items.append(
                    f'<div class="day holiday" data-date="{cell.full_date.isoformat()}">'
                    f"<span>{cell.day}</span>"
                    f'<span class="holiday-name">{self._escape_html(cell.holiday_name or "")}</span>'
                    "</div>"
                )
            else:
                items.append(
                    f'<div class="day" data-date="{cell.full_date.isoformat()}">'
                    f"<span>{cell.day}</span></div>"
                )

        return '<div class="calendar-grid">' + "".join(items) + "</div>"

    def _render_holiday_list(self, holiday_list: HolidayList) -> str:
        """Render the holiday list or its empty-state placeholder."""
        if holiday_list.is_empty:
            return (
                '<div class="no-holidays">'
                f"<p>{self._escape_html(holiday_list.empty_message)}</p></div>"
            )

        entries = [
            '<div class="holiday-entry">'
            f"<h3>{self._escape_html(entry.name)}</h3>"
            f"<p>{self._escape_html(entry.date_range)}</p>"
            "</div>"
            for entry in holiday_list.entries
        ]
        return '<div class="holiday-list">' + "".join(entries) + "</div>"

    def _escape_html(self, text: str) -> str:
        """Escape HTML special characters.

        Args:
            text: Text to escape

        Returns:
            HTML-escaped text
        """
        if not text:
            return ""

        return (
            text.replace("&", "&amp;")
            .replace("<", "&lt;")
            .replace(">", "&gt;")
            .replace('"', "&quot;")
            .replace("'", "&#x27;")
        )
