"""Unit tests for the HTML renderer and the renderer factory."""

from datetime import date

import pytest

from holidaycal.config import HolidayCalSettings
from holidaycal.display import ConsoleRenderer, HTMLRenderer, create_renderer
from holidaycal.exceptions import RendererNotFoundError
from holidaycal.models import HolidayRecord, ViewMode
from holidaycal.state import CalendarState
from holidaycal.view import build_view_model

pytestmark = pytest.mark.unit


def _render(state, holidays, today, settings=None, interactive=False):
    return HTMLRenderer(settings).render(
        build_view_model(state, holidays, today), interactive=interactive
    )


class TestHTMLGrid:
    """Grid markup."""

    def test_document_structure(self, reference_today):
        html = _render(CalendarState(date(2024, 12, 1)), [], reference_today)
        assert html.startswith("<!DOCTYPE html>")
        assert '<div class="calendar view-grid">' in html
        assert "<title>Holiday Calendar - December 2024</title>" in html
        assert html.count('<div class="weekday">') == 7

    def test_holiday_cells(self, christmas, reference_today):
        html = _render(CalendarState(date(2024, 12, 1)), [christmas], reference_today)
        assert html.count('class="day holiday"') == 2
        assert '<div class="day holiday" data-date="2024-12-25">' in html
        assert '<span class="holiday-name">Christmas</span>' in html
        assert '<div class="day" data-date="2024-12-24">' in html

    def test_leading_blanks(self, reference_today):
        html = _render(CalendarState(date(2024, 2, 1)), [], reference_today)
        assert html.count('<div class="blank"></div>') == 4

    def test_header_controls(self, reference_today):
        html = _render(CalendarState(date(2024, 12, 1)), [], reference_today)
        assert 'data-action="previous-month"' in html
        assert 'data-action="next-month"' in html
        assert '<option value="2024" selected>2024</option>' in html
        assert html.count("<option ") == 11
        assert "View Holidays" in html
        assert "<button" not in html

    def test_interactive_controls_are_buttons(self, reference_today):
        html = _render(CalendarState(date(2024, 12, 1)), [], reference_today, interactive=True)
        assert '<button data-action="toggle-view">View Holidays</button>' in html

    def test_highlight_color_from_settings(self, reference_today):
        settings = HolidayCalSettings(highlight_color="#123456")
        html = _render(CalendarState(date(2024, 12, 1)), [], reference_today, settings)
        assert ".day.holiday { background: #123456; }" in html


class TestHTMLList:
    """List markup."""

    def test_entries(self, sample_holidays, reference_today):
        state = CalendarState(date(2024, 12, 1), ViewMode.LIST)
        html = _render(state, sample_holidays, reference_today)
        assert html.count('<div class="holiday-entry">') == 3
        assert "<h3>Christmas</h3><p>25 Dec 2024 - 26 Dec 2024</p>" in html
        assert 'data-action="previous-month"' not in html
        assert 'data-action="year-select"' not in html
        assert 'data-action="next-month"' in html
        assert "Back to Calendar" in html

    def test_empty_placeholder(self, reference_today):
        state = CalendarState(date(2024, 12, 1), ViewMode.LIST)
        html = _render(state, [], reference_today)
        assert '<div class="no-holidays"><p>No holidays found for this year.</p></div>' in html

    def test_names_are_escaped(self, reference_today):
        holiday = HolidayRecord(name="<Tom & Jerry>", start_date="2024-12-02", end_date="2024-12-02")
        state = CalendarState(date(2024, 12, 1), ViewMode.LIST)
        html = _render(state, [holiday], reference_today)
        assert "&lt;Tom &amp; Jerry&gt;" in html
        assert "<Tom & Jerry>" not in html


class TestRendererFactory:
    """Renderer selection."""

    def test_default_is_console(self):
        assert isinstance(create_renderer(), ConsoleRenderer)

    def test_by_name(self):
        assert isinstance(create_renderer("html"), HTMLRenderer)
        assert isinstance(create_renderer("CONSOLE"), ConsoleRenderer)

    def test_from_settings(self):
        settings = HolidayCalSettings(renderer="html")
        renderer = create_renderer(settings=settings)
        assert isinstance(renderer, HTMLRenderer)
        assert renderer.settings is settings

    def test_unknown_renderer(self):
        with pytest.raises(RendererNotFoundError) as exc_info:
            create_renderer("pdf")
        assert exc_info.value.renderer_type == "pdf"
