"""Interactive UI controller for holiday calendar navigation."""

import logging
from collections.abc import Sequence
from datetime import date
from typing import Any, Callable, Optional

from ..display.renderer_protocol import RendererProtocol
from ..models import CalendarViewModel, HolidayRecord, ViewMode
from ..state import DEFAULT_YEAR_SPAN, CalendarState, year_options
from ..view import build_view_model
from .keyboard import KeyboardHandler, KeyCode

logger = logging.getLogger(__name__)


class InteractiveController:
    """Maps keyboard interactions onto calendar state and re-renders."""

    def __init__(
        self,
        holidays: Sequence[HolidayRecord],
        renderer: RendererProtocol,
        state: Optional[CalendarState] = None,
        keyboard: Optional[KeyboardHandler] = None,
        output: Optional[Callable[[str], None]] = None,
        today: Optional[date] = None,
        year_span: int = DEFAULT_YEAR_SPAN,
    ):
        """Initialize interactive controller.

        Args:
            holidays: Holiday snapshot to display
            renderer: Renderer used for every render pass
            state: Calendar state, defaults to a fresh state at today
            keyboard: Keyboard handler, defaults to a new one
            output: Sink for rendered content; defaults to the renderer's
                ``display_with_clear`` if it has one, else ``print``
            today: Reference date for the year selector
            year_span: Years on each side of today's year in the selector
        """
        self.holidays = tuple(holidays)
        self.renderer = renderer
        self.state = state or CalendarState()
        self.keyboard = keyboard or KeyboardHandler()
        self.today = today
        self.year_span = year_span
        self._output = output or getattr(renderer, "display_with_clear", print)
        self._running = False
        self.last_rendered: Optional[str] = None

        self._setup_keyboard_handlers()
        self.state.add_change_callback(self._on_state_changed)

        logger.info("Interactive controller initialized")

    def _setup_keyboard_handlers(self) -> None:
        """Set up keyboard event handlers."""
        self.keyboard.register_key_handler(KeyCode.LEFT_ARROW, self._handle_previous_month)
        self.keyboard.register_key_handler(KeyCode.RIGHT_ARROW, self._handle_next_month)
        self.keyboard.register_key_handler(KeyCode.UP_ARROW, self._handle_next_year)
        self.keyboard.register_key_handler(KeyCode.DOWN_ARROW, self._handle_previous_year)
        self.keyboard.register_key_handler(KeyCode.TOGGLE, self._handle_toggle_view)
        self.keyboard.register_key_handler(KeyCode.ESCAPE, self._handle_exit)

        logger.debug("Keyboard handlers configured")

    @property
    def _grid_active(self) -> bool:
        return self.state.view_mode == ViewMode.GRID

    def _handle_previous_month(self) -> None:
        """Handle left arrow key - previous month (grid view only)."""
        if not self._grid_active:
            logger.debug("Previous month ignored in list view")
            return
        self.state.go_to_previous_month()

    def _handle_next_month(self) -> None:
        """Handle right arrow key - next month."""
        self.state.go_to_next_month()

    def _handle_next_year(self) -> None:
        """Handle up arrow key - next year in the selector."""
        if not self._grid_active:
            return
        options = year_options(self.today, self.year_span)
        later = [y for y in options if y > self.state.year]
        if later:
            self.state.set_year(later[0])
        else:
            logger.debug("Already at the last selectable year")

    def _handle_previous_year(self) -> None:
        """Handle down arrow key - previous year in the selector."""
        if not self._grid_active:
            return
        options = year_options(self.today, self.year_span)
        earlier = [y for y in options if y < self.state.year]
        if earlier:
            self.state.set_year(earlier[-1])
        else:
            logger.debug("Already at the first selectable year")

    def _handle_toggle_view(self) -> None:
        """Handle toggle key - swap grid and list views."""
        self.state.toggle_view()

    async def _handle_exit(self) -> None:
        """Handle escape key - exit interactive mode."""
        logger.info("User requested exit from interactive mode")
        await self.stop()

    def _on_state_changed(self, state: CalendarState) -> None:
        """Re-render after every state change."""
        logger.debug(f"State changed: {state}")
        self.refresh()

    def build_view_model(self) -> CalendarViewModel:
        """Build the view model for the current state."""
        return build_view_model(self.state, self.holidays, self.today, self.year_span)

    def refresh(self) -> str:
        """Render the current state and send it to the output.

        Returns:
            Rendered content
        """
        content = self.renderer.render(self.build_view_model(), interactive=True)
        self.last_rendered = content
        self._output(content)
        return content

    async def start(self) -> None:
        """Start interactive mode and block until the user exits."""
        if self._running:
            logger.warning("Interactive controller already running")
            return

        self._running = True
        logger.info("Starting interactive calendar navigation")

        try:
            self.refresh()
            await self.keyboard.start_listening()
        finally:
            self._running = False
            logger.info("Interactive mode stopped")

    async def stop(self) -> None:
        """Stop interactive mode and stop re-rendering on state changes."""
        self._running = False
        self.state.remove_change_callback(self._on_state_changed)
        self.keyboard.stop_listening()
        logger.debug("Interactive controller stop requested")

    @property
    def is_running(self) -> bool:
        """Check if interactive controller is running."""
        return self._running

    def get_navigation_state(self) -> dict[str, Any]:
        """Get current navigation state information.

        Returns:
            Navigation state dictionary
        """
        return {
            "current_date": self.state.current_date.isoformat(),
            "year": self.state.year,
            "month": self.state.month,
            "month_name": self.state.month_name,
            "view_mode": self.state.view_mode.value,
            "help": self.keyboard.get_help_text(),
        }
