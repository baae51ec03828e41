"""holidaycal - month-grid holiday calendar with a flat holiday list view.

Renders a pre-fetched collection of holiday records (read from an application
state snapshot) as a seven-column month grid or as a list of the displayed
year's holidays, to the console or to HTML.
"""

__version__ = "1.0.0"

from typing import Any, Optional


def _init_logging(level_name: Optional[str]) -> None:
    """Initialize root logging to stream to the console.

    Installs a colorized stderr handler if the root logger has none, so that
    early startup messages are visible. HOLIDAYCAL_DEBUG (truthy values: "1",
    "true", "yes", "on") forces DEBUG verbosity.
    """
    import logging
    import os
    import sys

    from colorlog import ColoredFormatter

    debug_env = os.environ.get("HOLIDAYCAL_DEBUG", "")
    if debug_env.strip().lower() in ("1", "true", "yes", "on"):
        level_name = "DEBUG"

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream=sys.stderr)
        # HH:MM:SS  LEVEL   logger.name: message, only the level is colorized
        fmt = "%(asctime)s %(log_color)s%(levelname)-7s%(reset)s %(name)s: %(message)s"
        log_colors = {
            "DEBUG": "cyan",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "bold_red",
        }
        handler.setFormatter(ColoredFormatter(fmt, datefmt="%H:%M:%S", log_colors=log_colors))
        root.addHandler(handler)

    level = logging.INFO
    if isinstance(level_name, str):
        level = getattr(logging, level_name.upper(), logging.INFO)
    root.setLevel(level)
    logging.getLogger(__name__).debug(
        "Logging initialized at level %s", logging.getLevelName(level)
    )


def run(args: Optional[Any] = None) -> int:
    """Render the calendar once, or run the interactive navigator.

    Args:
        args: Optional command line arguments namespace (see ``__main__``)

    Returns:
        Process exit code

    Raises:
        HolidayCalError: On configuration or data file errors
    """
    import asyncio
    import logging
    import os
    from datetime import date

    from .config import load_settings
    from .date_utils import days_in_month, replace_year
    from .display import create_renderer
    from .logging_config import configure_logging
    from .models import ViewMode
    from .state import CalendarState
    from .store import HolidayStore
    from .ui import InteractiveController
    from .view import build_view_model

    _init_logging(os.environ.get("HOLIDAYCAL_LOG_LEVEL"))
    logger = logging.getLogger(__name__)

    settings = load_settings(
        getattr(args, "config", None),
        data_file=getattr(args, "data", None),
        renderer=getattr(args, "format", None),
    )
    configure_logging(
        debug_mode=bool(getattr(args, "debug", False)), level_name=settings.log_level
    )

    store = HolidayStore.from_file(settings.data_file, key_path=settings.store_key)
    logger.info(f"Loaded {len(store)} holiday records")

    today = date.today()
    year = getattr(args, "year", None)
    if year is None:
        year = today.year
    month = getattr(args, "month", None)
    if month is None:
        month = today.month
    initial = replace_year(
        date(today.year, month, min(today.day, days_in_month(today.year, month))), year
    )

    state = CalendarState(initial, ViewMode(getattr(args, "view", None) or ViewMode.GRID.value))
    renderer = create_renderer(settings=settings)

    if getattr(args, "interactive", False):
        controller = InteractiveController(
            store.holidays, renderer, state=state, today=today, year_span=settings.year_span
        )
        asyncio.run(controller.start())
        return 0

    view_model = build_view_model(state, store.holidays, today, settings.year_span)
    print(renderer.render(view_model))
    return 0
