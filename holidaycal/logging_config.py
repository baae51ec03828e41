"""
Central logging configuration for holidaycal.

Sets the root and package logger levels, honouring environment overrides so
debug output can be enabled without code changes.
"""

import logging
import os
from typing import Optional

PACKAGE_LOGGERS = (
    "holidaycal",
    "holidaycal.state",
    "holidaycal.store",
    "holidaycal.grid",
    "holidaycal.matcher",
    "holidaycal.ui",
    "holidaycal.display",
)


def _env_debug() -> bool:
    return os.getenv("HOLIDAYCAL_DEBUG", "").strip().lower() in ("1", "true", "yes", "on")


def configure_logging(
    debug_mode: bool = False,
    force_debug: Optional[bool] = None,
    level_name: Optional[str] = None,
) -> int:
    """
    Configure logging levels for holidaycal.

    Args:
        debug_mode: Whether to enable debug logging for holidaycal modules
        force_debug: Override debug mode setting (None to use env var detection)
        level_name: Root log level when not in debug mode (default INFO)

    Returns:
        The root log level that was applied

    Environment Variables:
        HOLIDAYCAL_DEBUG: Set to '1', 'true', 'yes' to force debug logging
        HOLIDAYCAL_LOG_LEVEL: Override root log level (DEBUG, INFO, WARNING, ERROR)
    """
    env_log_level = os.getenv("HOLIDAYCAL_LOG_LEVEL", "").upper()

    if force_debug is not None:
        final_debug = force_debug
    elif _env_debug():
        final_debug = True
    else:
        final_debug = debug_mode

    base_level = getattr(logging, (level_name or "INFO").upper(), logging.INFO)
    root_level = logging.DEBUG if final_debug else base_level
    if env_log_level in ("DEBUG", "INFO", "WARNING", "ERROR"):
        root_level = getattr(logging, env_log_level)

    logging.getLogger().setLevel(root_level)

    package_level = logging.DEBUG if final_debug else root_level
    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(package_level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s package=%s",
        logging.getLevelName(root_level),
        logging.getLevelName(package_level),
    )
    return root_level


def get_logging_status() -> dict[str, str]:
    """
    Get current logging configuration status.

    Returns:
        Dictionary mapping logger names to their current levels
    """
    status = {"root": logging.getLevelName(logging.getLogger().level)}
    for name in PACKAGE_LOGGERS:
        status[name] = logging.getLevelName(logging.getLogger(name).level)
    return status
