"""Small console helpers shared by the renderers and the interactive UI."""

import logging
import os
import subprocess  # nosec

logger = logging.getLogger(__name__)

SCROLL_LINES = 50


def truncate_text(text: str, max_length: int) -> str:
    """Truncate text to fit within specified length.

    Args:
        text: Text to truncate
        max_length: Maximum length allowed

    Returns:
        Truncated text with ellipsis if needed
    """
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def secure_clear_screen() -> bool:
    """Clear the terminal before redrawing the calendar.

    The clear command is run without a shell. If it is unavailable the
    previous calendar is scrolled away with blank lines instead.

    Returns:
        True if the clear command succeeded
    """
    command = ["clear"] if os.name == "posix" else ["cmd.exe", "/c", "cls"]
    try:
        subprocess.run(command, check=True, timeout=5)  # nosec
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.warning(f"Could not clear terminal with {command[0]}: {e}")
        print("\n" * SCROLL_LINES)
        return False
    return True
