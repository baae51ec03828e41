"""Keyboard input handling for interactive calendar navigation."""

import asyncio
import logging
import sys
from collections.abc import Awaitable
from enum import Enum
from typing import Any, Callable, Optional, Union

logger = logging.getLogger(__name__)

KeyCallback = Union[Callable[[], None], Callable[[], Awaitable[None]]]


class KeyCode(Enum):
    """Key codes for calendar commands."""

    LEFT_ARROW = "left"
    RIGHT_ARROW = "right"
    UP_ARROW = "up"
    DOWN_ARROW = "down"
    TOGGLE = "toggle"
    ESCAPE = "escape"
    UNKNOWN = "unknown"


# Typed-word input used when the terminal cannot be put into raw mode
FALLBACK_MAPPINGS = {
    "left": KeyCode.LEFT_ARROW,
    "prev": KeyCode.LEFT_ARROW,
    "p": KeyCode.LEFT_ARROW,
    "←": KeyCode.LEFT_ARROW,
    "right": KeyCode.RIGHT_ARROW,
    "next": KeyCode.RIGHT_ARROW,
    "n": KeyCode.RIGHT_ARROW,
    "→": KeyCode.RIGHT_ARROW,
    "up": KeyCode.UP_ARROW,
    "u": KeyCode.UP_ARROW,
    "↑": KeyCode.UP_ARROW,
    "down": KeyCode.DOWN_ARROW,
    "d": KeyCode.DOWN_ARROW,
    "↓": KeyCode.DOWN_ARROW,
    "toggle": KeyCode.TOGGLE,
    "t": KeyCode.TOGGLE,
    "space": KeyCode.TOGGLE,
    "esc": KeyCode.ESCAPE,
    "escape": KeyCode.ESCAPE,
    "exit": KeyCode.ESCAPE,
    "quit": KeyCode.ESCAPE,
    "q": KeyCode.ESCAPE,
}

SINGLE_CHAR_MAPPINGS = {
    " ": KeyCode.TOGGLE,
    "t": KeyCode.TOGGLE,
    "q": KeyCode.ESCAPE,
    "\x1b": KeyCode.ESCAPE,
}

# Normal ("\x1b[") and application cursor mode ("\x1bO") arrow keys
ESCAPE_SEQUENCE_PREFIXES = ("\x1b[", "\x1bO")

ESCAPE_SEQUENCE_MAPPINGS = {
    "A": KeyCode.UP_ARROW,
    "B": KeyCode.DOWN_ARROW,
    "C": KeyCode.RIGHT_ARROW,
    "D": KeyCode.LEFT_ARROW,
}

KEY_DESCRIPTIONS = {
    KeyCode.LEFT_ARROW: "← Previous month",
    KeyCode.RIGHT_ARROW: "→ Next month",
    KeyCode.UP_ARROW: "↑ Next year",
    KeyCode.DOWN_ARROW: "↓ Previous year",
    KeyCode.TOGGLE: "T: Toggle view",
    KeyCode.ESCAPE: "Q: Exit",
}


class KeyboardHandler:
    """Reads keystrokes and dispatches them to registered callbacks."""

    def __init__(self) -> None:
        """Create a key reader with no bound commands."""
        self._running = False
        self._key_callbacks: dict[KeyCode, KeyCallback] = {}
        self._fallback_mode = False
        self._old_settings: Optional[list[Any]] = None

        logger.debug("Calendar key reader created")

    def _getch(self) -> str:
        """Read a single character (raw mode) or a line (fallback mode)."""
        if self._fallback_mode:
            try:
                return input("Key (prev, next, up, down, toggle, q): ").strip()
            except EOFError:
                return "q"
        return sys.stdin.read(1)

    def _kbhit(self) -> bool:
        """Check for available input."""
        if self._fallback_mode:
            return True
        import select  # noqa: PLC0415

        return select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], [])

    def _setup_terminal(self) -> None:
        """Set up terminal for raw input mode, or fall back to line input."""
        if sys.platform == "win32" or not sys.stdin.isatty():
            self._setup_fallback_input()
            return

        try:
            import termios  # noqa: PLC0415

            fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(fd)

            new_settings = termios.tcgetattr(fd)
            new_settings[3] &= ~(termios.ICANON | termios.ECHO)
            new_settings[6][termios.VMIN] = 0
            new_settings[6][termios.VTIME] = 1

            termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
            logger.debug("Terminal set to raw input mode with timeout")
        except (ImportError, OSError) as e:
            logger.warning(f"Could not set terminal to raw mode: {e}")
            self._setup_fallback_input()

    def _setup_fallback_input(self) -> None:
        """Switch to line-based input."""
        logger.info("Terminal is not interactive; type a command and press Enter")
        self._fallback_mode = True

    def _restore_terminal(self) -> None:
        """Restore terminal settings."""
        if self._old_settings is None:
            return
        try:
            import termios  # noqa: PLC0415

            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._old_settings)
            logger.debug("Terminal settings restored")
        except (ImportError, OSError) as e:
            logger.warning(f"Could not restore terminal settings: {e}")
        finally:
            self._old_settings = None

    def parse_key_sequence(self, key_data: str) -> KeyCode:
        """Parse raw key data into a KeyCode.

        Args:
            key_data: Raw key data from input

        Returns:
            Corresponding KeyCode
        """
        if not key_data:
            return KeyCode.UNKNOWN
        if self._fallback_mode:
            return FALLBACK_MAPPINGS.get(key_data.lower().strip(), KeyCode.UNKNOWN)
        if len(key_data) == 1:
            return SINGLE_CHAR_MAPPINGS.get(key_data.lower(), KeyCode.UNKNOWN)
        if key_data.startswith(ESCAPE_SEQUENCE_PREFIXES):
            return ESCAPE_SEQUENCE_MAPPINGS.get(key_data[2:], KeyCode.UNKNOWN)
        return KeyCode.UNKNOWN

    def register_key_handler(self, key_code: KeyCode, callback: KeyCallback) -> None:
        """Bind a calendar command to a key.

        Args:
            key_code: Key code to handle
            callback: Function (sync or async) to call when key is pressed
        """
        self._key_callbacks[key_code] = callback
        logger.debug(f"Bound {key_code.value} key")

    def unregister_key_handler(self, key_code: KeyCode) -> None:
        """Remove the command bound to a key.

        Args:
            key_code: Key code to unregister
        """
        if key_code in self._key_callbacks:
            del self._key_callbacks[key_code]
            logger.debug(f"Unbound {key_code.value} key")

    async def start_listening(self) -> None:
        """Start listening for keyboard input until stopped."""
        if self._running:
            logger.warning("Key reader is already listening")
            return

        self._running = True
        self._setup_terminal()
        logger.info("Listening for calendar keys")

        try:
            await self._input_loop()
        finally:
            self._restore_terminal()
            self._running = False
            logger.info("No longer listening for calendar keys")

    def stop_listening(self) -> None:
        """Ask the input loop to exit after the current key."""
        self._running = False
        logger.debug("Key reader asked to stop")

    async def _input_loop(self) -> None:
        """Read keys and dispatch them until stopped."""
        while self._running:
            if not self._kbhit():
                await asyncio.sleep(0.05)
                continue

            if self._fallback_mode:
                key_data = await asyncio.get_running_loop().run_in_executor(None, self._getch)
            else:
                key_data = self._read_key_sequence()

            if not key_data:
                continue
            try:
                await self.handle_key_input(key_data)
            except Exception:
                logger.exception("Error handling key input")

    def _read_key_sequence(self) -> str:
        """Read a complete key sequence, including arrow-key escape sequences."""
        key_data = self._getch()
        if key_data != "\x1b":
            return key_data

        sequence = key_data
        # VTIME=1 makes _getch() return "" once the sequence is exhausted
        while len(sequence) < 8:
            next_char = self._getch()
            if not next_char:
                break
            sequence += next_char
            if len(sequence) > 2 and (next_char.isalpha() or next_char == "~"):
                break

        logger.debug(f"Read escape sequence: {sequence!r}")
        return sequence

    async def handle_key_input(self, key_data: str) -> KeyCode:
        """Dispatch a key input to its registered callback.

        Args:
            key_data: Raw key data

        Returns:
            The parsed key code
        """
        key_code = self.parse_key_sequence(key_data)
        logger.debug(f"Received key_data={key_data!r}, parsed as={key_code}")

        callback = self._key_callbacks.get(key_code)
        if key_code == KeyCode.UNKNOWN or callback is None:
            return key_code

        result = callback()
        if asyncio.iscoroutine(result):
            await result
        logger.debug(f"Handled key: {key_code}")
        return key_code

    @property
    def is_running(self) -> bool:
        """Whether the input loop is active."""
        return self._running

    def get_help_text(self) -> str:
        """Describe the bound keys in one line.

        Returns:
            Formatted help text
        """
        help_lines = [
            KEY_DESCRIPTIONS[key_code]
            for key_code in self._key_callbacks
            if key_code in KEY_DESCRIPTIONS
        ]
        return " | ".join(help_lines) if help_lines else "No keys bound"
