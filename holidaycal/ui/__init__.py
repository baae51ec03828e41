"""User interface components for interactive calendar navigation."""

from .interactive import InteractiveController
from .keyboard import KeyboardHandler, KeyCode

__all__ = ["InteractiveController", "KeyCode", "KeyboardHandler"]
