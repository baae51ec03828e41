"""Renderer protocol interface for type consistency."""

from typing import Protocol

from ..models import CalendarViewModel


class RendererProtocol(Protocol):
    """Protocol defining the interface that all renderers must implement."""

    def render(self, view_model: CalendarViewModel, interactive: bool = False) -> str:
        """Render a calendar view model.

        Args:
            view_model: Data model containing all information needed for rendering
            interactive: Whether to include key bindings help

        Returns:
            Rendered output
        """
        ...


class ConsoleRendererProtocol(RendererProtocol, Protocol):
    """Extended protocol for console-specific renderers."""

    def clear_screen(self) -> bool:
        """Clear the console screen."""
        ...

    def display_with_clear(self, content: str) -> None:
        """Display content after clearing screen.

        Args:
            content: Content to display
        """
        ...
