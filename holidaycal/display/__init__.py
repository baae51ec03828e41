"""Output renderers for the holiday calendar."""

from .console_renderer import ConsoleRenderer
from .html_renderer import HTMLRenderer
from .renderer_factory import create_renderer
from .renderer_protocol import ConsoleRendererProtocol, RendererProtocol

__all__ = [
    "ConsoleRenderer",
    "ConsoleRendererProtocol",
    "HTMLRenderer",
    "RendererProtocol",
    "create_renderer",
]
