"""Renderer factory for output format selection."""

import logging
from typing import Any, Optional

from ..exceptions import RendererNotFoundError
from .console_renderer import ConsoleRenderer
from .html_renderer import HTMLRenderer
from .renderer_protocol import RendererProtocol

logger = logging.getLogger(__name__)

RENDERERS: dict[str, type] = {
    "console": ConsoleRenderer,
    "html": HTMLRenderer,
}


def create_renderer(
    renderer_type: Optional[str] = None, settings: Optional[Any] = None
) -> RendererProtocol:
    """Create a renderer by name.

    Args:
        renderer_type: ``console`` or ``html``; defaults to ``settings.renderer``
            or ``console``
        settings: Application settings passed to the renderer

    Returns:
        Renderer instance

    Raises:
        RendererNotFoundError: If the renderer type is unknown
    """
    kind = (renderer_type or getattr(settings, "renderer", None) or "console").lower()
    renderer_class = RENDERERS.get(kind)
    if renderer_class is None:
        raise RendererNotFoundError(kind)

    logger.debug(f"Creating {kind} renderer")
    renderer: RendererProtocol = renderer_class(settings)
    return renderer
