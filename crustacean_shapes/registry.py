"""
RendererRegistry - Explicit renderer registration

Bounded Context: Output targets
Responsibilities:
  - Register named render targets with handlers
  - Reject unknown targets before anything is drawn
  - Provide introspection (available_renderers, get_help)

Pattern: Registry with explicit registration
"""

from pathlib import Path
from typing import Callable, Dict, Optional, Set

# (diagram, config, output_folder) -> written file, or None for stdout targets
RenderHandler = Callable[..., Optional[Path]]


class RendererNotAvailableError(Exception):
    """Raised when asking for a renderer that was never registered"""
    pass


class RendererRegistry:
    """
    Registry of render targets.

    Example:
        registry = RendererRegistry()
        registry.register('svg', render_svg, "SVG document + HTML preview")

        try:
            registry.execute('svg', diagram, config, output_folder)
        except RendererNotAvailableError as e:
            print(f"Renderer not available: {e}")
    """

    def __init__(self):
        self._handlers: Dict[str, RenderHandler] = {}
        self._descriptions: Dict[str, str] = {}

    def register(self, name: str, handler: RenderHandler, description: str) -> None:
        """
        Register a render target.

        Raises:
            ValueError: If name already registered
        """
        if name in self._handlers:
            raise ValueError(f"Renderer '{name}' already registered")

        self._handlers[name] = handler
        self._descriptions[name] = description

    def get(self, name: str) -> RenderHandler:
        """
        Look up a handler.

        Raises:
            RendererNotAvailableError: If name not registered
        """
        if name not in self._handlers:
            raise RendererNotAvailableError(
                f"Renderer '{name}' not available. "
                f"Available renderers: {', '.join(sorted(self.available_renderers))}"
            )
        return self._handlers[name]

    def execute(self, name: str, *args, **kwargs) -> Optional[Path]:
        return self.get(name)(*args, **kwargs)

    def is_available(self, name: str) -> bool:
        return name in self._handlers

    @property
    def available_renderers(self) -> Set[str]:
        return set(self._handlers.keys())

    def get_help(self) -> Dict[str, str]:
        return dict(self._descriptions)

    def count(self) -> int:
        return len(self._handlers)
