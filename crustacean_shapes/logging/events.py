"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Design:
- Enum-based (prevents typos, enables autocomplete)
- Hierarchical naming (category.action)

Event Naming Convention:
    <category>.<action>

    category: config, diagram, render, error
    action: loaded, built, started, completed, written
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - config.*: Configuration loading
    - diagram.*: Diagram construction
    - render.*: Renderer runs and written outputs
    - error.*: Error conditions
    """

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    # ========== Diagram Events ==========
    DIAGRAM_BUILT = "diagram.built"
    """Diagram assembled from config or samples."""

    # ========== Render Events ==========
    RENDER_STARTED = "render.started"
    """A renderer started drawing the diagram."""

    RENDER_COMPLETED = "render.completed"
    """A renderer finished drawing the diagram."""

    RENDER_OUTPUT_WRITTEN = "render.output.written"
    """Rendered output written to disk."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Configuration failed to load or validate."""

    RENDER_ERROR = "error.render"
    """A renderer failed."""

