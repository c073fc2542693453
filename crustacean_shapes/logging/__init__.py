"""
Structured Logging for Crustacean Shapes
========================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from crustacean_shapes.logging import create_logger, LogEvent
    >>> logger = create_logger("pipeline")
    >>> logger.info(
    ...     event=LogEvent.DIAGRAM_BUILT,
    ...     message="Showcase diagram built",
    ...     metadata={'elements': 6}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
