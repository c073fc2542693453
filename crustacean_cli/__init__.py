"""
Crustacean CLI - Command-line interface for rendering diagrams.

Usage:
    crustacean-cli draw
    crustacean-cli svg --output ./runs/svg
    crustacean-cli --config config/diagram.yaml render console svg raster
"""

from .cli import main

__all__ = ['main']
