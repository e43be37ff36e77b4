"""Command-line interface for fret-theory."""

from .main import cli

__all__ = ["cli"]
