"""Command line entry points for flipdoc."""

from .main import main

__all__ = ["main"]
