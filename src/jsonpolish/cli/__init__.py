"""Command-line interface for json-polish."""

from jsonpolish import __version__

__all__ = ['__version__']
