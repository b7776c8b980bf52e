"""Error types raised while constructing and building a site.

I/O failures are left as the builtin ``OSError`` family; everything Gorgon
itself detects derives from ``GorgonError``.
"""

from __future__ import annotations

from pathlib import Path


class GorgonError(Exception):
    """Base class for build errors.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PathNotFound(GorgonError):
    """The project directory does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Directory {path} does not exist")


class LayoutNotFound(GorgonError):
    """A page asked for a layout the theme does not provide."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Layout {name} does not exist")


class RenderError(GorgonError):
    """A collaborator (config loader, template engine) rejected its input."""


class AggregateError(GorgonError):
    """Several sibling items of one build phase failed."""
