"""Protocol definitions for Gorgon.

This module defines the interfaces of the collaborators the build pipeline
depends on. The pipeline only talks to these abstractions, so tests and
callers can substitute their own implementations.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .site import Site


@runtime_checkable
class Formatter(Protocol):
    """Protocol for styling console output.

    The build never inspects what a formatter returns; it only prints it.
    """

    @abstractmethod
    def highlight(self, text: str) -> str:
        """Emphasize a name or path inside a progress message."""
        ...

    @abstractmethod
    def success(self, text: str) -> str:
        """Style a success message."""
        ...

    @abstractmethod
    def error(self, text: str) -> str:
        """Style an error message."""
        ...


@runtime_checkable
class TemplateRenderer(Protocol):
    """Protocol for rendering layout templates."""

    @abstractmethod
    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render a template string.

        Args:
            template: Template string to render.
            context: Variables to make available in the template.

        Returns:
            Rendered string.
        """
        ...


@runtime_checkable
class FeedRenderer(Protocol):
    """Protocol for producing a syndication document from a site."""

    @property
    @abstractmethod
    def filename(self) -> str:
        """Return the output filename, such as 'rss.xml'."""
        ...

    @abstractmethod
    def render(self, site: Site) -> str:
        """Render the feed document for the site's posts."""
        ...
