"""Template rendering engine for Gorgon.

This module uses Jinja2 to render layout templates. Layout text is read by the
page renderer and handed over as a string, so the engine has no loader of its
own.

Key class:
- TemplateEngine: Renders a template string against a context mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from jinja2 import Environment, TemplateSyntaxError, Undefined

from .errors import RenderError

__all__ = ["TemplateEngine"]


class TemplateEngine:
    """Template rendering engine using Jinja2.

    Undefined names render as empty strings, so a layout that refers to
    frontmatter a page does not have still renders.

    Attributes:
        env: Jinja2 environment.
    """

    def __init__(self, env: Environment | None = None):
        """Initialize the template engine.

        Args:
            env: Optional preconfigured Jinja2 environment.
        """
        self.env = env or Environment(
            undefined=Undefined,
            autoescape=False,
            keep_trailing_newline=True,
        )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render a template string.

        Args:
            template: Template string to render.
            context: Variables to make available in the template.

        Returns:
            Rendered string.

        Raises:
            RenderError: If the template cannot be parsed.
        """
        try:
            tmpl = self.env.from_string(template)
        except TemplateSyntaxError as exc:
            raise RenderError(
                f"Template syntax error on line {exc.lineno}: {exc.message}"
            ) from exc
        return tmpl.render(**context)
