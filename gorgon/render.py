"""Page rendering for Gorgon.

A page names its layout in frontmatter. The layout is the theme file whose base
name, up to the first dot, matches that name: ``post`` finds ``post.html`` as
well as ``post.html.jinja``.

Rendering only reads the layout; writing the result is a later build phase.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import click

from .context import build_context
from .errors import LayoutNotFound
from .protocols import Formatter, TemplateRenderer
from .site import File, Page, Site


def find_layout(layouts: Iterable[File], name: str) -> File:
    """Find the layout file for a layout name.

    Args:
        layouts: Theme layout files, searched in order.
        name: Layout name from the page's frontmatter.

    Returns:
        The first matching layout file.

    Raises:
        LayoutNotFound: If no layout matches.
    """
    for layout in layouts:
        if layout.stripped == name:
            return layout
    raise LayoutNotFound(name)


def output_path(site: Site, page: Page) -> Path:
    """Return the path a page's rendered HTML is written to."""
    return site.config.out_dir / f"{page.file.stripped}.html"


def render_page(
    site: Site,
    page: Page,
    engine: TemplateRenderer,
    formatter: Formatter,
) -> File:
    """Render a page through its layout.

    Args:
        site: The site being built.
        page: Page to render.
        engine: Template engine used for the layout.
        formatter: Console formatter for the progress line.

    Returns:
        Output File holding the rendered HTML.

    Raises:
        LayoutNotFound: If the page's layout is not in the theme.
        OSError: If the layout file cannot be read.
    """
    click.echo(f"Rendering page {formatter.highlight(page.file.stripped)}...")
    layout = find_layout(site.theme_files.layouts, page.frontmatter.layout)
    template = layout.path.read_text(encoding="utf-8")
    output = engine.render_string(template, build_context(site, page))
    return File.construct(output_path(site, page), output)
