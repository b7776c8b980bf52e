"""Template data for a page.

Every layout receives the same five names:

- ``page``: the page being rendered, with its frontmatter as a nested mapping.
- ``pages``: frontmatter of every non-post page, newest first.
- ``posts``: frontmatter of every post, newest first.
- ``config``: site configuration.
- ``theme``: theme layouts and assets.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from .site import Page, Site


def _date_key(page: Page) -> tuple[bool, datetime]:
    date = page.frontmatter.date
    return (date is not None, date or datetime.min)


def by_date(pages: Iterable[Page]) -> list[Page]:
    """Sort pages by date, newest first.

    The sort is stable: pages sharing a date keep their input order. Pages
    without a date come after every dated page.
    """
    return sorted(pages, key=_date_key, reverse=True)


def normalized(pages: Iterable[Page]) -> list[dict[str, Any]]:
    """Frontmatter of each page, newest first (see by_date)."""
    return [page.frontmatter.to_context() for page in by_date(pages)]


def build_context(site: Site, page: Page) -> Mapping[str, Any]:
    """Assemble the read-only template data for one page.

    Args:
        site: The site being built.
        page: The page about to be rendered.

    Returns:
        Mapping with the keys page, pages, posts, config and theme.
    """
    return MappingProxyType(
        {
            "page": page.to_context(),
            "pages": normalized(site.pages),
            "posts": normalized(site.posts),
            "config": site.config.to_context(),
            "theme": site.theme_files.to_context(),
        }
    )
