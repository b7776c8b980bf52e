"""Feed generation for Gorgon.

This module renders the site's posts as an RSS 2.0 document. The build
pipeline decides whether a feed is written at all; a renderer only produces
the document.

Classes:
    RSSRenderer: Renders rss.xml from a Site.

Functions:
    render_feed: Render the RSS document for a site.
"""

from __future__ import annotations

from datetime import datetime, timezone

from markupsafe import escape

from .context import by_date
from .site import Site

RFC822_FORMAT = "%a, %d %b %Y %H:%M:%S +0000"


class RSSRenderer:
    """Generates an RSS 2.0 feed for content syndication.

    Items are the site's posts, newest first. Links are built from the
    ``url`` setting; without one they are relative to the site root.
    """

    @property
    def filename(self) -> str:
        """Return RSS filename."""
        return "rss.xml"

    def render(self, site: Site) -> str:
        """Generate RSS feed content.

        Args:
            site: Site whose posts become feed items.

        Returns:
            RSS XML content.
        """
        config = site.config
        base_url = config.url.rstrip("/")

        items = []
        for post in by_date(site.posts):
            frontmatter = post.frontmatter
            link = f"{base_url}/{post.url}" if base_url else f"/{post.url}"
            item = [
                f"<item><title>{escape(frontmatter.title)}</title>",
                f"<link>{escape(link)}</link>",
                f"<guid>{escape(link)}</guid>",
            ]
            description = frontmatter.extra.get("description")
            if description:
                item.append(f"<description>{escape(description)}</description>")
            if frontmatter.date is not None:
                item.append(
                    f"<pubDate>{frontmatter.date.strftime(RFC822_FORMAT)}</pubDate>"
                )
            item.append("</item>")
            items.append("".join(item))

        build_date = datetime.now(timezone.utc).strftime(RFC822_FORMAT)
        rss = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0"><channel>',
            f"<title>{escape(config.title)}</title>",
            f"<link>{escape(base_url or '/')}</link>",
            f"<description>{escape(config.description)}</description>",
            f"<lastBuildDate>{build_date}</lastBuildDate>",
        ]
        rss.extend(items)
        rss.append("</channel></rss>")
        return "\n".join(rss)


def render_feed(site: Site) -> str:
    """Render the RSS document for a site."""
    return RSSRenderer().render(site)
