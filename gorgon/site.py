"""Site model for Gorgon.

This module defines the immutable records a build works on. A ``Site`` is
constructed once per build (see ``gorgon.content``) and never modified.

Each record provides ``to_context()``, a plain mapping used as template data.
The conversions live next to the records so that what a layout can see is
spelled out field by field.

Key classes:
- File: A path on disk plus its base name and, for outputs, its content.
- Frontmatter: Layout name, title, date and arbitrary extra metadata.
- Page: A content file with its frontmatter and rendered body.
- Config: Site-wide settings.
- Theme: Layout templates and static assets.
- Site: The aggregate root handed to the build pipeline.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from pathlib import Path
from types import MappingProxyType
from typing import Any


def _frozen(mapping: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping or {}))


def normalize_date(value: Any) -> datetime | None:
    """Coerce a frontmatter date into a naive datetime.

    YAML yields ``date`` for ``2024-01-15`` and ``datetime`` for full
    timestamps, and the two cannot be compared with each other. Aware
    datetimes are converted to UTC first.

    Args:
        value: A date, datetime, ISO 8601 string or None.

    Returns:
        A naive datetime, or None if the value carries no date.
    """
    if value is None or value == "":
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip())
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(frozen=True)
class File:
    """A file read from or written to disk.

    Attributes:
        path: Full path of the file.
        basename: File name including every extension.
        content: File content for output records; None for input records.
    """

    path: Path
    basename: str
    content: str | None = None

    @property
    def stripped(self) -> str:
        """Base name up to its first dot (``post.html.jinja`` -> ``post``)."""
        return self.basename.split(".")[0]

    @classmethod
    def from_path(cls, path: Path) -> File:
        return cls(path=Path(path), basename=Path(path).name)

    @classmethod
    def construct(cls, path: Path, content: str) -> File:
        return cls(path=Path(path), basename=Path(path).name, content=content)

    def to_context(self) -> dict[str, Any]:
        return {
            "path": str(self.path),
            "basename": self.basename,
            "stripped": self.stripped,
            "content": self.content,
        }


@dataclass(frozen=True)
class Frontmatter:
    """Metadata block at the top of a content file.

    Attributes:
        layout: Name of the theme layout used to render the page.
        title: Page title.
        date: Publication date, if any.
        extra: Every other frontmatter key, passed through untouched.
    """

    layout: str
    title: str
    date: datetime | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", _frozen(self.extra))

    def to_context(self) -> dict[str, Any]:
        context = dict(self.extra)
        context.update(layout=self.layout, title=self.title, date=self.date)
        return context


@dataclass(frozen=True)
class Page:
    """A page or post of the site.

    Attributes:
        file: Source file.
        frontmatter: Parsed frontmatter.
        content: HTML rendered from the source body.
        is_post: Whether the page came from the posts directory.
    """

    file: File
    frontmatter: Frontmatter
    content: str = ""
    is_post: bool = False

    @property
    def url(self) -> str:
        return f"{self.file.stripped}.html"

    def to_context(self) -> dict[str, Any]:
        return {
            "file": self.file.to_context(),
            "frontmatter": self.frontmatter.to_context(),
            "content": self.content,
            "is_post": self.is_post,
            "url": self.url,
        }


@dataclass(frozen=True)
class Config:
    """Site-wide settings.

    Attributes:
        out_dir: Directory the site is built into.
        generate_rss: Whether to write rss.xml when the site has posts.
        title: Site title.
        url: Public base URL, used for feed links.
        description: Site description.
        workers: Optional cap on concurrent build tasks.
        extra: Every other configuration key, passed through untouched.
    """

    out_dir: Path
    generate_rss: bool = False
    title: str = ""
    url: str = ""
    description: str = ""
    workers: int | None = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", _frozen(self.extra))

    def to_context(self) -> dict[str, Any]:
        context = dict(self.extra)
        context.update(
            out_dir=str(self.out_dir),
            generate_rss=self.generate_rss,
            title=self.title,
            url=self.url,
            description=self.description,
            workers=self.workers,
        )
        return context


@dataclass(frozen=True)
class Theme:
    """Layouts and static assets bundled with the site."""

    layouts: tuple[File, ...] = ()
    assets: tuple[File, ...] = ()

    def to_context(self) -> dict[str, Any]:
        return {
            "layouts": [layout.to_context() for layout in self.layouts],
            "assets": [asset.to_context() for asset in self.assets],
        }


@dataclass(frozen=True)
class Site:
    """Everything a build needs.

    Attributes:
        config: Site configuration.
        theme_files: Theme layouts and assets.
        pages: Non-post pages, in load order.
        posts: Dated posts, in load order.
    """

    config: Config
    theme_files: Theme = field(default_factory=Theme)
    pages: tuple[Page, ...] = ()
    posts: tuple[Page, ...] = ()
