"""Site building functionality for Gorgon.

This module contains the build pipeline. A build runs these phases in order,
stopping at the first phase that fails:

1. Prepare: create ``<out_dir>/assets``.
2. Render: render every page and post through its layout, in parallel.
3. Write: write every rendered page, in parallel.
4. Copy assets: copy every theme asset into ``<out_dir>/assets``, in parallel.
5. Feed: write ``<out_dir>/rss.xml`` when enabled and the site has posts.

Each parallel phase waits for all of its tasks and folds their outcomes with
``collect_outcomes``, so a failing phase reports every failing item at once.
Files written before a later phase fails are left in place.

Key functions:
- build_site: Load a project and build it.
- Builder: Runs the phases for an already constructed Site.
"""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import click

from .content import load_site
from .errors import GorgonError
from .feeds import RSSRenderer
from .formatting import ColorFormatter
from .outcome import Outcome, Success, collect_outcomes, failure_from_exception
from .parallel import parallel_map
from .protocols import FeedRenderer, Formatter, TemplateRenderer
from .render import render_page
from .site import File, Page, Site
from .templates import TemplateEngine


@dataclass
class BuildResult:
    """Result of a site build operation.

    Attributes:
        output_dir: Directory where the site was built.
        pages: Paths of the rendered pages.
        assets: Paths of the copied assets.
        feed: Path of the feed, or None when no feed was written.
    """

    output_dir: Path
    pages: list[Path] = field(default_factory=list)
    assets: list[Path] = field(default_factory=list)
    feed: Path | None = None


class Builder:
    """Runs the build phases for a Site.

    Attributes:
        site: Site being built.
        engine: Template engine used for layouts.
        feed_renderer: Renderer for the syndication feed.
        formatter: Console formatter for progress lines.
        max_workers: Cap on concurrent tasks per phase, or None for the
            thread pool default.
    """

    def __init__(
        self,
        site: Site,
        engine: TemplateRenderer | None = None,
        feed_renderer: FeedRenderer | None = None,
        formatter: Formatter | None = None,
        max_workers: int | None = None,
    ):
        self.site = site
        self.engine = engine or TemplateEngine()
        self.feed_renderer = feed_renderer or RSSRenderer()
        self.formatter = formatter or ColorFormatter()
        self.max_workers = max_workers or site.config.workers

    @property
    def output_dir(self) -> Path:
        return self.site.config.out_dir

    @property
    def assets_dir(self) -> Path:
        return self.output_dir / "assets"

    def prepare_directories(self) -> Outcome:
        """Create the output assets directory and any missing parents."""
        try:
            self.assets_dir.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            return Success()
        except OSError as exc:
            return failure_from_exception(exc)
        return Success()

    def render_pages(self) -> Outcome:
        """Render pages, then posts.

        Returns:
            Success holding the rendered Files in page-then-post order, or the
            aggregate failure.
        """
        pages: list[Page] = [*self.site.pages, *self.site.posts]
        outcomes = parallel_map(
            pages,
            lambda page: render_page(self.site, page, self.engine, self.formatter),
            self.max_workers,
        )
        return collect_outcomes(outcomes)

    def _write_file(self, file: File) -> Path:
        click.echo(f"Writing {self.formatter.highlight(str(file.path))}...")
        file.path.write_text(file.content or "", encoding="utf-8")
        return file.path

    def write_files(self, files: Iterable[File]) -> Outcome:
        """Write rendered files to disk.

        Returns:
            Success holding the written paths, or the aggregate failure.
        """
        return collect_outcomes(parallel_map(files, self._write_file, self.max_workers))

    def _copy_asset(self, asset: File) -> Path:
        click.echo(f"Writing {self.formatter.highlight(str(asset.path))}...")
        destination = self.assets_dir / asset.basename
        shutil.copyfile(asset.path, destination)
        return destination

    def copy_assets(self) -> Outcome:
        """Copy theme assets into the output assets directory.

        Returns:
            Success holding the destination paths, or the aggregate failure.
        """
        return collect_outcomes(
            parallel_map(self.site.theme_files.assets, self._copy_asset, self.max_workers)
        )

    def write_feed(self) -> Outcome:
        """Write the feed if it is enabled and there are posts.

        Returns:
            Success holding the feed path, Success() when skipped, or a Failure.
        """
        if not self.site.config.generate_rss or not self.site.posts:
            return Success()
        path = self.output_dir / self.feed_renderer.filename
        try:
            path.write_text(self.feed_renderer.render(self.site), encoding="utf-8")
        except (GorgonError, OSError) as exc:
            return failure_from_exception(exc)
        return Success(path)

    def run(self) -> Outcome:
        """Run every phase in order.

        Returns:
            Success holding a BuildResult, or the outcome of the first phase
            that failed.
        """
        prepared = self.prepare_directories()
        if not prepared.ok:
            return prepared
        rendered = self.render_pages()
        if not rendered.ok:
            return rendered
        written = self.write_files(rendered.value)
        if not written.ok:
            return written
        copied = self.copy_assets()
        if not copied.ok:
            return copied
        feed = self.write_feed()
        if not feed.ok:
            return feed
        return Success(
            BuildResult(
                output_dir=self.output_dir,
                pages=written.value,
                assets=copied.value,
                feed=feed.value,
            )
        )


def build_site(
    project_path: Path | str = ".",
    formatter: Formatter | None = None,
    max_workers: int | None = None,
) -> Outcome:
    """Build the site in a project directory.

    Args:
        project_path: Root directory of the project.
        formatter: Console formatter for progress lines.
        max_workers: Optional cap on concurrent tasks, overriding the
            ``workers`` setting.

    Returns:
        Success holding a BuildResult, or a Failure. A missing project
        directory yields a Failure whose error is PathNotFound.
    """
    try:
        site = load_site(project_path)
    except (GorgonError, OSError, ValueError) as exc:
        return failure_from_exception(exc)
    return Builder(site, formatter=formatter, max_workers=max_workers).run()
