"""Site construction for Gorgon.

This module reads a project directory into an immutable ``Site``:

    gorgon.yaml          site configuration (optional)
    pages/               Markdown or HTML pages
    posts/               Markdown or HTML posts
    theme/layouts/       layout templates, looked up by name
    theme/assets/        static files copied into the build

Content files may start with a YAML frontmatter block fenced by ``---``.
Markdown bodies are rendered to HTML with mistune; fenced code blocks are
highlighted with Pygments.

Key functions:
- load_site: Build a Site from a project directory.
- load_config: Load gorgon.yaml with defaults applied.
- load_theme: Collect layout and asset files.
- load_pages: Build Page records from a content directory.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import mistune
import yaml
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .errors import PathNotFound, RenderError
from .site import Config, File, Frontmatter, Page, Site, Theme, normalize_date
from .utils import extract_date_from_name, is_html, is_markdown, titleize

CONFIG_FILENAME = "gorgon.yaml"

FRONTMATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n", re.DOTALL)

DEFAULT_CONFIG = {
    "out_dir": "build",
    "generate_rss": False,
    "title": "",
    "url": "",
    "description": "",
    "workers": None,
}

DEFAULT_PAGE_LAYOUT = "page"
DEFAULT_POST_LAYOUT = "post"


def extract_frontmatter(text: str) -> tuple[dict[str, Any], str]:
    """Extract YAML frontmatter from content.

    Args:
        text: Raw file content.

    Returns:
        Tuple of (frontmatter dict, remaining content).
    """
    match = FRONTMATTER_RE.match(text)
    if not match:
        return {}, text
    try:
        data = yaml.safe_load(match.group(1)) or {}
        if not isinstance(data, dict):
            return {}, text
        return data, text[match.end() :]
    except yaml.YAMLError:
        return {}, text


class _HighlightRenderer(mistune.HTMLRenderer):
    """Markdown renderer that highlights fenced code with Pygments."""

    def __init__(self):
        super().__init__(escape=False)

    def block_code(self, code: str, info: str | None = None) -> str:
        """Render a code block with Pygments syntax highlighting.

        Args:
            code: The code content.
            info: Language identifier (e.g., 'python', 'javascript').

        Returns:
            HTML string with highlighted code.
        """
        if info:
            try:
                lexer = get_lexer_by_name(info.split()[0], stripall=True)
            except ClassNotFound:
                lexer = None
            if lexer is not None:
                return highlight(code, lexer, HtmlFormatter(cssclass="highlight"))
        escaped = code.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        lang_class = f' class="language-{info}"' if info else ""
        return f"<pre><code{lang_class}>{escaped}</code></pre>\n"


def render_markdown(text: str) -> str:
    """Render Markdown source to HTML."""
    markdown = mistune.create_markdown(
        renderer=_HighlightRenderer(),
        plugins=["strikethrough", "footnotes", "table", "url"],
    )
    return markdown(text)


def load_config(project_root: Path) -> Config:
    """Load site configuration from gorgon.yaml.

    Args:
        project_root: Root directory of the project.

    Returns:
        Config with defaults applied. ``out_dir`` is resolved against the
        project root when relative.

    Raises:
        RenderError: If gorgon.yaml is not valid YAML, ``generate_rss`` is
            not a boolean, or ``workers`` is not a positive integer.
    """
    config_path = project_root / CONFIG_FILENAME
    values = DEFAULT_CONFIG.copy()
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise RenderError(f"Invalid {CONFIG_FILENAME}: {exc}") from exc
        if isinstance(loaded, dict):
            values.update(loaded)

    out_dir = Path(str(values.pop("out_dir") or DEFAULT_CONFIG["out_dir"]))
    if not out_dir.is_absolute():
        out_dir = project_root / out_dir

    generate_rss = values.pop("generate_rss")
    if generate_rss is None:
        generate_rss = DEFAULT_CONFIG["generate_rss"]
    if not isinstance(generate_rss, bool):
        raise RenderError(
            f"Invalid {CONFIG_FILENAME}: generate_rss must be true or false"
        )

    # bool is an int subclass, so `workers: true` is rejected explicitly
    workers = values.pop("workers")
    if workers is not None and (
        isinstance(workers, bool) or not isinstance(workers, int) or workers < 1
    ):
        raise RenderError(
            f"Invalid {CONFIG_FILENAME}: workers must be a positive integer"
        )

    return Config(
        out_dir=out_dir,
        generate_rss=generate_rss,
        title=str(values.pop("title") or ""),
        url=str(values.pop("url") or ""),
        description=str(values.pop("description") or ""),
        workers=workers,
        extra=values,
    )


def _list_files(directory: Path) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file())


def load_theme(theme_dir: Path) -> Theme:
    """Collect the theme's layouts and assets.

    Args:
        theme_dir: Directory holding ``layouts/`` and ``assets/``.

    Returns:
        Theme with files sorted by name.
    """
    return Theme(
        layouts=tuple(File.from_path(p) for p in _list_files(theme_dir / "layouts")),
        assets=tuple(File.from_path(p) for p in _list_files(theme_dir / "assets")),
    )


def build_page(path: Path, is_post: bool = False) -> Page:
    """Build a Page from a source file.

    Args:
        path: Path to a Markdown or HTML file.
        is_post: Whether the file is a post.

    Returns:
        Page with frontmatter defaults applied and its body rendered to HTML.
    """
    raw = path.read_text(encoding="utf-8")
    data, body = extract_frontmatter(raw)
    layout = data.pop("layout", None) or (
        DEFAULT_POST_LAYOUT if is_post else DEFAULT_PAGE_LAYOUT
    )
    title = data.pop("title", None) or titleize(path.name)
    date = normalize_date(data.pop("date", None)) or extract_date_from_name(
        path.name.split(".")[0]
    )
    content = render_markdown(body) if is_markdown(path) else body
    return Page(
        file=File.from_path(path),
        frontmatter=Frontmatter(
            layout=str(layout), title=str(title), date=date, extra=data
        ),
        content=content,
        is_post=is_post,
    )


def load_pages(directory: Path, is_post: bool = False) -> tuple[Page, ...]:
    """Build Page records for every content file in a directory.

    Files whose name starts with ``_`` are drafts and are skipped.
    """
    return tuple(
        build_page(path, is_post=is_post)
        for path in _list_files(directory)
        if (is_markdown(path) or is_html(path)) and not path.name.startswith("_")
    )


def load_site(project_path: Path | str) -> Site:
    """Construct the Site for a project directory.

    Args:
        project_path: Root directory of the project.

    Returns:
        Fully populated Site.

    Raises:
        PathNotFound: If the project directory does not exist.
        RenderError: If the configuration cannot be parsed.
        OSError: If a content file cannot be read.
    """
    project_root = Path(project_path)
    if not project_root.is_dir():
        raise PathNotFound(project_root)
    return Site(
        config=load_config(project_root),
        theme_files=load_theme(project_root / "theme"),
        pages=load_pages(project_root / "pages"),
        posts=load_pages(project_root / "posts", is_post=True),
    )
