from datetime import datetime
from pathlib import Path

import pytest

from gorgon.site import Config, File, Frontmatter, Page, Site, Theme


def make_page(name, date=None, layout="page", is_post=False, content="", **extra):
    """Build a Page without touching the filesystem."""
    return Page(
        file=File.from_path(Path("content") / f"{name}.md"),
        frontmatter=Frontmatter(layout=layout, title=name, date=date, extra=extra),
        content=content,
        is_post=is_post,
    )


def write_project(
    root: Path,
    generate_rss: bool = True,
    posts: bool = True,
    page_layout: str = "page",
) -> Path:
    """Write a small Gorgon project under ``root``."""
    (root / "pages").mkdir(parents=True)
    (root / "posts").mkdir()
    (root / "theme" / "layouts").mkdir(parents=True)
    (root / "theme" / "assets").mkdir()

    (root / "gorgon.yaml").write_text(
        "title: Test Site\n"
        "url: https://example.com\n"
        f"generate_rss: {'true' if generate_rss else 'false'}\n"
        "author: Jo\n",
        encoding="utf-8",
    )
    (root / "theme" / "layouts" / "page.html").write_text(
        "<title>{{ page.frontmatter.title }} | {{ config.title }}</title>"
        "{{ page.content }}"
        "{% for post in posts %}<li>{{ post.title }}</li>{% endfor %}",
        encoding="utf-8",
    )
    (root / "theme" / "layouts" / "post.html.jinja").write_text(
        "<article>{{ page.frontmatter.title }} by {{ config.author }}"
        "{{ page.content }}</article>",
        encoding="utf-8",
    )
    (root / "theme" / "assets" / "style.css").write_text(
        "body { color: black; }", encoding="utf-8"
    )
    (root / "theme" / "assets" / "app.js").write_text(
        "console.log('hi');", encoding="utf-8"
    )
    (root / "pages" / "index.md").write_text(
        f"---\ntitle: Home\nlayout: {page_layout}\n---\n# Welcome\n\nHello there.\n",
        encoding="utf-8",
    )
    (root / "pages" / "about.html").write_text(
        "<p>About us</p>", encoding="utf-8"
    )
    if posts:
        (root / "posts" / "2024-01-15-first.md").write_text(
            "---\ntitle: First Post\n---\nFirst body.\n", encoding="utf-8"
        )
        (root / "posts" / "2024-03-01-second.md").write_text(
            "---\ntitle: Second Post\ndescription: The sequel\n---\nSecond body.\n",
            encoding="utf-8",
        )
    return root


@pytest.fixture
def page_factory():
    return make_page


@pytest.fixture
def project_factory():
    return write_project


@pytest.fixture
def project(tmp_path):
    return write_project(tmp_path / "site")


@pytest.fixture
def simple_site(tmp_path):
    layouts = tmp_path / "layouts"
    layouts.mkdir()
    page_layout = layouts / "page.html"
    page_layout.write_text("{{ page.frontmatter.title }}", encoding="utf-8")
    return Site(
        config=Config(out_dir=tmp_path / "out"),
        theme_files=Theme(layouts=(File.from_path(page_layout),)),
        pages=(make_page("about"),),
        posts=(make_page("hello", date=datetime(2024, 1, 1), layout="page", is_post=True),),
    )
