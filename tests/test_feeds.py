from datetime import datetime
from pathlib import Path

from gorgon.feeds import RSSRenderer, render_feed
from gorgon.site import Config, Site


def make_site(page_factory, url="https://example.com/"):
    return Site(
        config=Config(out_dir=Path("out"), title="Tom & Jerry", url=url, description="Cartoons"),
        posts=(
            page_factory("old", date=datetime(2020, 1, 1), is_post=True),
            page_factory("new", date=datetime(2024, 2, 29, 8, 30), is_post=True, description="<b>Hot</b>"),
        ),
    )


def test_rss_document(page_factory):
    feed = render_feed(make_site(page_factory))

    assert feed.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert "<title>Tom &amp; Jerry</title>" in feed
    assert "<link>https://example.com</link>" in feed
    assert "<link>https://example.com/new.html</link>" in feed
    assert "<description>&lt;b&gt;Hot&lt;/b&gt;</description>" in feed
    assert "<pubDate>Thu, 29 Feb 2024 08:30:00 +0000</pubDate>" in feed
    assert feed.index("new.html") < feed.index("old.html")
    assert feed.endswith("</channel></rss>")


def test_relative_links_without_url(page_factory):
    feed = RSSRenderer().render(make_site(page_factory, url=""))
    assert "<link>/old.html</link>" in feed


def test_renderer_filename():
    assert RSSRenderer().filename == "rss.xml"
