"""Gorgon static site builder.

This package takes a site project (pages, posts, a theme and a configuration file),
renders every page through its layout template, writes the results, copies theme assets
and optionally emits an RSS feed.

The build runs as a fixed sequence of phases. Rendering, writing and asset copying each
fan out over a thread pool and fan back in, folding the per-item outcomes into a single
result so that sibling failures are reported together.

The main entry point is the CLI module, which provides commands for scaffolding new
projects and building sites.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
