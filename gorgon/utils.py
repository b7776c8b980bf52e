"""Utility functions for Gorgon.

String and filename helpers shared by site loading and scaffolding.

Key functions:
    titleize: Convert filenames to human-readable titles.
    extract_date_from_name: Extract date from filename prefix.
    is_markdown: Check if a path is a Markdown file.
    is_html: Check if a path is a plain HTML file.
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path


def _strip_date_prefix(base: str) -> str:
    parts = base.split("-")
    if len(parts) >= 4 and all(p.isdigit() for p in parts[:3]):
        return "-".join(parts[3:])
    return base


def titleize(filename: str) -> str:
    """Convert a filename to a human-readable title.

    Removes date prefixes (YYYY-MM-DD), replaces hyphens and underscores
    with spaces, and capitalizes each word.

    Args:
        filename: Filename with or without extension.

    Returns:
        Human-readable title string.

    Examples:
        >>> titleize("2024-01-15-hello-world.md")
        'Hello World'

        >>> titleize("getting-started.md")
        'Getting Started'
    """
    base = _strip_date_prefix(Path(filename).name.split(".")[0])
    words = re.split(r"[\s\-_]+", base)
    return " ".join(word.capitalize() for word in words if word) or "Untitled"


def extract_date_from_name(name: str) -> datetime | None:
    """Extract a date from a filename with YYYY-MM-DD prefix.

    Args:
        name: Filename stem (without extension).

    Returns:
        datetime object if a valid date prefix is found, None otherwise.

    Examples:
        >>> extract_date_from_name("2024-01-15-hello-world")
        datetime.datetime(2024, 1, 15, 0, 0)

        >>> extract_date_from_name("hello-world") is None
        True
    """
    parts = name.split("-")
    if len(parts) >= 3 and all(p.isdigit() for p in parts[:3]):
        try:
            return datetime(int(parts[0]), int(parts[1]), int(parts[2]))
        except ValueError:
            return None
    return None


def is_markdown(path: Path) -> bool:
    """Check if a path is a Markdown file.

    Args:
        path: Path to check.

    Returns:
        True if the file has .md extension (case-insensitive).
    """
    return path.suffix.lower() == ".md"


def is_html(path: Path) -> bool:
    """Check if a path is a plain HTML file."""
    return path.suffix.lower() == ".html"
