"""Console styling for build output.

ColorFormatter styles text with Click; PlainFormatter leaves it untouched and
is used for ``--no-color`` and in tests.
"""

from __future__ import annotations

import click


class ColorFormatter:
    """Formatter that colors text with ANSI styles."""

    def highlight(self, text: str) -> str:
        return click.style(str(text), fg="cyan", bold=True)

    def success(self, text: str) -> str:
        return click.style(str(text), fg="green", bold=True)

    def error(self, text: str) -> str:
        return click.style(str(text), fg="red", bold=True)


class PlainFormatter:
    """Formatter that returns text unchanged."""

    def highlight(self, text: str) -> str:
        return str(text)

    def success(self, text: str) -> str:
        return str(text)

    def error(self, text: str) -> str:
        return str(text)
