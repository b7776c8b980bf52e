"""Command-line interface for Gorgon.

This module defines the CLI commands using Click framework.

Commands:
- new: Scaffold a new Gorgon project.
- build: Build a project into its output directory.
"""

from __future__ import annotations

import shutil
from pathlib import Path

import click

from . import __version__
from .errors import PathNotFound
from .formatting import ColorFormatter, PlainFormatter
from .outcome import Failure

# Files copied into a new project
_SCAFFOLD_DIR = Path(__file__).parent / "scaffold"

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__, prog_name="gorgon")
def cli():
    """Gorgon static site builder."""


@cli.command()
@click.argument("name")
def new(name: str):
    """Scaffold a new Gorgon project."""
    target = Path(name).resolve()
    if target.exists() and any(target.iterdir()):
        raise click.ClickException(
            f"Refusing to initialize into non-empty directory: {target}"
        )
    _scaffold(target)
    click.echo(f"New Gorgon site created at {target}")


@cli.command()
@click.argument("path", required=False)
@click.option(
    "-p",
    "--project",
    type=click.Path(file_okay=False),
    help="Project directory, used when PATH is not given",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    required=False,
    help="Maximum concurrent tasks per phase (overrides gorgon.yaml)",
)
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def build(
    ctx: click.Context,
    path: str | None,
    project: str | None,
    workers: int | None,
    no_color: bool,
):
    """Build the site in PATH (default: current directory).

    usage: gorgon build <project>
    """
    if path == "help":
        click.echo(ctx.get_help())
        return
    from .build import build_site

    formatter = PlainFormatter() if no_color else ColorFormatter()
    project_root = Path(path or project or ".")
    outcome = build_site(project_root, formatter=formatter, max_workers=workers)
    if isinstance(outcome, Failure):
        click.echo(
            "Encountered issues building site, "
            f"{formatter.error(describe_failure(outcome))}"
        )
        raise SystemExit(1)
    click.echo(formatter.success("Successfully built site!"))


def describe_failure(failure: Failure) -> str:
    """Return the user-facing reason for a failed build."""
    if isinstance(failure.error, PathNotFound):
        return "Directory does not exist"
    return failure.message


def main():
    """Entry point for the CLI application."""
    cli()


def _scaffold(root: Path) -> None:
    """Create the directory structure and files for a new Gorgon project.

    Args:
        root: Root directory for the new project.
    """
    for src_path in _SCAFFOLD_DIR.rglob("*"):
        if src_path.is_dir():
            continue
        rel_path = src_path.relative_to(_SCAFFOLD_DIR)
        dest_path = root / rel_path
        dest_path.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, dest_path)
