"""Command-line interface for mdblog.

This module defines the CLI commands using the Click framework.

Commands:
- build: Generate a static blog from the Markdown files of a repository.

Options left out on the command line are read from ``mdblog.yaml`` in the
current directory, then from built-in defaults.
"""

from __future__ import annotations

from pathlib import Path

import click

from . import __version__
from .errors import MdBlogError
from .logging import configure_logging
from .utils import is_blank


@click.group()
@click.version_option(version=__version__, prog_name="mdblog")
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
def cli(verbose: bool):
    """Generate a static blog from Markdown files in a git repository."""
    configure_logging(verbose=verbose)


@cli.command()
@click.option("--repo", "-r", required=True, help="URL of the git repository")
@click.option("--branch", "-b", default=None, help="Branch of your git repository")
@click.option("--token", "-t", default=None, help="Token for private repository")
@click.option("--title", default=None, help="Site title (defaults to the repository name)")
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory to write the site into",
)
@click.option(
    "--theme",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory with index.html/post.html templates and an assets/ folder",
)
def build(
    repo: str,
    branch: str | None,
    token: str | None,
    title: str | None,
    output: Path | None,
    theme: Path | None,
):
    """Build the site into the output directory."""
    if is_blank(repo):
        raise click.UsageError("missing required parameter(s): --repo")

    project_root = Path.cwd()
    from .build import build_site, load_config

    config = load_config(project_root)
    branch = (branch if branch is not None else str(config["branch"])).strip()
    output_dir = output or project_root / str(config["output_dir"])
    if theme is None and config.get("theme_dir"):
        theme = project_root / str(config["theme_dir"])

    try:
        result = build_site(
            repo,
            output_dir,
            branch=branch,
            token=token,
            title=title or config.get("title") or None,
            theme_dir=theme,
            filter_markdown=bool(config.get("filter_markdown", True)),
        )
    except MdBlogError as exc:
        click.echo(click.style("Build failed:", fg="red", bold=True), err=True)
        click.echo(click.style(f"  Error: {exc.message}", fg="white"), err=True)
        raise SystemExit(1) from None
    click.echo(f"Built {len(result.posts)} pages into {result.output_dir}")


def main():
    """Entry point for the CLI application."""
    cli()
