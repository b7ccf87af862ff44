"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdimport.config import Settings, load_config
from mdimport.core.pipeline import import_file


LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def import_cmd(
    images_root: Annotated[Path, typer.Argument(metavar="IMAGES_ROOT", help="Root directory that absolute image paths are resolved against")],
    md_file: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, metavar="MD_FILE", help="Markdown file to convert")],
    posts: Annotated[Optional[str], typer.Option("--posts-dir", help="Output directory for converted posts")] = None,
    assets: Annotated[Optional[str], typer.Option("--assets-dir", help="Assets folder name under the posts directory")] = None,
    lang: Annotated[Optional[str], typer.Option("--diagram-lang", help="Fence language rendered as a diagram")] = None,
    renderer: Annotated[Optional[str], typer.Option("--renderer", help="Diagram renderer executable")] = None,
    timeout: Annotated[Optional[float], typer.Option("--render-timeout", help="Seconds allowed per diagram render")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level (DEBUG, INFO, ...)")] = None,
    ):
    """Convert a markdown file for publishing: front matter, assets and diagrams."""
    settings = _settings(overrides={
        "posts_dir": posts, "assets_dirname": assets, "diagram_lang": lang,
        "renderer": renderer, "render_timeout": timeout, "log_level": log_level,
    })
    _setup_logging(settings.log_level)

    try:
        result = import_file(images_root, md_file, settings)
    except ValueError as e:
        _fail(f"Cannot parse {md_file}", e)
    except OSError as e:
        _fail(f"Cannot convert {md_file}", e)

    for failure in result.failures:
        typer.echo(f"Warning: {failure}", err=True)
    typer.echo(f"  {md_file} -> {result.output_path}")
    typer.echo(
        f"Import complete - "
        f"{len(result.copied)} asset(s) copied, "
        f"{len(result.diagrams)} diagram(s) rendered, "
        f"{len(result.failures)} warning(s)"
    )
