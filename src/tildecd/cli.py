"""Command-line entry points for tildecd."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from tildecd.config import ConfigError, TildeCdConfig, load_config
from tildecd.services.home import home_from_config
from tildecd.services.resolver import resolve_path
from tildecd.services.workdir import change_directory, current_directory
from tildecd.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Change directory with shell-style ~ expansion")

logger = logging.getLogger(__name__)

PATH_ARGUMENT_HELP = "Target directory: absolute, relative, '~' or '~/...'. Omit to go home."


@app.callback()
def _configure(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", help="Config file (YAML, TOML or JSON)"),
) -> None:
    """Load configuration and logging shared by every command."""

    try:
        cfg = load_config(config)
    except (ConfigError, ValidationError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    configure_logging(level=cfg.logging.level, log_path=cfg.logging.log_path)
    ctx.obj = cfg


def _config(ctx: typer.Context) -> TildeCdConfig:
    return ctx.ensure_object(TildeCdConfig)


def _try_cd(path: Optional[str], home: str) -> bool:
    try:
        change_directory(path, home=home)
    except OSError as exc:
        logger.info("cd %r failed: %s", path, exc)
        typer.echo(f"Error: {exc}", err=True)
        return False
    return True


@app.command()
def resolve(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help=PATH_ARGUMENT_HELP),
) -> None:
    """Print the path `cd` would change to, without touching the filesystem."""

    home = home_from_config(_config(ctx))
    typer.echo(resolve_path(home, path))


@app.command()
def cd(
    ctx: typer.Context,
    path: Optional[str] = typer.Argument(None, help=PATH_ARGUMENT_HELP),
) -> None:
    """Change the working directory and print the new one."""

    home = home_from_config(_config(ctx))
    if not _try_cd(path, home):
        raise typer.Exit(code=1)
    typer.echo(current_directory())


@app.command()
def demo(ctx: typer.Context) -> None:
    """Walk through `cd ..` then `cd ~`, printing the directory after each step."""

    home = home_from_config(_config(ctx))
    typer.echo(f"Start: {current_directory()}")

    _try_cd("..", home)
    typer.echo(f"After '..': {current_directory()}")

    _try_cd("~", home)
    typer.echo(f"After '~': {current_directory()}")


def main() -> None:
    app()


__all__ = ["main", "app"]
