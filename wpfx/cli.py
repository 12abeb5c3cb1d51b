from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

import typer

from . import CONFIG_PATH, __version__, configure_logging
from .errors import ErrorKind, WpfxError
from .launch import create_command, run_invocation
from .settings import create_prefix, init_config, read_or_init_config

app = typer.Typer(
    name="wpfx",
    help="Wine gaming done the Unix way.",
    add_completion=False,
    no_args_is_help=True,
)

@contextmanager
def _fatal_errors() -> Iterator[None]:
    """The one place a WpfxError turns into a message and an exit code."""
    try:
        yield
    except WpfxError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(e.exit_code)

def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"wpfx {__version__}")
        raise typer.Exit()

@app.callback()
def _root(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=_version_callback, is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    configure_logging()

@app.command()
def init() -> None:
    """Create a default wpfx.toml and an empty prefix if one doesn't exist."""
    with _fatal_errors():
        config = init_config(CONFIG_PATH)
    typer.echo("Successfully created a default wpfx.toml file.")
    typer.echo("Please edit the file as needed.")
    with _fatal_errors():
        prefix_created = create_prefix(config)
    if not prefix_created:
        typer.echo("Prefix already exists, skipping creation...")

@app.command()
def run(
    exe: Optional[str] = typer.Argument(
        None, help="Executable to run (defaults to `executable` in wpfx.toml)."
    ),
) -> None:
    """Run an executable inside the prefix."""
    with _fatal_errors():
        config = read_or_init_config(CONFIG_PATH)
        target = exe if exe is not None else config.executable
        if target is None:
            raise WpfxError(ErrorKind.NO_EXE_PROVIDED)
        invocation = create_command(config).with_args(target)
        code = run_invocation(invocation)
    raise typer.Exit(code)

@app.command()
def install() -> None:
    """Install the application by creating a .desktop entry."""
    typer.echo("Installing app...")
    # TODO: write a .desktop file that launches `wpfx run` from this directory
    typer.echo("Installing is not implemented yet; nothing was changed.")

def main() -> None:
    app(prog_name="wpfx")
