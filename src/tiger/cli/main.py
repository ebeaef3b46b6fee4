"""Tiger CLI application."""

from __future__ import annotations

from typing import Annotated

import typer
from rich import print as rprint

import tiger as tiger_pkg

app = typer.Typer(
    name="tiger",
    help="Interactive git shell with live branch context.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        rprint(f"tiger {tiger_pkg.__version__}")
        raise typer.Exit()


@app.command()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    git: Annotated[
        str | None,
        typer.Option("--git", help="git executable to run (default: git)"),
    ] = None,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Diagnostic log level on stderr"),
    ] = None,
) -> None:
    """Start an interactive git session."""
    from dotenv import load_dotenv

    from tiger.config import ShellConfig
    from tiger.logging_utils import configure_logging
    from tiger.shell.session import SessionLoop

    load_dotenv()
    config = ShellConfig.from_env(git=git, log_level=log_level)
    configure_logging(config.log_level)

    exit_code = SessionLoop(config).run()
    raise typer.Exit(exit_code)
