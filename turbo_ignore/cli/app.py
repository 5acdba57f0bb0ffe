from __future__ import annotations

from pathlib import Path

import typer

from turbo_ignore import __version__
from turbo_ignore.core.errors import ErrorCode
from turbo_ignore.core.workspace import ResolutionRequest, resolve_workspace
from turbo_ignore.output.console import ConsoleProtocol, RichConsole


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def build_console() -> ConsoleProtocol:
    return RichConsole()


@app.command()
def workspace(
    name: str | None = typer.Argument(
        None,
        envvar="TURBO_IGNORE_WORKSPACE",
        help="Workspace name (skips package.json inference)",
    ),
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-d",
        envvar="TURBO_IGNORE_DIRECTORY",
        help="Directory containing package.json (default: current dir)",
    ),
) -> None:
    """Print the workspace turbo-ignore will operate on."""
    console = build_console()
    resolved = resolve_workspace(
        ResolutionRequest(workspace=name, directory=directory),
        console=console,
    )
    if resolved is None:
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    typer.echo(resolved)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=int(ErrorCode.OK))


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    pass


def main() -> None:
    app()
