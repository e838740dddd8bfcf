from __future__ import annotations

import os
from pathlib import Path

import typer

from hd import __version__
from hd.cli.commands.deploy import deploy_preview_cmd, deploy_production_cmd
from hd.cli.commands.remove import remove_preview_cmd, remove_production_preview_cmd
from hd.cli.context import ENTRY_POINT_ENV
from hd.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command("deploy-preview")(deploy_preview_cmd)
app.command("deploy-production")(deploy_production_cmd)
app.command("remove-preview")(remove_preview_cmd)
app.command("remove-production-preview")(remove_production_preview_cmd)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    entry_point: Path | None = typer.Option(
        None,
        "--entry-point",
        help="Directory containing firebase.json (defaults to the current directory)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if entry_point is not None:
        try:
            root = entry_point.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --entry-point: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --entry-point '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[ENTRY_POINT_ENV] = str(root)


def main() -> None:
    app()
