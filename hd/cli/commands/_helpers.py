"""Shared helpers for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

import typer

from hd.core.errors import ErrorCode
from hd.core.result import Err, Result
from hd.output.errors import deploy_error_exit_code, print_deploy_error
from hd.services.hosting import ErrorResult, HostingContext
from hd.services.hosting.errors import DeployError

if TYPE_CHECKING:
    from hd.cli.context import CLIContext


def hosting_context(ctx: CLIContext, credentials: Path) -> HostingContext:
    return HostingContext(
        credentials_path=credentials,
        config=ctx.config,
        console=ctx.console,
        cwd=ctx.entry_point,
    )


def unwrap_or_exit[T](result: Result[T, DeployError], ctx: CLIContext) -> T:
    """Return the Ok value, or print the error and exit with its code.

    This helper reduces boilerplate for the common pattern:
        match result:
            case Err(e):
                print_deploy_error(e, ctx.console)
                raise typer.Exit(code=deploy_error_exit_code(e))
            case Ok(value):
                ...
    """
    if isinstance(result, Err):
        print_deploy_error(result.error, ctx.console)
        raise typer.Exit(code=deploy_error_exit_code(result.error))
    return result.value


def exit_on_error_result(result: object, ctx: CLIContext) -> None:
    """Exit with DEPLOY_ERROR if firebase-tools reported ``status: error``."""
    if isinstance(result, ErrorResult):
        ctx.console.error(result.error)
        exit_with_code(int(ErrorCode.DEPLOY_ERROR))


def echo_json(payload: dict[str, object]) -> None:
    """Print a machine-readable summary on stdout."""
    typer.echo(json.dumps(payload, indent=2))


def exit_with_code(code: int) -> NoReturn:
    """Exit with given code. Explicit helper for clarity."""
    raise typer.Exit(code=code)
