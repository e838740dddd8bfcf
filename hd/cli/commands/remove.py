"""Cleanup commands - delete a preview channel, restore the live channel."""

from __future__ import annotations

from pathlib import Path

import typer

from hd.cli.commands._helpers import exit_on_error_result, hosting_context, unwrap_or_exit
from hd.cli.commands.deploy import hosting_sites
from hd.cli.context import build_context
from hd.services.hosting import (
    InvocationConfig,
    ProductionSuccessResult,
    RemovalSkippedResult,
    remove_preview,
    remove_production_preview,
)


def remove_preview_cmd(
    credentials: Path = typer.Option(
        ...,
        "--credentials",
        envvar="GOOGLE_APPLICATION_CREDENTIALS",
        help="Service account key file used by firebase-tools",
    ),
    channel_id: str = typer.Option(
        ..., "--channel-id", envvar="HOSTING_DEPLOY_CHANNEL_ID", help="Preview channel id"
    ),
    project_id: str | None = typer.Option(
        None, "--project-id", envvar="HOSTING_DEPLOY_PROJECT_ID", help="Firebase project"
    ),
) -> None:
    """Delete a preview channel."""
    ctx = build_context()
    invocation = InvocationConfig(project_id=project_id, channel_id=channel_id)

    result = unwrap_or_exit(remove_preview(hosting_context(ctx, credentials), invocation), ctx)
    exit_on_error_result(result, ctx)

    if isinstance(result, RemovalSkippedResult):
        ctx.console.info(f"Preview channel {channel_id} does not exist, nothing to remove")
        return
    ctx.console.success(f"Removed preview channel {channel_id}")


def remove_production_preview_cmd(
    credentials: Path = typer.Option(
        ...,
        "--credentials",
        envvar="GOOGLE_APPLICATION_CREDENTIALS",
        help="Service account key file used by firebase-tools",
    ),
    project_id: str | None = typer.Option(
        None, "--project-id", envvar="HOSTING_DEPLOY_PROJECT_ID", help="Firebase project"
    ),
    target: str | None = typer.Option(
        None, "--target", envvar="HOSTING_DEPLOY_TARGET", help="Hosting target to redeploy"
    ),
) -> None:
    """Redeploy the live channel over a promoted preview."""
    ctx = build_context()
    invocation = InvocationConfig(project_id=project_id, target=target)

    result = unwrap_or_exit(
        remove_production_preview(hosting_context(ctx, credentials), invocation), ctx
    )
    exit_on_error_result(result, ctx)
    assert isinstance(result, ProductionSuccessResult)

    ctx.console.success("Live channel redeployed")
    for site in hosting_sites(result):
        ctx.console.print(f"  {site}")
