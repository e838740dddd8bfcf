"""Deploy commands - preview channel and live channel."""

from __future__ import annotations

from pathlib import Path

import typer

from hd.cli.commands._helpers import (
    echo_json,
    exit_on_error_result,
    hosting_context,
    unwrap_or_exit,
)
from hd.cli.context import build_context
from hd.output.console import Style
from hd.services.hosting import (
    ChannelSuccessResult,
    InvocationConfig,
    ProductionSuccessResult,
    deploy_preview,
    deploy_production_site,
    interpret_channel_deploy_result,
)


def hosting_sites(result: ProductionSuccessResult) -> list[str]:
    if isinstance(result.hosting, str):
        return [result.hosting]
    return list(result.hosting)


def deploy_preview_cmd(
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
    target: str | None = typer.Option(
        None, "--target", envvar="HOSTING_DEPLOY_TARGET", help="Hosting target to deploy"
    ),
    expires: str | None = typer.Option(
        None,
        "--expires",
        envvar="HOSTING_DEPLOY_EXPIRES",
        help="Channel lifetime, e.g. 7d or 12h",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON on stdout"),
) -> None:
    """Deploy to a preview channel."""
    ctx = build_context()
    invocation = InvocationConfig(
        project_id=project_id,
        target=target,
        channel_id=channel_id,
        expires=expires,
    )

    ctx.console.header(f"Deploying to preview channel {channel_id}")
    result = unwrap_or_exit(deploy_preview(hosting_context(ctx, credentials), invocation), ctx)
    exit_on_error_result(result, ctx)
    assert isinstance(result, ChannelSuccessResult)

    summary = interpret_channel_deploy_result(result)
    if as_json:
        echo_json(
            {
                "details_url": summary.urls[0],
                "expire_time": summary.expire_time,
                "urls": list(summary.urls),
            }
        )
        return

    ctx.console.success(f"Deployed to preview channel {channel_id}")
    for url in summary.urls:
        ctx.console.print(f"  {url}")
    ctx.console.print(f"expires: {summary.expire_time}", Style.DIM)


def deploy_production_cmd(
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
        None, "--target", envvar="HOSTING_DEPLOY_TARGET", help="Hosting target to deploy"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON on stdout"),
) -> None:
    """Deploy to the live channel."""
    ctx = build_context()
    invocation = InvocationConfig(project_id=project_id, target=target)

    ctx.console.header("Deploying to the live channel")
    result = unwrap_or_exit(
        deploy_production_site(hosting_context(ctx, credentials), invocation), ctx
    )
    exit_on_error_result(result, ctx)
    assert isinstance(result, ProductionSuccessResult)

    sites = hosting_sites(result)
    if as_json:
        echo_json({"hosting": sites})
        return

    ctx.console.success("Deployed to the live channel")
    for site in sites:
        ctx.console.print(f"  {site}")
