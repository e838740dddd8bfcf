"""Deploy and cleanup operations against Firebase Hosting.

Each operation builds its firebase-tools arguments, runs them through
``run_with_credentials`` and decodes the JSON result. Results are returned
untouched; an ``ErrorResult`` is a normal value the caller must branch on.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hd.core.config import Config
from hd.core.result import Err, Result
from hd.output.console import ConsoleProtocol
from hd.services.hosting.errors import DeployError
from hd.services.hosting.model import (
    ChannelDeployResult,
    InvocationConfig,
    ProductionDeployResult,
    RemovalResult,
)
from hd.services.hosting.results import (
    decode_channel_deploy,
    decode_production_deploy,
    decode_removal,
)
from hd.services.hosting.runner import run_with_credentials

__all__ = [
    "HostingContext",
    "channel_deploy_args",
    "channel_delete_args",
    "production_deploy_args",
    "deploy_preview",
    "deploy_production_site",
    "remove_preview",
    "remove_production_preview",
]


@dataclass(frozen=True, slots=True)
class HostingContext:
    """What every operation needs besides its own parameters."""

    credentials_path: str | Path
    config: Config
    console: ConsoleProtocol
    cwd: Path | None = None


def channel_deploy_args(
    channel_id: str,
    *,
    target: str | None = None,
    expires: str | None = None,
) -> list[str]:
    args = ["hosting:channel:deploy", channel_id]
    if target:
        args += ["--only", target]
    if expires:
        args += ["--expires", expires]
    return args


def production_deploy_args(*, target: str | None = None) -> list[str]:
    only = f"hosting:{target}" if target else "hosting"
    return ["deploy", "--only", only]


def channel_delete_args(channel_id: str) -> list[str]:
    return ["hosting:channel:delete", channel_id]


def _require_channel_id(invocation: InvocationConfig) -> str | Err[DeployError]:
    if invocation.channel_id and invocation.channel_id.strip():
        return invocation.channel_id.strip()
    return Err(
        DeployError(
            kind="invalid_input",
            message="channel id is required for preview channel operations",
            hint="Pass --channel-id",
        )
    )


def _run(ctx: HostingContext, args: list[str], project_id: str | None) -> Result[str, DeployError]:
    return run_with_credentials(
        args,
        project_id=project_id,
        credentials_path=ctx.credentials_path,
        config=ctx.config,
        console=ctx.console,
        cwd=ctx.cwd,
    )


def deploy_preview(
    ctx: HostingContext, invocation: InvocationConfig
) -> Result[ChannelDeployResult, DeployError]:
    """Deploy to the preview channel ``invocation.channel_id``."""
    channel_id = _require_channel_id(invocation)
    if isinstance(channel_id, Err):
        return channel_id

    args = channel_deploy_args(channel_id, target=invocation.target, expires=invocation.expires)
    text = _run(ctx, args, invocation.project_id)
    if isinstance(text, Err):
        return text
    return decode_channel_deploy(text.value)


def deploy_production_site(
    ctx: HostingContext, invocation: InvocationConfig
) -> Result[ProductionDeployResult, DeployError]:
    """Deploy hosting (optionally one target) to the live channel."""
    text = _run(ctx, production_deploy_args(target=invocation.target), invocation.project_id)
    if isinstance(text, Err):
        return text
    return decode_production_deploy(text.value)


def remove_preview(
    ctx: HostingContext, invocation: InvocationConfig
) -> Result[RemovalResult, DeployError]:
    """Delete the preview channel ``invocation.channel_id``.

    A channel that never existed is reported as ``RemovalSkippedResult``.
    """
    channel_id = _require_channel_id(invocation)
    if isinstance(channel_id, Err):
        return channel_id

    text = _run(ctx, channel_delete_args(channel_id), invocation.project_id)
    if isinstance(text, Err):
        return text
    return decode_removal(text.value)


def remove_production_preview(
    ctx: HostingContext, invocation: InvocationConfig
) -> Result[ProductionDeployResult, DeployError]:
    """Redeploy the live channel, replacing whatever a preview promoted there."""
    text = _run(ctx, production_deploy_args(target=invocation.target), invocation.project_id)
    if isinstance(text, Err):
        return text
    return decode_production_deploy(text.value)
