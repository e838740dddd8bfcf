"""Firebase Hosting deploy and cleanup operations."""

from hd.services.hosting.errors import DeployError
from hd.services.hosting.model import (
    ChannelDeploySummary,
    ChannelSuccessResult,
    ErrorResult,
    InvocationConfig,
    ProductionSuccessResult,
    RemovalSkippedResult,
    RemovalSuccessResult,
    SiteDeploy,
)
from hd.services.hosting.operations import (
    HostingContext,
    deploy_preview,
    deploy_production_site,
    remove_preview,
    remove_production_preview,
)
from hd.services.hosting.results import interpret_channel_deploy_result

__all__ = [
    "ChannelDeploySummary",
    "ChannelSuccessResult",
    "DeployError",
    "ErrorResult",
    "HostingContext",
    "InvocationConfig",
    "ProductionSuccessResult",
    "RemovalSkippedResult",
    "RemovalSuccessResult",
    "SiteDeploy",
    "deploy_preview",
    "deploy_production_site",
    "interpret_channel_deploy_result",
    "remove_preview",
    "remove_production_preview",
]
