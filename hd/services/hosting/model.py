from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True)
class InvocationConfig:
    """Caller-supplied parameters for one hosting operation.

    ``channel_id`` is required by the channel operations only; ``expires`` is
    a duration string such as ``7d`` understood by firebase-tools.
    """

    project_id: str | None = None
    target: str | None = None
    channel_id: str | None = None
    expires: str | None = None


@dataclass(frozen=True, slots=True)
class SiteDeploy:
    site: str
    url: str
    expire_time: str
    target: str | None = None


@dataclass(frozen=True, slots=True)
class ChannelSuccessResult:
    result: Mapping[str, SiteDeploy]
    status: Literal["success"] = "success"


@dataclass(frozen=True, slots=True)
class ProductionSuccessResult:
    hosting: str | tuple[str, ...]
    status: Literal["success"] = "success"


@dataclass(frozen=True, slots=True)
class RemovalSuccessResult:
    status: Literal["success"] = "success"


@dataclass(frozen=True, slots=True)
class RemovalSkippedResult:
    status: Literal["skipped"] = "skipped"


@dataclass(frozen=True, slots=True)
class ErrorResult:
    """The tool ran but reported an application-level error."""

    error: str
    status: Literal["error"] = "error"


@dataclass(frozen=True, slots=True)
class ChannelDeploySummary:
    expire_time: str
    urls: tuple[str, ...]


type ChannelDeployResult = ChannelSuccessResult | ErrorResult
type ProductionDeployResult = ProductionSuccessResult | ErrorResult
type RemovalResult = RemovalSuccessResult | RemovalSkippedResult | ErrorResult
