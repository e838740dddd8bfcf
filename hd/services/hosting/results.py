"""Decode firebase-tools ``--json`` output into typed results.

Each operation kind accepts a closed set of ``status`` values. Anything
else (invalid JSON, a missing or unexpected status, a payload without the
fields its status requires) is a ``malformed_result`` error.
"""

from __future__ import annotations

import json

from hd.core.result import Err, Ok, Result
from hd.core.structured import StrDict, as_str_dict, get_str, get_str_list, get_table
from hd.services.hosting.errors import DeployError
from hd.services.hosting.model import (
    ChannelDeployResult,
    ChannelDeploySummary,
    ChannelSuccessResult,
    ErrorResult,
    ProductionDeployResult,
    ProductionSuccessResult,
    RemovalResult,
    RemovalSkippedResult,
    RemovalSuccessResult,
    SiteDeploy,
)

__all__ = [
    "decode_channel_deploy",
    "decode_production_deploy",
    "decode_removal",
    "interpret_channel_deploy_result",
]


def _malformed(message: str, text: str) -> Err[DeployError]:
    return Err(
        DeployError(
            kind="malformed_result",
            message=message,
            hint="the --json output of firebase-tools did not match the expected shape",
            output=text,
        )
    )


def _load_status(text: str) -> Result[tuple[str, StrDict], DeployError]:
    stripped = text.strip()
    if not stripped:
        return Err(
            DeployError(
                kind="malformed_result",
                message="firebase-tools produced no JSON result",
                hint="see the --debug output above",
            )
        )

    try:
        obj: object = json.loads(stripped)
    except json.JSONDecodeError as e:
        return _malformed(f"invalid JSON from firebase-tools: {e}", text)

    data = as_str_dict(obj)
    if data is None:
        return _malformed("firebase-tools result is not a JSON object", text)

    status = get_str(data, "status")
    if status is None:
        return _malformed("firebase-tools result has no status", text)
    return Ok((status, data))


def _error_result(data: StrDict, text: str) -> Result[ErrorResult, DeployError]:
    message = data.get("error")
    if not isinstance(message, str):
        return _malformed("error result without an error message", text)
    return Ok(ErrorResult(error=message))


def _site_deploy(obj: object) -> SiteDeploy | None:
    d = as_str_dict(obj)
    if d is None:
        return None
    site = get_str(d, "site")
    url = get_str(d, "url")
    expire_time = get_str(d, "expireTime")
    if site is None or url is None or expire_time is None:
        return None
    return SiteDeploy(site=site, url=url, expire_time=expire_time, target=get_str(d, "target"))


def decode_channel_deploy(text: str) -> Result[ChannelDeployResult, DeployError]:
    """Decode the result of ``hosting:channel:deploy``."""
    loaded = _load_status(text)
    if isinstance(loaded, Err):
        return loaded
    status, data = loaded.value

    if status == "error":
        return _error_result(data, text)
    if status != "success":
        return _malformed(f"unexpected channel deploy status: {status}", text)

    raw_sites = get_table(data, "result")
    if not raw_sites:
        return _malformed("channel deploy succeeded without any site results", text)

    sites: dict[str, SiteDeploy] = {}
    for key, value in raw_sites.items():
        site = _site_deploy(value)
        if site is None:
            return _malformed(f"invalid site deploy record: {key}", text)
        sites[key] = site

    return Ok(ChannelSuccessResult(result=sites))


def decode_production_deploy(text: str) -> Result[ProductionDeployResult, DeployError]:
    """Decode the result of ``deploy --only hosting[:target]``."""
    loaded = _load_status(text)
    if isinstance(loaded, Err):
        return loaded
    status, data = loaded.value

    if status == "error":
        return _error_result(data, text)
    if status != "success":
        return _malformed(f"unexpected deploy status: {status}", text)

    payload = get_table(data, "result")
    if payload is None:
        return _malformed("deploy succeeded without a result", text)

    hosting = payload.get("hosting")
    if isinstance(hosting, str):
        return Ok(ProductionSuccessResult(hosting=hosting))

    sites = get_str_list(payload, "hosting")
    if sites is None:
        return _malformed("deploy result has no hosting sites", text)
    return Ok(ProductionSuccessResult(hosting=tuple(sites)))


def decode_removal(text: str) -> Result[RemovalResult, DeployError]:
    """Decode the result of ``hosting:channel:delete``."""
    loaded = _load_status(text)
    if isinstance(loaded, Err):
        return loaded
    status, data = loaded.value

    match status:
        case "success":
            return Ok(RemovalSuccessResult())
        case "skipped":
            return Ok(RemovalSkippedResult())
        case "error":
            return _error_result(data, text)
        case _:
            return _malformed(f"unexpected channel delete status: {status}", text)


def interpret_channel_deploy_result(result: ChannelSuccessResult) -> ChannelDeploySummary:
    """Summarize a multi-site channel deploy.

    All sites in one channel deploy share an expiry, so it is read from the
    first record. URLs keep the payload's order.
    """
    sites = list(result.result.values())
    return ChannelDeploySummary(
        expire_time=sites[0].expire_time,
        urls=tuple(site.url for site in sites),
    )
