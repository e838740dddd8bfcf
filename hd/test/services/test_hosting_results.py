from __future__ import annotations

import json

import pytest

from hd.core.result import Err, Ok
from hd.services.hosting.model import (
    ChannelDeploySummary,
    ChannelSuccessResult,
    ErrorResult,
    ProductionSuccessResult,
    RemovalSkippedResult,
    RemovalSuccessResult,
    SiteDeploy,
)
from hd.services.hosting.results import (
    decode_channel_deploy,
    decode_production_deploy,
    decode_removal,
    interpret_channel_deploy_result,
)
from hd.test.samples import (
    CHANNEL_ERROR,
    CHANNEL_MULTI_SITE_SUCCESS,
    CHANNEL_REMOVAL_SKIPPED,
    LIVE_DEPLOY_MULTI_SITE_SUCCESS,
)


class TestInterpretChannelDeployResult:
    def test_two_sites_keep_input_order(self) -> None:
        result = ChannelSuccessResult(
            result={
                "site-a": SiteDeploy(site="site-a", url="https://a", expire_time="T1"),
                "site-b": SiteDeploy(site="site-b", url="https://b", expire_time="T1"),
            }
        )

        summary = interpret_channel_deploy_result(result)

        assert summary == ChannelDeploySummary(expire_time="T1", urls=("https://a", "https://b"))

    def test_decoded_multi_site_payload(self) -> None:
        decoded = decode_channel_deploy(json.dumps(CHANNEL_MULTI_SITE_SUCCESS))
        assert isinstance(decoded, Ok)
        assert isinstance(decoded.value, ChannelSuccessResult)

        summary = interpret_channel_deploy_result(decoded.value)

        assert summary.expire_time == "2026-10-25T20:14:07.216Z"
        assert summary.urls == (
            "https://my-main-site--my-channel-abc123.web.app",
            "https://my-second-site--my-channel-def456.web.app",
        )


class TestDecodeChannelDeploy:
    def test_success_with_surrounding_whitespace(self) -> None:
        text = "\n  " + json.dumps(CHANNEL_MULTI_SITE_SUCCESS) + "\n"

        result = decode_channel_deploy(text)

        assert isinstance(result, Ok)
        assert isinstance(result.value, ChannelSuccessResult)
        assert result.value.result["my-main-site"].target == "main"

    def test_error_status(self) -> None:
        result = decode_channel_deploy(json.dumps(CHANNEL_ERROR))

        assert isinstance(result, Ok)
        assert isinstance(result.value, ErrorResult)
        assert result.value.status == "error"

    def test_empty_site_mapping_is_malformed(self) -> None:
        result = decode_channel_deploy('{"status": "success", "result": {}}')

        assert isinstance(result, Err)
        assert result.error.kind == "malformed_result"

    def test_site_without_url_is_malformed(self) -> None:
        text = json.dumps(
            {"status": "success", "result": {"a": {"site": "a", "expireTime": "T1"}}}
        )

        result = decode_channel_deploy(text)

        assert isinstance(result, Err)
        assert result.error.message == "invalid site deploy record: a"

    def test_skipped_is_not_a_deploy_status(self) -> None:
        result = decode_channel_deploy('{"status": "skipped"}')

        assert isinstance(result, Err)
        assert result.error.kind == "malformed_result"


class TestDecodeProductionDeploy:
    def test_single_site(self) -> None:
        result = decode_production_deploy('{"status": "success", "result": {"hosting": "s"}}')
        assert result == Ok(ProductionSuccessResult(hosting="s"))

    def test_multiple_sites(self) -> None:
        result = decode_production_deploy(json.dumps(LIVE_DEPLOY_MULTI_SITE_SUCCESS))

        assert isinstance(result, Ok)
        assert isinstance(result.value, ProductionSuccessResult)
        assert len(result.value.hosting) == 2

    def test_missing_hosting_is_malformed(self) -> None:
        result = decode_production_deploy('{"status": "success", "result": {}}')

        assert isinstance(result, Err)
        assert result.error.kind == "malformed_result"


class TestDecodeRemoval:
    def test_success(self) -> None:
        assert decode_removal('{"status": "success"}') == Ok(RemovalSuccessResult())

    def test_skipped(self) -> None:
        assert decode_removal(json.dumps(CHANNEL_REMOVAL_SKIPPED)) == Ok(RemovalSkippedResult())

    def test_error(self) -> None:
        assert decode_removal('{"status": "error", "error": "boom"}') == Ok(ErrorResult("boom"))

    def test_error_without_message_is_malformed(self) -> None:
        result = decode_removal('{"status": "error"}')

        assert isinstance(result, Err)
        assert result.error.kind == "malformed_result"


class TestMalformedInput:
    @pytest.mark.parametrize(
        "text",
        [
            "I am a very long debug output",
            "[1, 2, 3]",
            '{"result": {}}',
            '{"status": 3}',
        ],
    )
    def test_rejected_by_every_decoder(self, text: str) -> None:
        for decode in (decode_channel_deploy, decode_production_deploy, decode_removal):
            result = decode(text)
            assert isinstance(result, Err)
            assert result.error.kind == "malformed_result"
            assert result.error.output == text

    def test_empty_text_points_at_debug_output(self) -> None:
        result = decode_removal("")

        assert isinstance(result, Err)
        assert result.error.kind == "malformed_result"
        assert result.error.hint is not None
        assert "--debug" in result.error.hint
