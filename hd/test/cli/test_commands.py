from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hd import __version__
from hd.cli.app import app
from hd.cli.context import CLIContext
from hd.core.config import Config
from hd.core.errors import ErrorCode
from hd.core.result import Err, Ok
from hd.output.console import MockConsole
from hd.services.hosting import (
    ChannelSuccessResult,
    DeployError,
    ErrorResult,
    HostingContext,
    InvocationConfig,
    ProductionSuccessResult,
    RemovalSkippedResult,
    RemovalSuccessResult,
    SiteDeploy,
)

runner = CliRunner()

CHANNEL_OK = ChannelSuccessResult(
    result={
        "site-a": SiteDeploy(site="site-a", url="https://a.web.app", expire_time="T1"),
        "site-b": SiteDeploy(site="site-b", url="https://b.web.app", expire_time="T1"),
    }
)


def _ctx() -> CLIContext:
    return CLIContext(config=Config(), console=MockConsole())


def _patch(
    monkeypatch: pytest.MonkeyPatch,
    module_name: str,
    op_name: str,
    result: object,
) -> tuple[CLIContext, list[tuple[HostingContext, InvocationConfig]]]:
    import importlib

    module = importlib.import_module(module_name)
    ctx = _ctx()
    calls: list[tuple[HostingContext, InvocationConfig]] = []

    def fake_op(hosting: HostingContext, invocation: InvocationConfig) -> object:
        calls.append((hosting, invocation))
        return result

    monkeypatch.setattr(module, "build_context", lambda: ctx)
    monkeypatch.setattr(module, op_name, fake_op)
    return ctx, calls


def _console(ctx: CLIContext) -> MockConsole:
    assert isinstance(ctx.console, MockConsole)
    return ctx.console


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


class TestDeployPreviewCommand:
    def test_prints_urls(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, calls = _patch(
            monkeypatch, "hd.cli.commands.deploy", "deploy_preview", Ok(CHANNEL_OK)
        )

        result = runner.invoke(
            app,
            [
                "deploy-preview",
                "--credentials",
                "key.json",
                "--channel-id",
                "pr-12",
                "--project-id",
                "my-project",
                "--expires",
                "7d",
            ],
        )

        assert result.exit_code == 0
        hosting, invocation = calls[0]
        assert hosting.credentials_path == Path("key.json")
        assert invocation == InvocationConfig(
            project_id="my-project", channel_id="pr-12", expires="7d"
        )
        console = _console(ctx)
        assert console.has_success()
        assert console.find("https://a.web.app")
        assert console.find("https://b.web.app")

    def test_json_summary(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch(monkeypatch, "hd.cli.commands.deploy", "deploy_preview", Ok(CHANNEL_OK))

        result = runner.invoke(
            app,
            ["deploy-preview", "--credentials", "k.json", "--channel-id", "pr-12", "--json"],
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "details_url": "https://a.web.app",
            "expire_time": "T1",
            "urls": ["https://a.web.app", "https://b.web.app"],
        }

    def test_error_result_exits_with_deploy_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, _ = _patch(
            monkeypatch,
            "hd.cli.commands.deploy",
            "deploy_preview",
            Ok(ErrorResult(error="Channel IDs can only include letters")),
        )

        result = runner.invoke(
            app, ["deploy-preview", "--credentials", "k.json", "--channel-id", "bad id"]
        )

        assert result.exit_code == int(ErrorCode.DEPLOY_ERROR)
        assert _console(ctx).find("Channel IDs can only include letters")

    def test_tool_failure_exits_with_tool_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, _ = _patch(
            monkeypatch,
            "hd.cli.commands.deploy",
            "deploy_preview",
            Err(DeployError(kind="external_tool", message="npx firebase-tools failed")),
        )

        result = runner.invoke(
            app, ["deploy-preview", "--credentials", "k.json", "--channel-id", "pr-1"]
        )

        assert result.exit_code == int(ErrorCode.TOOL_ERROR)
        assert _console(ctx).has_error()

    def test_channel_id_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _, calls = _patch(monkeypatch, "hd.cli.commands.deploy", "deploy_preview", Ok(CHANNEL_OK))

        result = runner.invoke(
            app,
            ["deploy-preview", "--credentials", "k.json"],
            env={"HOSTING_DEPLOY_CHANNEL_ID": "from-env"},
        )

        assert result.exit_code == 0
        assert calls[0][1].channel_id == "from-env"


class TestDeployProductionCommand:
    def test_json_lists_sites(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _, calls = _patch(
            monkeypatch,
            "hd.cli.commands.deploy",
            "deploy_production_site",
            Ok(ProductionSuccessResult(hosting="sites/my-project/versions/1")),
        )

        result = runner.invoke(
            app, ["deploy-production", "--credentials", "k.json", "--target", "app2", "--json"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"hosting": ["sites/my-project/versions/1"]}
        assert calls[0][1].target == "app2"

    def test_malformed_output(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _patch(
            monkeypatch,
            "hd.cli.commands.deploy",
            "deploy_production_site",
            Err(DeployError(kind="malformed_result", message="no status")),
        )

        result = runner.invoke(app, ["deploy-production", "--credentials", "k.json"])

        assert result.exit_code == int(ErrorCode.RESULT_ERROR)


class TestRemoveCommands:
    def test_remove_preview(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, _ = _patch(
            monkeypatch, "hd.cli.commands.remove", "remove_preview", Ok(RemovalSuccessResult())
        )

        result = runner.invoke(
            app, ["remove-preview", "--credentials", "k.json", "--channel-id", "pr-12"]
        )

        assert result.exit_code == 0
        assert _console(ctx).find("Removed preview channel pr-12")

    def test_remove_preview_skipped_is_not_an_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, _ = _patch(
            monkeypatch, "hd.cli.commands.remove", "remove_preview", Ok(RemovalSkippedResult())
        )

        result = runner.invoke(
            app, ["remove-preview", "--credentials", "k.json", "--channel-id", "pr-12"]
        )

        assert result.exit_code == 0
        assert not _console(ctx).has_error()
        assert _console(ctx).find("does not exist")

    def test_remove_production_preview(self, monkeypatch: pytest.MonkeyPatch) -> None:
        ctx, calls = _patch(
            monkeypatch,
            "hd.cli.commands.remove",
            "remove_production_preview",
            Ok(ProductionSuccessResult(hosting=("sites/a/versions/1", "sites/b/versions/2"))),
        )

        result = runner.invoke(
            app, ["remove-production-preview", "--credentials", "k.json", "--project-id", "p"]
        )

        assert result.exit_code == 0
        assert calls[0][1] == InvocationConfig(project_id="p")
        assert _console(ctx).find("sites/b/versions/2")


def test_entry_point_must_exist(tmp_path: Path) -> None:
    missing = tmp_path / "nope"

    result = runner.invoke(
        app,
        [
            "--entry-point",
            str(missing),
            "remove-preview",
            "--credentials",
            "k",
            "--channel-id",
            "c",
        ],
    )

    assert result.exit_code == int(ErrorCode.USER_ERROR)
