"""Run firebase-tools with credentials and a one-shot debug retry.

The first attempt asks for ``--json`` so the result can be decoded. If that
attempt fails, the same command is run once more with ``--debug`` so the
CI log gets a verbose account of what went wrong. The debug output is for
humans only and is never returned for decoding.
"""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from hd.core.config import Config
from hd.core.result import Err, Ok, Result
from hd.output.console import ConsoleProtocol
from hd.platform.process import ProcessError, overlay_env
from hd.platform.process import invoke as invoke_process
from hd.services.hosting.errors import DeployError

__all__ = [
    "AGENT_ENV_VAR",
    "CREDENTIALS_ENV_VAR",
    "build_command",
    "credentials_env",
    "run_with_credentials",
]

AGENT_ENV_VAR = "FIREBASE_DEPLOY_AGENT"
# firebase-tools authenticates non-interactively when this points at a key file.
CREDENTIALS_ENV_VAR = "GOOGLE_APPLICATION_CREDENTIALS"

# Normal attempt first, then at most one verbose retry.
_ATTEMPT_MODES = (False, True)


def credentials_env(
    base: Mapping[str, str],
    *,
    credentials_path: str | Path,
    agent: str,
) -> dict[str, str]:
    """Return ``base`` with the agent id and credentials location set."""
    return overlay_env(
        base,
        {
            AGENT_ENV_VAR: agent,
            CREDENTIALS_ENV_VAR: str(credentials_path),
        },
    )


def build_command(
    config: Config,
    args: Sequence[str],
    *,
    project_id: str | None,
    debug: bool,
) -> list[str]:
    cmd = [*config.command(), *args]
    if project_id:
        cmd += ["--project", project_id]
    cmd.append("--debug" if debug else "--json")
    return cmd


def _report_failure(console: ConsoleProtocol, error: ProcessError) -> None:
    captured = error.output.text()
    if captured:
        console.raw(captured)
    console.error(error.message)


def run_with_credentials(
    args: Sequence[str],
    *,
    project_id: str | None,
    credentials_path: str | Path,
    config: Config,
    console: ConsoleProtocol,
    cwd: Path | None = None,
    base_env: Mapping[str, str] | None = None,
) -> Result[str, DeployError]:
    """Run the hosting CLI and return the text of its JSON result.

    Args:
        args: Verb and flags, without ``--project``/``--json``/``--debug``.
        project_id: Appended as ``--project`` when given.
        credentials_path: Service account key file handed to the CLI.
        config: Launch settings (command prefix, agent id).
        console: Receives captured output and failure messages.
        cwd: Directory holding the project's hosting configuration.
        base_env: Environment to extend (``os.environ`` if None).

    Returns:
        Ok(text) with the last stdout chunk of the ``--json`` attempt ("" if
        it wrote nothing), even when that attempt failed and the debug retry
        succeeded. Err(DeployError) if the debug retry fails as well.
    """
    if not str(credentials_path).strip():
        return Err(
            DeployError(
                kind="invalid_input",
                message="credentials path is required",
                hint="Pass --credentials or set GOOGLE_APPLICATION_CREDENTIALS",
            )
        )

    env = credentials_env(
        os.environ if base_env is None else base_env,
        credentials_path=credentials_path,
        agent=config.agent,
    )

    json_text = ""
    last_error: ProcessError | None = None
    for debug in _ATTEMPT_MODES:
        cmd = build_command(config, args, project_id=project_id, debug=debug)
        result = invoke_process(cmd, env=env, cwd=cwd)
        if isinstance(result, Ok):
            if not debug:
                json_text = result.value.last_text()
            return Ok(json_text)

        last_error = result.error
        _report_failure(console, last_error)
        if not debug:
            json_text = last_error.output.last_text()
            console.warning("Retrying with the --debug flag for better error output")

    assert last_error is not None
    return Err(
        DeployError(
            kind="external_tool",
            message=f"{last_error} (retried with --debug)",
            hint=last_error.message,
            output=last_error.output.text(),
        )
    )
