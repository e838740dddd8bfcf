"""Subprocess execution with Result-based error handling.

Standard output is captured chunk by chunk as the child writes it; standard
error is inherited so the host (a CI log) shows it live.

Usage:
    env = overlay_env(os.environ, {"FIREBASE_DEPLOY_AGENT": "ci"})
    match invoke(["npx", "firebase-tools", "--version"], env=env):
        case Ok(output):
            print(output.last_text())
        case Err(error):
            print(f"Failed: {error.message}")
"""

from __future__ import annotations

import subprocess
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from hd.core.result import Err, Ok, Result

__all__ = ["CapturedOutput", "ProcessError", "invoke", "overlay_env", "CHUNK_SIZE"]

CHUNK_SIZE = 64 * 1024


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


@dataclass(frozen=True, slots=True)
class CapturedOutput:
    """Stdout chunks from one invocation, in arrival order.

    Only the final chunk carries meaning for ``--json`` runs: the CLI writes
    its JSON result as its last stdout write.
    """

    chunks: tuple[bytes, ...] = ()

    def last_text(self) -> str:
        """Decode the final chunk, or return "" when nothing was captured."""
        if not self.chunks:
            return ""
        return _decode(self.chunks[-1])

    def text(self) -> str:
        """Decode all chunks joined together."""
        return _decode(b"".join(self.chunks))


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or -1 when the process could not be spawned.
        output: Stdout captured before the failure.
        message: Underlying failure description.
    """

    command: tuple[str, ...]
    returncode: int
    output: CapturedOutput
    message: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def overlay_env(base: Mapping[str, str], overlay: Mapping[str, str]) -> dict[str, str]:
    """Merge ``overlay`` on top of ``base`` into a new dict (overlay wins)."""
    env = dict(base)
    env.update(overlay)
    return env


def invoke(
    cmd: list[str],
    *,
    env: Mapping[str, str],
    cwd: Path | None = None,
) -> Result[CapturedOutput, ProcessError]:
    """Run a command to completion, capturing stdout incrementally.

    Args:
        cmd: Command and arguments to execute.
        env: Complete environment for the child process.
        cwd: Working directory (inherits the current one if None).

    Returns:
        Ok(CapturedOutput) on exit code 0, Err(ProcessError) otherwise.
    """
    chunks: list[bytes] = []
    try:
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd) if cwd is not None else None,
            env=dict(env),
            stdout=subprocess.PIPE,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=-1,
                output=CapturedOutput(),
                message=str(e),
            )
        )

    assert proc.stdout is not None
    with proc.stdout:
        while chunk := proc.stdout.read1(CHUNK_SIZE):
            chunks.append(chunk)
    returncode = proc.wait()

    output = CapturedOutput(tuple(chunks))
    if returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=returncode,
                output=output,
                message=f"The process '{cmd[0]}' failed with exit code {returncode}",
            )
        )

    return Ok(output)
