"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hd.core.errors import ErrorCode
from hd.output.console import Style
from hd.services.hosting.errors import DeployError

if TYPE_CHECKING:
    from hd.output.console import ConsoleProtocol

__all__ = ["print_deploy_error", "deploy_error_exit_code"]


def print_deploy_error(error: DeployError, console: ConsoleProtocol) -> None:
    """Print a deploy error to the console with appropriate formatting."""
    match error.kind:
        case "external_tool":
            console.error(f"firebase-tools failed: {error.message}")
        case "malformed_result":
            console.error(f"unexpected firebase-tools output: {error.message}")
            if error.output:
                console.raw(error.output)
        case "invalid_input":
            console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def deploy_error_exit_code(error: DeployError) -> int:
    """Get the exit code for a deploy error."""
    match error.kind:
        case "invalid_input":
            return int(ErrorCode.USER_ERROR)
        case "external_tool":
            return int(ErrorCode.TOOL_ERROR)
        case "malformed_result":
            return int(ErrorCode.RESULT_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.TOOL_ERROR)
