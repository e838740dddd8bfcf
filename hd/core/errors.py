"""Exit codes for CLI commands.

A CI job branches on these, so the numeric values are part of the
interface and must stay stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes.

    - 0: Success
    - 1: User error (missing channel id, bad option)
    - 2: Tool error (firebase-tools failed twice, or could not be started)
    - 3: Deploy error (the tool ran and reported ``status: error``)
    - 4: Result error (the tool's output could not be decoded)
    """

    OK = 0
    USER_ERROR = 1
    TOOL_ERROR = 2
    DEPLOY_ERROR = 3
    RESULT_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK
