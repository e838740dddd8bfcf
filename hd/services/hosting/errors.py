from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DeployErrorKind = Literal[
    "external_tool",
    "malformed_result",
    "invalid_input",
]


@dataclass(frozen=True, slots=True)
class DeployError:
    """Failure of a hosting operation.

    ``output`` holds whatever the tool wrote to stdout, for display.
    """

    kind: DeployErrorKind
    message: str
    hint: str | None = None
    output: str = ""

    def pretty(self) -> str:
        if self.hint:
            return f"{self.message} (hint: {self.hint})"
        return self.message
