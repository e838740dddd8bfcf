"""Platform abstraction layer."""

from .process import (
    CapturedOutput,
    ProcessError,
    invoke,
    overlay_env,
)

__all__ = [
    "CapturedOutput",
    "ProcessError",
    "invoke",
    "overlay_env",
]
