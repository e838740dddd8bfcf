"""Typed configuration for how the hosting CLI is launched.

Values come from the process environment so a CI workflow can override
them without touching the command line.
"""

from __future__ import annotations

import shlex
from collections.abc import Mapping
from dataclasses import dataclass

from .result import Err, Ok, Result
from .structured import get_str

__all__ = [
    "Config",
    "ConfigError",
    "load_config",
    "DEFAULT_TOOL_COMMAND",
    "DEFAULT_AGENT",
    "TOOL_ENV",
    "TOOLS_VERSION_ENV",
    "AGENT_ENV",
]

DEFAULT_TOOL_COMMAND: tuple[str, ...] = ("npx", "firebase-tools")
DEFAULT_AGENT = "action-hosting-deploy"

TOOL_ENV = "HOSTING_DEPLOY_TOOL"
TOOLS_VERSION_ENV = "HOSTING_DEPLOY_TOOLS_VERSION"
AGENT_ENV = "HOSTING_DEPLOY_AGENT"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when configuration cannot be read from the environment."""

    message: str
    key: str | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Launch settings for firebase-tools.

    Attributes:
        tool_command: Command prefix that runs the CLI.
        tools_version: Pinned firebase-tools version (default command only).
        agent: Value reported to the CLI as the deploying agent.
    """

    tool_command: tuple[str, ...] = DEFAULT_TOOL_COMMAND
    tools_version: str | None = None
    agent: str = DEFAULT_AGENT

    def command(self) -> tuple[str, ...]:
        """Resolve the command prefix, applying ``tools_version`` if set."""
        if self.tools_version and self.tool_command == DEFAULT_TOOL_COMMAND:
            return ("npx", f"firebase-tools@{self.tools_version}")
        return self.tool_command

    @classmethod
    def from_env(cls, env: Mapping[str, str]) -> Config:
        """Create Config from an environment mapping.

        Raises:
            ValueError: If ``HOSTING_DEPLOY_TOOL`` cannot be split into a command.
        """
        tool_command = DEFAULT_TOOL_COMMAND
        raw_tool = get_str(env, TOOL_ENV)
        if raw_tool is not None:
            parts = tuple(shlex.split(raw_tool))
            if not parts:
                raise ValueError(f"{TOOL_ENV} is empty")
            tool_command = parts

        return cls(
            tool_command=tool_command,
            tools_version=get_str(env, TOOLS_VERSION_ENV),
            agent=get_str(env, AGENT_ENV) or DEFAULT_AGENT,
        )


def load_config(env: Mapping[str, str]) -> Result[Config, ConfigError]:
    """Load configuration from an environment mapping.

    Args:
        env: Usually ``os.environ``.

    Returns:
        Ok(Config) on success, Err(ConfigError) on invalid values.
    """
    try:
        return Ok(Config.from_env(env))
    except ValueError as e:
        return Err(ConfigError(f"Invalid {TOOL_ENV}: {e}", key=TOOL_ENV))
