from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import typer

from hd.core.config import Config, load_config
from hd.core.errors import ErrorCode
from hd.core.result import Err
from hd.output.console import ConsoleProtocol, RichConsole

ENTRY_POINT_ENV = "HOSTING_DEPLOY_ENTRY_POINT"


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol
    entry_point: Path | None = None


def build_context() -> CLIContext:
    config_result = load_config(os.environ)
    if isinstance(config_result, Err):
        typer.echo(f"error: {config_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    entry_point: Path | None = None
    raw_entry = os.environ.get(ENTRY_POINT_ENV)
    if raw_entry:
        entry_point = Path(raw_entry)

    return CLIContext(
        config=config_result.value,
        console=RichConsole(),
        entry_point=entry_point,
    )
