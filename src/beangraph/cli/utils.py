"""
CLI Utilities - Shared helper functions for command line operations.

Formatted printing, report loading and the JSON envelope used by the
--json output modes.
"""

import json
from typing import Any, NoReturn, Optional

import click

from ..config import LayoutConfig, load_config
from ..core.exceptions import BeanGraphError
from ..session import VisualizationSession


def echo_success(message: str) -> None:
    """
    Print a success message with a green checkmark.

    Args:
        message (str): The message to display.
    """
    click.echo(click.style(f"✅ {message}", fg="green"))


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def echo_json_success(data: Any) -> None:
    click.echo(json.dumps({"meta": {"status": "success"}, "data": data}))


def echo_json_error(error: Exception) -> None:
    click.echo(json.dumps({
        "meta": {"status": "error"},
        "error": {"message": str(error), "type": type(error).__name__},
    }))


def resolve_config(ctx: Optional[click.Context]) -> LayoutConfig:
    """Layout config selected by the global --config option."""
    config_path = None
    if ctx is not None and ctx.obj:
        config_path = ctx.obj.get("config_path")
    return load_config(config_path)


def open_session(report_path: str, config: Optional[LayoutConfig] = None, **session_kwargs) -> VisualizationSession:
    """
    Create a session and load a report file into it.

    Raises:
        BeanGraphError: If the report cannot be read or is not a valid
            /beans report.
    """
    session = VisualizationSession(config=config, **session_kwargs)
    session.load_file(report_path).unwrap()
    return session


def fail(error: BeanGraphError, as_json: bool = False) -> NoReturn:
    """Report an error at the command boundary and exit with status 1."""
    if as_json:
        echo_json_error(error)
    else:
        echo_error(str(error))
    raise SystemExit(1)
