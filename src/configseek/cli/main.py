"""CLI commands for configseek."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer

from configseek.cli.formatting import print_result
from configseek.core.exceptions import ConfigseekError


if TYPE_CHECKING:
    from configseek import Explorer


app = typer.Typer(
    name="configseek",
    help="Find and load a tool's configuration by searching up the directory tree.",
    no_args_is_help=True,
)


class Mode(str, Enum):
    """Execution mode selectable from the command line."""

    blocking = "blocking"
    cooperative = "cooperative"


def _configure_logging(verbose: bool) -> None:
    """Send library debug records to stderr through Rich."""
    if not verbose:
        return
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False)
    logger = logging.getLogger("configseek")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _run_load(
    explorer: Explorer,
    search_path: Path | None = None,
    config_path: Path | None = None,
) -> Any:
    """Call explorer.load() in whichever mode the explorer runs."""
    if explorer.options.sync:
        return explorer.load(search_path, config_path)

    async def _load() -> Any:
        return await explorer.load(search_path, config_path)

    return asyncio.run(_load())


def _load_or_exit(
    explorer: Explorer,
    search_path: Path | None = None,
    config_path: Path | None = None,
) -> Any:
    """Load configuration, turning library errors into exit code 1."""
    try:
        return _run_load(explorer, search_path, config_path)
    except ConfigseekError as e:
        typer.echo(f"Error: {e}", err=True)
        if e.recovery_hint:
            typer.echo(f"Hint: {e.recovery_hint}", err=True)
        raise typer.Exit(1) from None


@app.command()
def search(
    module_name: str = typer.Argument(..., help="Tool name, e.g. 'foo'."),
    path: Path = typer.Argument(
        Path("."),
        help="File or directory to start searching from.",
    ),
    stop_dir: Path | None = typer.Option(
        None,
        "--stop-dir",
        "-s",
        help="Directory where the search stops. Defaults to your home directory.",
    ),
    no_cache: bool = typer.Option(
        False,
        "--no-cache",
        help="Disable result caching.",
    ),
    mode: Mode = typer.Option(
        Mode.blocking,
        "--mode",
        "-m",
        help="Execution mode.",
    ),
    strict_json: bool = typer.Option(
        False,
        "--strict-json",
        help="Parse extension-less rc files as strict JSON.",
    ),
    rc_extensions: bool = typer.Option(
        False,
        "--rc-extensions",
        help="Also try the rc name with .json/.yaml/.yml/.toml/.py appended.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every probe.",
    ),
) -> None:
    """Search upward from PATH for MODULE_NAME's configuration."""
    from configseek import create_explorer

    _configure_logging(verbose)
    overrides: dict[str, Any] = {
        "cache": not no_cache,
        "sync": mode is Mode.blocking,
        "rc_strict_json": strict_json,
        "rc_extensions": rc_extensions,
    }
    if stop_dir is not None:
        overrides["stop_dir"] = stop_dir

    explorer = create_explorer(module_name, **overrides)
    result = _load_or_exit(explorer, search_path=path)

    if result is None:
        typer.echo(f"No configuration found for '{module_name}'.")
        raise typer.Exit(1)

    print_result(result)


@app.command()
def show(
    module_name: str = typer.Argument(..., help="Tool name, e.g. 'foo'."),
    config_file: Path = typer.Argument(..., help="Config file to load."),
    mode: Mode = typer.Option(
        Mode.blocking,
        "--mode",
        "-m",
        help="Execution mode.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every probe.",
    ),
) -> None:
    """Load CONFIG_FILE directly, without searching."""
    from configseek import create_explorer

    _configure_logging(verbose)
    explorer = create_explorer(module_name, sync=mode is Mode.blocking)
    result = _load_or_exit(explorer, config_path=config_file)

    if result is None:
        typer.echo(f"No '{module_name}' configuration in {config_file}.")
        raise typer.Exit(1)

    print_result(result)


def main() -> None:
    """Entry point for the CLI."""
    app()
