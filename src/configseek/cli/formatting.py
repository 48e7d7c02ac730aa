"""Output helpers for CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.console import Console


if TYPE_CHECKING:
    from configseek.core.models import ConfigResult


def _to_json(config: Any) -> str:
    """Serialize config, falling back to str() for non-JSON values."""
    return json.dumps(config, default=str, sort_keys=True)


def print_result(result: ConfigResult, console: Console | None = None) -> None:
    """Print where the configuration came from, then the configuration.

    Args:
        result: The loaded configuration.
        console: Console to print to. Defaults to stdout.
    """
    console = console or Console()
    console.print(
        f"Found: {result.filepath}", markup=False, highlight=False, soft_wrap=True
    )
    if result.is_empty:
        console.print("(empty configuration)")
        return
    console.print_json(_to_json(result.config))
