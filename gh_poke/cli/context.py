"""Helpers shared by the CLI commands."""

import typer
from rich.console import Console

from ..config import PokeConfig, load_config
from ..exceptions import ConfigError
from .render import render_error

console = Console()


def load_cli_config(**overrides: object) -> PokeConfig:
    """Load configuration or exit with a readable error."""
    try:
        return load_config(**overrides)
    except ConfigError as e:
        render_error(console, str(e))
        raise typer.Exit(1)
