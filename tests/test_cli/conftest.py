"""Fixtures for CLI tests."""

import re
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from gh_poke.config import PokeConfig

from ..conftest import ItemFactory


def strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from text."""
    ansi_escape = re.compile(r"\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])")
    return ansi_escape.sub("", text)


@pytest.fixture
def runner() -> CliRunner:
    """Provide CLI test runner."""
    return CliRunner(env={"NO_COLOR": "1", "FORCE_COLOR": "0", "COLUMNS": "200"})


@pytest.fixture
def cli_config(config: PokeConfig) -> Generator[PokeConfig]:
    """Serve the test configuration instead of reading the environment."""

    def _load(**overrides: object) -> PokeConfig:
        updates = {k: v for k, v in overrides.items() if v is not None}
        return config.model_copy(update=updates)

    with patch("gh_poke.cli.context.load_config", side_effect=_load):
        yield config


@pytest.fixture
def mock_client(make_item: ItemFactory) -> Generator[MagicMock]:
    """GitHubClient replaced in every CLI module."""
    client = MagicMock()
    client.get_item.return_value = make_item("42", repo="acme/api", title="Crash")
    client.search.return_value = []
    client.fetch_notifications.return_value = []
    client.set_label_status.return_value = True
    client.check_token_scopes.return_value = ["repo"]
    with (
        patch("gh_poke.cli.views.GitHubClient", return_value=client),
        patch("gh_poke.cli.update.GitHubClient", return_value=client),
    ):
        yield client


@pytest.fixture
def mock_notify() -> Generator[MagicMock]:
    with patch("gh_poke.cli.views.send_desktop_notification") as mock_send:
        mock_send.return_value = True
        yield mock_send
