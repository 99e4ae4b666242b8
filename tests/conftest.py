"""Test configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path

import pytest

from gh_poke.config import PokeConfig
from gh_poke.github_client.models import ItemKind, RemoteItem

ItemFactory = Callable[..., RemoteItem]


@pytest.fixture
def make_item() -> ItemFactory:
    """Factory for RemoteItem objects with sensible defaults."""

    def _make(
        id: str = "1",
        number: int | None = None,
        repo: str = "acme/api",
        reason: str = "",
        kind: ItemKind = ItemKind.ISSUE,
        title: str | None = None,
        labels: frozenset[str] = frozenset(),
        state: str = "open",
    ) -> RemoteItem:
        if number is None:
            number = int(id) if id.isdigit() else 1
        segment = "pull" if kind is ItemKind.PULL_REQUEST else "issues"
        return RemoteItem(
            id=id,
            number=number,
            title=title or f"Item {id}",
            url=f"https://github.com/{repo}/{segment}/{number}",
            repository_full_name=repo,
            kind=kind,
            reason=reason,
            labels=labels,
            state=state,
        )

    return _make


@pytest.fixture
def config(tmp_path: Path) -> PokeConfig:
    """Configuration with a work organization, two teams and a temp state file."""
    return PokeConfig(
        github_token="test_token",
        work_orgs=["acme"],
        work_teams=["backend", "frontend"],
        state_path=tmp_path / "poke" / "todo.json",
    )
