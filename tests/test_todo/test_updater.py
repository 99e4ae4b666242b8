"""Tests for status and note updates."""

import json
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
import requests

from gh_poke.exceptions import TransportError
from gh_poke.keys import IssueKey
from gh_poke.todo.models import TodoStatus
from gh_poke.todo.status_writer import StatusLabelWriter
from gh_poke.todo.store import TodoStore
from gh_poke.todo.updater import TodoUpdater

from ..conftest import ItemFactory

KEY = IssueKey("acme/api", 42)
NOW = datetime(2024, 3, 1, 9, 30)


@pytest.fixture
def store(tmp_path: Path) -> TodoStore:
    return TodoStore(tmp_path / "todo.json")


@pytest.fixture
def client(make_item: ItemFactory) -> Mock:
    client = Mock()
    client.get_item.return_value = make_item("42", repo="acme/api", title="Crash")
    client.set_label_status.return_value = True
    return client


def test_requires_status_or_note(store: TodoStore) -> None:
    with pytest.raises(ValueError, match="Nothing to update"):
        TodoUpdater(store).update(KEY)


def test_status_and_note_are_saved(store: TodoStore, client: Mock) -> None:
    updater = TodoUpdater(store, client=client, writer=StatusLabelWriter(client))

    outcome = updater.update(
        KEY, status=TodoStatus.BLOCKED, note="Waiting for API access", now=NOW
    )

    assert outcome.saved
    assert outcome.remote_updated is True
    assert outcome.details_fetched
    client.set_label_status.assert_called_once_with("acme", "api", 42, "blocked")

    annotation = store.load().get(KEY)
    assert annotation.status is TodoStatus.BLOCKED
    assert annotation.notes == "[2024-03-01] Waiting for API access"
    assert annotation.cached_title == "Crash"
    assert annotation.cached_url == "https://github.com/acme/api/issues/42"
    assert outcome.annotation.to_record() == annotation.to_record()


def test_note_only_keeps_status(store: TodoStore, client: Mock) -> None:
    updater = TodoUpdater(store, client=client)
    updater.update(KEY, status=TodoStatus.IN_PROGRESS, now=NOW)

    outcome = updater.update(KEY, note="Halfway", now=NOW)

    assert outcome.remote_updated is None
    annotation = store.load().get(KEY)
    assert annotation.status is TodoStatus.IN_PROGRESS
    assert annotation.notes == "[2024-03-01] Halfway"


def test_remote_failure_still_saves_locally(store: TodoStore, client: Mock) -> None:
    client.set_label_status.return_value = False
    updater = TodoUpdater(store, client=client, writer=StatusLabelWriter(client))

    outcome = updater.update(KEY, status=TodoStatus.REVIEW, now=NOW)

    assert outcome.remote_updated is False
    assert outcome.saved
    assert store.load().get(KEY).status is TodoStatus.REVIEW


def test_details_failure_still_saves_locally(store: TodoStore, client: Mock) -> None:
    client.get_item.side_effect = TransportError(500, "Server Error")
    updater = TodoUpdater(store, client=client)

    outcome = updater.update(KEY, note="Offline note", now=NOW)

    assert outcome.saved
    assert not outcome.details_fetched
    assert store.load().get(KEY).cached_title is None


def test_details_connection_error_still_saves(
    store: TodoStore, client: Mock
) -> None:
    client.get_item.side_effect = requests.exceptions.ConnectionError("offline")
    updater = TodoUpdater(store, client=client)

    outcome = updater.update(KEY, note="Written offline", now=NOW)

    assert outcome.saved
    assert not outcome.details_fetched
    assert store.load().get(KEY).notes == "[2024-03-01] Written offline"


def test_status_push_connection_error_still_saves(
    store: TodoStore, client: Mock
) -> None:
    client.set_label_status.side_effect = requests.exceptions.ConnectionError(
        "offline"
    )
    client.get_item.side_effect = requests.exceptions.ConnectionError("offline")
    updater = TodoUpdater(store, client=client, writer=StatusLabelWriter(client))

    outcome = updater.update(KEY, status=TodoStatus.BLOCKED, now=NOW)

    assert outcome.remote_updated is False
    assert outcome.saved
    assert store.load().get(KEY).status is TodoStatus.BLOCKED


def test_owner_less_key_stays_local(store: TodoStore, client: Mock) -> None:
    key = IssueKey("notes", 4)
    updater = TodoUpdater(store, client=client, writer=StatusLabelWriter(client))

    outcome = updater.update(key, status=TodoStatus.BLOCKED, now=NOW)

    assert outcome.remote_updated is False
    assert not outcome.details_fetched
    assert outcome.saved
    client.get_item.assert_not_called()
    client.set_label_status.assert_not_called()


def test_write_error_is_reported(store: TodoStore, tmp_path: Path) -> None:
    original = json.dumps({"issues": {"acme/api#1": {"status": "review"}}})
    store.path.write_text(original, encoding="utf-8")
    updater = TodoUpdater(store)

    with patch("gh_poke.todo.store.os.replace", side_effect=OSError("read-only")):
        outcome = updater.update(KEY, status=TodoStatus.BLOCKED, now=NOW)

    assert not outcome.saved
    assert "read-only" in outcome.error
    assert store.path.read_text(encoding="utf-8") == original
