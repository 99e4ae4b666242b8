"""Tests for merging assigned issues with the to-do list."""

from datetime import datetime

from gh_poke.github_client.models import ItemKind
from gh_poke.keys import IssueKey
from gh_poke.todo.board import merge_for_display
from gh_poke.todo.models import STATUS_DISPLAY_ORDER, TodoStatus, TodoStorage

from ..conftest import ItemFactory

NOW = datetime(2024, 3, 1, 9, 30)


def test_groups_follow_display_order() -> None:
    board = merge_for_display([], TodoStorage())

    assert [group.status for group in board.groups] == list(STATUS_DISPLAY_ORDER)
    assert [group.status for group in board.groups] == [
        TodoStatus.IN_PROGRESS,
        TodoStatus.BLOCKED,
        TodoStatus.REVIEW,
        TodoStatus.BACKLOG,
    ]
    assert board.is_empty


def test_untracked_assigned_item_is_backlog(make_item: ItemFactory) -> None:
    item = make_item("1", number=5, repo="acme/api", title="Fix login")

    board = merge_for_display([item], TodoStorage())

    (entry,) = board.group(TodoStatus.BACKLOG).entries
    assert entry.key == IssueKey("acme/api", 5)
    assert entry.title == "Fix login"
    assert entry.item == item
    assert not entry.manual


def test_stored_status_and_notes_overlay(make_item: ItemFactory) -> None:
    item = make_item("1", number=5, repo="acme/api", title="Fix login")
    storage = TodoStorage()
    key = IssueKey("acme/api", 5)
    storage.set_status(key, TodoStatus.BLOCKED, NOW)
    storage.append_note(key, "Waiting for API access", NOW)
    storage.cache_remote_fields(key, "Old title", None)

    board = merge_for_display([item], storage)

    (entry,) = board.group(TodoStatus.BLOCKED).entries
    assert entry.notes == "[2024-03-01] Waiting for API access"
    assert entry.title == "Fix login"
    assert entry.cached_title == "Old title"
    assert board.group(TodoStatus.BACKLOG).entries == []


def test_closed_issue_stays_visible(make_item: ItemFactory) -> None:
    storage = TodoStorage()
    key = IssueKey("acme/api", 9)
    storage.set_status(key, TodoStatus.REVIEW, NOW)
    storage.cache_remote_fields(key, "Closed bug", "https://github.com/acme/api/issues/9")

    board = merge_for_display([make_item("1", number=5)], storage)

    (entry,) = board.group(TodoStatus.REVIEW).entries
    assert entry.manual
    assert entry.key == key
    assert entry.title == "Closed bug"
    assert entry.url == "https://github.com/acme/api/issues/9"


def test_manual_entries_follow_live_ones_sorted_by_key(make_item: ItemFactory) -> None:
    storage = TodoStorage()
    storage.set_status(IssueKey("zeta/x", 1), TodoStatus.BACKLOG, NOW)
    storage.set_status(IssueKey("alpha/y", 2), TodoStatus.BACKLOG, NOW)

    board = merge_for_display(
        [make_item("1", number=5, repo="acme/api")], storage
    )

    keys = [str(entry.key) for entry in board.group(TodoStatus.BACKLOG).entries]
    assert keys == ["acme/api#5", "alpha/y#2", "zeta/x#1"]


def test_duplicate_assigned_items_listed_once(make_item: ItemFactory) -> None:
    first = make_item("1", number=5, repo="acme/api")
    again = make_item("1", number=5, repo="acme/api", kind=ItemKind.ISSUE)

    board = merge_for_display([first, again], TodoStorage())

    assert len(board.entries) == 1


def test_issue_numbers_are_scoped_by_repository(make_item: ItemFactory) -> None:
    storage = TodoStorage()
    storage.set_status(IssueKey("acme/web", 5), TodoStatus.IN_PROGRESS, NOW)

    board = merge_for_display([make_item("1", number=5, repo="acme/api")], storage)

    assert [str(e.key) for e in board.group(TodoStatus.BACKLOG).entries] == [
        "acme/api#5"
    ]
    assert [str(e.key) for e in board.group(TodoStatus.IN_PROGRESS).entries] == [
        "acme/web#5"
    ]
