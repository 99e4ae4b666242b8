"""Merging of live assigned issues with the local to-do list."""

from collections.abc import Iterable

from pydantic import BaseModel, Field

from ..github_client.models import RemoteItem
from ..keys import IssueKey, parse_issue_key
from .models import STATUS_DISPLAY_ORDER, TodoAnnotation, TodoStatus, TodoStorage


class TodoEntry(BaseModel):
    """One line of the to-do board."""

    key: IssueKey
    status: TodoStatus
    notes: str = ""
    title: str | None = None
    url: str | None = None
    cached_title: str | None = None
    item: RemoteItem | None = Field(
        None, description="Live item, or None for manually tracked entries"
    )

    @property
    def manual(self) -> bool:
        """True when the entry is not in the live assigned view."""
        return self.item is None


class TodoGroup(BaseModel):
    status: TodoStatus
    entries: list[TodoEntry] = Field(default_factory=list)


class TodoBoard(BaseModel):
    """To-do entries grouped by status, in display order."""

    groups: list[TodoGroup] = Field(default_factory=list)

    def group(self, status: TodoStatus) -> TodoGroup:
        return next(group for group in self.groups if group.status is status)

    @property
    def entries(self) -> list[TodoEntry]:
        return [entry for group in self.groups for entry in group.entries]

    @property
    def is_empty(self) -> bool:
        return not self.entries


def _live_entry(item: RemoteItem, annotation: TodoAnnotation | None) -> TodoEntry:
    if annotation is None:
        return TodoEntry(
            key=item.key,
            status=TodoStatus.BACKLOG,
            title=item.title,
            url=item.url,
            item=item,
        )
    return TodoEntry(
        key=item.key,
        status=annotation.status,
        notes=annotation.notes,
        title=item.title,
        url=item.url,
        cached_title=annotation.cached_title,
        item=item,
    )


def _manual_entry(key: IssueKey, annotation: TodoAnnotation) -> TodoEntry:
    return TodoEntry(
        key=key,
        status=annotation.status,
        notes=annotation.notes,
        title=annotation.cached_title,
        url=annotation.cached_url,
        cached_title=annotation.cached_title,
    )


def merge_for_display(
    assigned: Iterable[RemoteItem], storage: TodoStorage
) -> TodoBoard:
    """Overlay stored status and notes on the assigned view.

    Assigned items take their stored status (backlog if untracked). Stored
    issues missing from the assigned view, for example closed or manually
    added ones, are listed after them using only their cached title and URL.

    Args:
        assigned: Live "assigned" view, in display order
        storage: Local to-do list

    Returns:
        TodoBoard grouped in-progress, blocked, review, backlog
    """
    groups = {status: TodoGroup(status=status) for status in STATUS_DISPLAY_ORDER}
    assigned_keys: set[str] = set()

    for item in assigned:
        key = str(item.key)
        if key in assigned_keys:
            continue
        assigned_keys.add(key)
        entry = _live_entry(item, storage.get(key))
        groups[entry.status].entries.append(entry)

    for key in sorted(storage.issues):
        if key in assigned_keys:
            continue
        entry = _manual_entry(parse_issue_key(key), storage.issues[key])
        groups[entry.status].entries.append(entry)

    return TodoBoard(groups=[groups[status] for status in STATUS_DISPLAY_ORDER])
