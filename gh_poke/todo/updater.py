"""Status and note updates for a single tracked issue."""

import logging
from datetime import datetime
from typing import Protocol

import requests
from pydantic import BaseModel

from ..exceptions import StorageWriteError, TransportError
from ..github_client.models import RemoteItem
from ..keys import IssueKey
from .models import TodoAnnotation, TodoStatus, TodoStorage
from .status_writer import StatusLabelWriter
from .store import TodoStore

logger = logging.getLogger(__name__)

# Failures of the remote steps; none of them may stop the local write.
REMOTE_ERRORS = (ValueError, TransportError, requests.RequestException)


class ItemDetailsClient(Protocol):
    def get_item(self, owner: str, repo: str, issue_number: int) -> RemoteItem: ...


class UpdateOutcome(BaseModel):
    """What happened remotely and locally. The two are independent."""

    key: str
    remote_updated: bool | None = None
    details_fetched: bool = False
    saved: bool = False
    annotation: TodoAnnotation | None = None
    error: str | None = None


class TodoUpdater:
    """Applies a status and/or note to an issue.

    The remote label push and the title lookup are best effort; the local
    change is always attempted even when they fail.
    """

    def __init__(
        self,
        store: TodoStore,
        client: ItemDetailsClient | None = None,
        writer: StatusLabelWriter | None = None,
    ):
        self.store = store
        self.client = client
        self.writer = writer

    def _fetch_details(self, key: IssueKey) -> RemoteItem | None:
        if self.client is None or not key.has_owner:
            return None
        try:
            return self.client.get_item(key.owner, key.name, key.number)
        except REMOTE_ERRORS as e:
            logger.warning("Error fetching issue details for %s: %s", key, e)
            return None

    def _push_status(self, key: IssueKey, status: TodoStatus) -> bool:
        try:
            return self.writer.set_remote_status(key, status)
        except REMOTE_ERRORS as e:
            logger.warning("Error updating GitHub status for %s: %s", key, e)
            return False

    def update(
        self,
        key: IssueKey,
        status: TodoStatus | None = None,
        note: str | None = None,
        now: datetime | None = None,
    ) -> UpdateOutcome:
        """Update an issue's status and/or append a note.

        Args:
            key: Issue to update
            status: New status, also pushed to GitHub when a writer is set
            note: Note to append
            now: Timestamp for the change; defaults to the current time

        Returns:
            UpdateOutcome describing the remote and local results
        """
        if status is None and note is None:
            raise ValueError("Nothing to update: give a status and/or a note")

        now = now or datetime.now()
        outcome = UpdateOutcome(key=str(key))

        if status is not None and self.writer is not None:
            outcome.remote_updated = self._push_status(key, status)

        details = self._fetch_details(key)
        outcome.details_fetched = details is not None

        def apply(storage: TodoStorage) -> TodoAnnotation:
            if status is not None:
                storage.set_status(key, status, now)
            if note is not None:
                storage.append_note(key, note, now)
            if details is not None:
                storage.cache_remote_fields(key, details.title, details.url)
            return storage.issues[str(key)]

        try:
            outcome.annotation = self.store.update(apply)
            outcome.saved = True
        except StorageWriteError as e:
            logger.error("%s", e)
            outcome.error = str(e)

        return outcome
