"""Pydantic models for the local to-do list."""

import logging
from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..exceptions import InvalidStatusError
from ..keys import IssueKey

logger = logging.getLogger(__name__)

NOTE_SEPARATOR = "\n\n"


class TodoStatus(str, Enum):
    """Status of a tracked issue."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    BLOCKED = "blocked"
    REVIEW = "review"

    @classmethod
    def parse(cls, value: str) -> "TodoStatus":
        """Parse user input into a status.

        Raises:
            InvalidStatusError: If the value is not a known status
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise InvalidStatusError(
                f"Invalid status '{value}'. Use one of: {allowed}"
            ) from None


# Order of the status groups on the to-do board
STATUS_DISPLAY_ORDER = (
    TodoStatus.IN_PROGRESS,
    TodoStatus.BLOCKED,
    TodoStatus.REVIEW,
    TodoStatus.BACKLOG,
)


class TodoAnnotation(BaseModel):
    """Locally owned status and notes for one issue.

    Stored with the field names ``status``, ``notes``, ``lastUpdated``,
    ``title`` and ``url``. The title and URL are copies of remote data kept so
    that an issue stays readable after it drops out of the live views.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    status: TodoStatus = Field(TodoStatus.BACKLOG, description="Tracking status")
    notes: str = Field("", description="Timestamped notes, oldest first")
    last_updated: datetime | None = Field(
        None, alias="lastUpdated", description="Time of the last local change"
    )
    cached_title: str | None = Field(
        None, alias="title", description="Issue title at the last successful fetch"
    )
    cached_url: str | None = Field(
        None, alias="url", description="Issue URL at the last successful fetch"
    )

    @field_validator("status", mode="before")
    @classmethod
    def _default_unknown_status(cls, value: Any) -> Any:
        if value is None:
            return TodoStatus.BACKLOG
        if isinstance(value, str) and value not in {s.value for s in TodoStatus}:
            logger.warning("Unknown stored status '%s', using backlog", value)
            return TodoStatus.BACKLOG
        return value

    @field_validator("notes", mode="before")
    @classmethod
    def _missing_notes_are_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_record(self) -> dict[str, Any]:
        """Serialise with the persisted field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def format_note(note: str, timestamp: datetime) -> str:
    """Prefix a note with its date.

    Example:
        >>> format_note("Waiting for API access", datetime(2024, 3, 1, 9, 30))
        '[2024-03-01] Waiting for API access'
    """
    return f"[{timestamp.date().isoformat()}] {note}"


class TodoStorage(BaseModel):
    """All locally tracked issues, keyed by ``owner/repo#number``."""

    model_config = ConfigDict(extra="ignore")

    issues: dict[str, TodoAnnotation] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.issues)

    def __contains__(self, key: object) -> bool:
        return str(key) in self.issues

    def get(self, key: IssueKey | str) -> TodoAnnotation | None:
        return self.issues.get(str(key))

    def _get_or_create(self, key: IssueKey, timestamp: datetime) -> TodoAnnotation:
        annotation = self.issues.get(str(key))
        if annotation is None:
            annotation = TodoAnnotation(last_updated=timestamp)
            self.issues[str(key)] = annotation
        return annotation

    def append_note(
        self, key: IssueKey, note: str, timestamp: datetime
    ) -> TodoAnnotation:
        """Append a dated note, creating a backlog entry if needed.

        Existing notes are never replaced or shortened.
        """
        annotation = self._get_or_create(key, timestamp)
        entry = format_note(note, timestamp)
        if annotation.notes:
            annotation.notes = f"{annotation.notes}{NOTE_SEPARATOR}{entry}"
        else:
            annotation.notes = entry
        annotation.last_updated = timestamp
        return annotation

    def set_status(
        self,
        key: IssueKey,
        status: TodoStatus,
        timestamp: datetime | None = None,
    ) -> TodoAnnotation:
        """Set the status of an issue, leaving its notes untouched."""
        timestamp = timestamp or datetime.now()
        annotation = self._get_or_create(key, timestamp)
        annotation.status = status
        annotation.last_updated = timestamp
        return annotation

    def cache_remote_fields(
        self, key: IssueKey, title: str | None, url: str | None
    ) -> TodoAnnotation | None:
        """Remember the remote title and URL of an already tracked issue.

        Returns:
            The updated annotation, or None if the issue is not tracked
        """
        annotation = self.issues.get(str(key))
        if annotation is None:
            return None
        if title is not None:
            annotation.cached_title = title
        if url is not None:
            annotation.cached_url = url
        return annotation

    def to_record(self) -> dict[str, Any]:
        return {
            "issues": {
                key: annotation.to_record() for key, annotation in self.issues.items()
            }
        }
