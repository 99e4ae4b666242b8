"""Pydantic models for items returned by the GitHub search and notification APIs.

API Reference: https://docs.github.com/en/rest/search/search#search-issues-and-pull-requests
"""

from enum import Enum
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field

from ..keys import IssueKey, make_issue_key


class ItemKind(str, Enum):
    """Kind of work item, as reported in GitHub notification subjects."""

    PULL_REQUEST = "PullRequest"
    ISSUE = "Issue"
    DISCUSSION = "Discussion"
    OTHER = "Other"

    @classmethod
    def from_subject_type(cls, value: str | None) -> "ItemKind":
        for kind in cls:
            if kind.value == value:
                return kind
        return cls.OTHER


class RemoteItem(BaseModel):
    """A work item as reported by GitHub.

    The same logical item can be returned by several queries in one run; ``id``
    is the only field used to tell duplicates apart.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque identifier, unique per remote item")
    number: int = Field(..., ge=0, description="Issue/PR number within the repository")
    title: str = Field(..., description="Title of the issue or pull request")
    url: str = Field(..., description="Web URL of the item")
    repository_full_name: str = Field(..., description="Repository as owner/name")
    kind: ItemKind = Field(ItemKind.ISSUE, description="Pull request, issue, ...")
    reason: str = Field("", description="Why the item surfaced for the user")
    labels: frozenset[str] = Field(
        default_factory=frozenset, description="Label names attached to the item"
    )
    state: str = Field("open", description="Current state: 'open' or 'closed'")

    @property
    def is_pull_request(self) -> bool:
        return self.kind is ItemKind.PULL_REQUEST

    @property
    def key(self) -> IssueKey:
        return make_issue_key(self.repository_full_name, self.number)


def repository_from_url(url: str) -> str:
    """Extract ``owner/name`` from a GitHub web or API URL.

    Example:
        >>> repository_from_url("https://api.github.com/repos/acme/api/issues/3")
        'acme/api'
        >>> repository_from_url("https://github.com/acme/api/pull/7")
        'acme/api'
    """
    parts = [part for part in urlparse(url).path.split("/") if part]
    if parts and parts[0] == "repos":
        parts = parts[1:]
    if len(parts) < 2:
        raise ValueError(f"Cannot determine repository from URL '{url}'")
    return f"{parts[0]}/{parts[1]}"


def number_from_url(url: str | None) -> int | None:
    """Trailing issue/PR number of a URL, or None if there is none."""
    if not url:
        return None
    tail = url.rstrip("/").rsplit("/", 1)[-1]
    return int(tail) if tail.isascii() and tail.isdigit() else None


def api_url_to_web_url(url: str) -> str:
    """Rewrite a REST API URL for an issue or pull request to its web URL."""
    return url.replace("api.github.com/repos/", "github.com/").replace(
        "/pulls/", "/pull/"
    )
