"""GitHub API client using PyGitHub."""

import logging
import time
from typing import Any

import requests
from github import Github
from github.GithubException import (
    GithubException,
    RateLimitExceededException,
    UnknownObjectException,
)
from github.Issue import Issue
from github.Notification import Notification
from github.Repository import Repository
from rich.console import Console

from ..exceptions import TransportError
from .models import (
    ItemKind,
    RemoteItem,
    api_url_to_web_url,
    number_from_url,
    repository_from_url,
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)

# Results per search; the search API returns at most 100 items per page.
SEARCH_LIMIT = 100
NOTIFICATION_LIMIT = 50
STATUS_LABEL_PREFIX = "status:"

# Sleep until reset below this many remaining requests. The search bucket
# allows 30 requests a minute.
LOW_RATE_LIMIT = {"core": 10, "search": 3}

NOTIFICATION_SUBJECT_TYPES = {"PullRequest", "Issue", "Discussion"}
PRIORITY_REASONS = {
    "mention",
    "team_mention",
    "review_requested",
    "assign",
    "subscribed",
}


def _transport_error(error: GithubException) -> TransportError:
    body = error.data if isinstance(error.data, str) else str(error.data or "")
    return TransportError(error.status, body)


def _network_error(error: requests.RequestException) -> TransportError:
    return TransportError(None, f"Connection failed: {error}")


def is_status_label(name: str) -> bool:
    return name.startswith(STATUS_LABEL_PREFIX)


class GitHubClient:
    """GitHub API client with rate limiting and authentication."""

    def __init__(self, token: str):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token
        """
        if not token:
            raise ValueError(
                "GitHub token is required. Set GITHUB_TOKEN environment variable."
            )
        self.token = token
        self.github = Github(self.token)

    def _check_rate_limit(self, resource: str = "core") -> None:
        """Check rate limit and sleep if necessary.

        Args:
            resource: Rate limit bucket to check, ``core`` or ``search``
        """
        try:
            rate = getattr(self.github.get_rate_limit().resources, resource)
            remaining = rate.remaining
            logger.debug(
                "GitHub API %s rate limit: %s requests remaining", resource, remaining
            )

            if remaining < LOW_RATE_LIMIT[resource]:
                reset_time = rate.reset.timestamp()
                sleep_time = reset_time - time.time() + 1
                console.print(
                    f"Rate limit low, sleeping for {sleep_time:.1f} seconds..."
                )
                time.sleep(sleep_time)

        except Exception as e:
            # Rate limit lookups are advisory only
            logger.debug("Rate limit check failed: %s", e)

    def _convert_issue(
        self, github_issue: Issue, repository_full_name: str | None = None
    ) -> RemoteItem:
        """Convert PyGitHub issue to our model.

        Only attributes present in search payloads are read, so converting a
        search result never triggers an extra API request.
        """
        url = github_issue.html_url
        kind = ItemKind.PULL_REQUEST if "/pull/" in url else ItemKind.ISSUE
        return RemoteItem(
            id=str(github_issue.id),
            number=github_issue.number,
            title=github_issue.title,
            url=url,
            repository_full_name=repository_full_name or repository_from_url(url),
            kind=kind,
            labels=frozenset(label.name for label in github_issue.labels),
            state=github_issue.state,
        )

    def _convert_notification(self, notification: Notification) -> RemoteItem | None:
        """Convert a PyGitHub notification to our model.

        Returns:
            RemoteItem, or None when the subject has no issue/PR number
        """
        subject = notification.subject
        number = number_from_url(subject.url)
        if number is None:
            logger.debug(
                "Skipping notification %s without item number", notification.id
            )
            return None

        repository_full_name = notification.repository.full_name
        return RemoteItem(
            id=str(notification.id),
            number=number,
            title=subject.title,
            url=api_url_to_web_url(subject.url),
            repository_full_name=repository_full_name,
            kind=ItemKind.from_subject_type(subject.type),
            reason=notification.reason,
        )

    def search(self, query: str, limit: int = SEARCH_LIMIT) -> list[RemoteItem]:
        """Run an issue/PR search query.

        Args:
            query: GitHub search query string
            limit: Maximum number of items to return

        Returns:
            List of RemoteItem objects in the order GitHub returned them

        Raises:
            TransportError: If GitHub answers with an error status
        """
        self._check_rate_limit("search")
        logger.debug("Searching: %s", query)

        try:
            items = []
            for i, github_issue in enumerate(self.github.search_issues(query)):
                if i >= limit:
                    break
                items.append(self._convert_issue(github_issue))
            return items

        except RateLimitExceededException:
            console.print("Rate limit exceeded, waiting...")
            time.sleep(60)
            return self.search(query, limit=limit)
        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

    def fetch_notifications(
        self, org_filter: str | None = None, limit: int = NOTIFICATION_LIMIT
    ) -> list[RemoteItem]:
        """Fetch unread notifications worth the user's attention.

        A notification is kept if its subject is a pull request, issue or
        discussion, or if its reason is one of the priority reasons.

        Args:
            org_filter: Only keep notifications from this organization
            limit: Maximum number of notifications to inspect

        Returns:
            List of RemoteItem objects, reason set to the notification reason

        Raises:
            TransportError: If GitHub answers with an error status
        """
        self._check_rate_limit()

        try:
            items = []
            notifications = self.github.get_user().get_notifications()
            for i, notification in enumerate(notifications):
                if i >= limit:
                    break
                if not notification.unread:
                    continue
                if (
                    notification.subject.type not in NOTIFICATION_SUBJECT_TYPES
                    and notification.reason not in PRIORITY_REASONS
                ):
                    continue
                if org_filter and not notification.repository.full_name.startswith(
                    f"{org_filter}/"
                ):
                    continue

                item = self._convert_notification(notification)
                if item is not None:
                    items.append(item)
            return items

        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

    def check_token_scopes(self) -> list[str] | None:
        """Return the OAuth scopes granted to the token, if GitHub reports them."""
        try:
            self.github.get_user().login
        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

        scopes: Any = self.github.oauth_scopes
        return list(scopes) if scopes is not None else None

    def get_repository(self, owner: str, repo: str) -> Repository:
        """Get repository object."""
        try:
            return self.github.get_repo(f"{owner}/{repo}")
        except UnknownObjectException:
            raise ValueError(f"Repository {owner}/{repo} not found")

    def get_item(self, owner: str, repo: str, issue_number: int) -> RemoteItem:
        """Get a single issue or pull request.

        Raises:
            ValueError: If repository or issue not found
            TransportError: For other API errors
        """
        self._check_rate_limit()

        try:
            repository = self.get_repository(owner, repo)
            github_issue = repository.get_issue(issue_number)
            return self._convert_issue(
                github_issue, repository_full_name=f"{owner}/{repo}"
            )
        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")
        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

    def get_issue_labels(self, owner: str, repo: str, issue_number: int) -> list[str]:
        """Get current labels for an issue.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number

        Returns:
            List of current label names

        Raises:
            ValueError: If repository or issue not found
            TransportError: For other API errors
        """
        self._check_rate_limit()

        try:
            repository = self.get_repository(owner, repo)
            github_issue = repository.get_issue(issue_number)

            return [label.name for label in github_issue.labels]

        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")
        except RateLimitExceededException:
            console.print("Rate limit exceeded during label fetch, waiting...")
            time.sleep(60)
            return self.get_issue_labels(owner, repo, issue_number)
        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

    def update_issue_labels(
        self, owner: str, repo: str, issue_number: int, labels: list[str]
    ) -> bool:
        """Update issue labels by replacing all current labels.

        Args:
            owner: Repository owner
            repo: Repository name
            issue_number: Issue number
            labels: List of label names to set on the issue

        Returns:
            True if successful

        Raises:
            ValueError: If repository or issue not found
            TransportError: For other API errors
        """
        self._check_rate_limit()

        try:
            repository = self.get_repository(owner, repo)
            github_issue = repository.get_issue(issue_number)

            # Set new labels (this replaces all existing labels)
            github_issue.set_labels(*labels)

            logger.debug("Updated labels for issue #%s: %s", issue_number, labels)
            return True

        except UnknownObjectException:
            raise ValueError(f"Issue #{issue_number} not found in {owner}/{repo}")
        except RateLimitExceededException:
            console.print("Rate limit exceeded during label update, waiting...")
            time.sleep(60)
            return self.update_issue_labels(owner, repo, issue_number, labels)
        except GithubException as e:
            raise _transport_error(e) from e
        except requests.RequestException as e:
            raise _network_error(e) from e

    def set_label_status(
        self, owner: str, repo: str, issue_number: int, status: str
    ) -> bool:
        """Replace any ``status:*`` label on an issue with ``status:<status>``.

        This is a read-modify-write of the label set and is not atomic on
        GitHub's side: a label change made by someone else between the read and
        the write is lost.

        Returns:
            True if the labels were updated, False on any failure
        """
        try:
            current = self.get_issue_labels(owner, repo, issue_number)
            labels = [name for name in current if not is_status_label(name)]
            labels.append(f"{STATUS_LABEL_PREFIX}{status}")
            return self.update_issue_labels(owner, repo, issue_number, labels)
        except (ValueError, TransportError) as e:
            logger.warning(
                "Error updating status label on %s/%s#%s: %s",
                owner,
                repo,
                issue_number,
                e,
            )
            return False
