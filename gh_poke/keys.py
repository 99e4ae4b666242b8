"""Issue keys joining remote items with local to-do annotations.

A key is the pair ``(repository, number)`` written as ``owner/repo#123``.
Numbers are only unique within a repository, so the repository part is always
required. Manually tracked entries may use a repository without an owner
(``notes#4``); such keys are valid locally but cannot be sent to GitHub.
"""

import re
from typing import NamedTuple

from .exceptions import MalformedKeyError

KEY_SEPARATOR = "#"
_NUMBER_PATTERN = re.compile(r"[0-9]+")


class IssueKey(NamedTuple):
    """Identity of an issue or pull request across remote and local state."""

    repository: str
    number: int

    @property
    def owner(self) -> str | None:
        """Owner part of the repository, or None for owner-less keys."""
        if "/" not in self.repository:
            return None
        return self.repository.split("/", 1)[0]

    @property
    def name(self) -> str:
        """Repository name without the owner."""
        return self.repository.split("/", 1)[-1]

    @property
    def has_owner(self) -> bool:
        return self.owner is not None and bool(self.name)

    def __str__(self) -> str:
        return f"{self.repository}{KEY_SEPARATOR}{self.number}"


def make_issue_key(repository: str, number: int) -> IssueKey:
    """Build a key from a full repository name and an issue number.

    Raises:
        MalformedKeyError: If the repository is empty or contains ``#``, or the
            number is negative
    """
    if not repository or KEY_SEPARATOR in repository:
        raise MalformedKeyError(f"Invalid repository '{repository}' for issue key")
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise MalformedKeyError(f"Invalid issue number '{number}' for issue key")
    return IssueKey(repository, number)


def format_issue_key(owner: str, repo: str, number: int) -> str:
    """Format ``owner/repo#number``.

    Example:
        >>> format_issue_key("acme", "api", 42)
        'acme/api#42'
    """
    return str(make_issue_key(f"{owner}/{repo}", number))


def parse_issue_key(text: str) -> IssueKey:
    """Parse ``owner/repo#number`` into an IssueKey.

    Args:
        text: Key as typed by the user or stored on disk

    Returns:
        IssueKey for the text

    Raises:
        MalformedKeyError: If the separator is missing, the repository part is
            empty, or the number is not a non-negative integer
    """
    if KEY_SEPARATOR not in text:
        raise MalformedKeyError(
            f"Invalid issue key '{text}'. Use 'owner/repo#number'"
        )

    repository, number_text = text.rsplit(KEY_SEPARATOR, 1)
    if not repository:
        raise MalformedKeyError(f"Missing repository in issue key '{text}'")
    if not _NUMBER_PATTERN.fullmatch(number_text):
        raise MalformedKeyError(
            f"Invalid issue number in key '{text}'. Use 'owner/repo#123'"
        )

    return make_issue_key(repository, int(number_text))
