"""Pushing to-do status to GitHub as a ``status:*`` label."""

import logging
from typing import Protocol

from ..keys import IssueKey
from .models import TodoStatus

logger = logging.getLogger(__name__)


class LabelStatusClient(Protocol):
    def set_label_status(
        self, owner: str, repo: str, issue_number: int, status: str
    ) -> bool: ...


class StatusLabelWriter:
    """Mirrors local status changes onto GitHub issue labels."""

    def __init__(self, client: LabelStatusClient):
        self.client = client

    def set_remote_status(self, key: IssueKey, status: TodoStatus) -> bool:
        """Set the ``status:<value>`` label for an issue.

        Returns:
            True if GitHub accepted the change; False otherwise, including for
            keys without an owner, which cannot be addressed on GitHub
        """
        if not key.has_owner:
            logger.warning(
                "Invalid repository format in %s. Use 'owner/repo'", key
            )
            return False
        return self.client.set_label_status(
            key.owner, key.name, key.number, status.value
        )
