"""Deterministic ordering of work items and notifications."""

from collections.abc import Iterable, Sequence

from ..github_client.models import RemoteItem

WORK_ORG_BOOST = 30
DEFAULT_REASON_WEIGHT = 1

# Keys are normalised reasons: lower case with dashes. GitHub notification
# reasons use underscores, the views use dashes.
REASON_WEIGHTS: dict[str, int] = {
    "review-requested": 10,
    "mention": 9,
    "team-mention": 8,
    "assign": 7,
    "subscribed": 5,
    "author": 4,
    "comment": 3,
    # view reasons
    "mentioned": 9,
    "team-review-requested": 8,
    "assigned": 7,
}


def normalize_reason(reason: str) -> str:
    """Normalise a reason so notification and view reasons share a table.

    Example:
        >>> normalize_reason("review_requested")
        'review-requested'
    """
    return reason.strip().lower().replace("_", "-")


def reason_weight(reason: str) -> int:
    return REASON_WEIGHTS.get(normalize_reason(reason), DEFAULT_REASON_WEIGHT)


class Prioritizer:
    """Orders items by reason weight with a boost for work organizations."""

    def __init__(self, work_orgs: Iterable[str] = ()):
        self.work_prefixes = tuple(f"{org}/" for org in work_orgs if org)

    def is_work_item(self, item: RemoteItem) -> bool:
        return item.repository_full_name.startswith(self.work_prefixes)

    def score(self, item: RemoteItem) -> int:
        boost = WORK_ORG_BOOST if self.is_work_item(item) else 0
        return reason_weight(item.reason) + boost

    def sort_key(self, item: RemoteItem) -> tuple[int, int, str]:
        # Higher score first, then pull requests, then repository name
        return (
            -self.score(item),
            0 if item.is_pull_request else 1,
            item.repository_full_name,
        )

    def prioritize(self, items: Iterable[RemoteItem]) -> list[RemoteItem]:
        """Return all items reordered; full ties keep their input order."""
        return sorted(items, key=self.sort_key)


def prioritize(
    items: Iterable[RemoteItem], work_orgs: Sequence[str] = ()
) -> list[RemoteItem]:
    """Order items by priority for the given work organizations."""
    return Prioritizer(work_orgs).prioritize(items)
