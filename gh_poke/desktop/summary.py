"""Title and body text for desktop notifications."""

import math
from collections.abc import Sequence

from ..github_client.models import RemoteItem
from ..views.aggregator import ViewSet

MAX_TITLE_LENGTH = 60


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def shorten(title: str, width: int = MAX_TITLE_LENGTH) -> str:
    """Cut a title to ``width`` characters, ending in an ellipsis."""
    if len(title) <= width:
        return title
    return title[: width - 3] + "..."


def pick_view_items(views: ViewSet, limit: int) -> list[RemoteItem]:
    """Choose the items for a views notification.

    Review requests get half the slots (rounded up); the rest go to assigned
    issues and then to reviewed pull requests.
    """
    if limit <= 0:
        return []
    picked = list(views.to_review[: math.ceil(limit / 2)])
    for section in (views.assigned, views.reviewed):
        remaining = limit - len(picked)
        if remaining <= 0:
            break
        picked.extend(section[:remaining])
    return picked


def build_views_summary(views: ViewSet, limit: int) -> tuple[str, str] | None:
    """Build the notification for the views listing.

    Returns:
        (title, body), or None if there is nothing to notify about
    """
    items = pick_view_items(views, limit)
    if not items:
        return None

    title = (
        f"GitHub: {_plural(len(views.to_review), 'PR')} to review, "
        f"{_plural(len(views.assigned), 'issue')} assigned"
    )
    body = "\n".join(
        f"{'✅' if item.is_pull_request else '📝'} "
        f"[{item.repository_full_name}] {shorten(item.title)}"
        for item in items
    )
    return title, body


def build_feed_summary(
    items: Sequence[RemoteItem], work_orgs: Sequence[str], limit: int
) -> tuple[str, str] | None:
    """Build the notification for the prioritized notification feed.

    Returns:
        (title, body), or None if the feed is empty
    """
    if not items or limit <= 0:
        return None

    work_prefixes = tuple(f"{org}/" for org in work_orgs)
    title = _plural(len(items), "GitHub Notification")
    lines = []
    for item in items[:limit]:
        icon = "🔄" if item.is_pull_request else "💬"
        work = "[WORK] " if item.repository_full_name.startswith(work_prefixes) else ""
        lines.append(
            f"{icon} {work}{item.repository_full_name}: {shorten(item.title)}"
        )
    return title, "\n".join(lines)
