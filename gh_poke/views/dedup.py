"""Merging of personal and team review requests."""

from collections.abc import Iterable

from ..github_client.models import RemoteItem


def merge_reviews(
    personal: Iterable[RemoteItem], team: Iterable[RemoteItem]
) -> list[RemoteItem]:
    """Combine personal and team review requests without duplicates.

    Personal requests come first, so a pull request requested from the user
    directly and from one of their teams keeps its personal position. Items
    are matched by ``id`` only; issue numbers repeat across repositories.

    Args:
        personal: Review requests addressed to the user
        team: Review requests addressed to the user's teams

    Returns:
        Merged list in first-seen order
    """
    seen_ids: set[str] = set()
    merged: list[RemoteItem] = []

    for item in (*personal, *team):
        if item.id in seen_ids:
            continue
        seen_ids.add(item.id)
        merged.append(item)

    return merged
