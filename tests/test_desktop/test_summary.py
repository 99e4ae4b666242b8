"""Tests for desktop notification text."""

from gh_poke.desktop.summary import (
    build_feed_summary,
    build_views_summary,
    pick_view_items,
    shorten,
)
from gh_poke.github_client.models import ItemKind
from gh_poke.views.aggregator import ViewSet

from ..conftest import ItemFactory

PR = ItemKind.PULL_REQUEST


def test_shorten() -> None:
    assert shorten("short") == "short"
    assert shorten("x" * 60) == "x" * 60
    long = shorten("y" * 80)
    assert len(long) == 60
    assert long.endswith("...")


class TestPickViewItems:
    """Test slot allocation between views."""

    def test_review_requests_get_half_rounded_up(self, make_item: ItemFactory) -> None:
        views = ViewSet(
            organization="acme",
            to_review=[make_item(str(i), kind=PR) for i in range(1, 6)],
            assigned=[make_item(str(i)) for i in range(10, 15)],
        )

        picked = pick_view_items(views, 5)

        assert [item.id for item in picked] == ["1", "2", "3", "10", "11"]

    def test_spare_slots_go_to_reviewed(self, make_item: ItemFactory) -> None:
        views = ViewSet(
            organization="acme",
            to_review=[make_item("1", kind=PR)],
            assigned=[make_item("10")],
            reviewed=[make_item("20", kind=PR), make_item("21", kind=PR)],
        )

        picked = pick_view_items(views, 4)

        assert [item.id for item in picked] == ["1", "10", "20", "21"]

    def test_zero_limit(self, make_item: ItemFactory) -> None:
        views = ViewSet(organization="acme", assigned=[make_item("1")])

        assert pick_view_items(views, 0) == []


class TestBuildViewsSummary:
    """Test build_views_summary."""

    def test_title_and_lines(self, make_item: ItemFactory) -> None:
        views = ViewSet(
            organization="acme",
            to_review=[make_item("1", kind=PR, repo="acme/web", title="Add login")],
            assigned=[
                make_item("10", title="Crash on start"),
                make_item("11", title="Typo"),
            ],
        )

        title, body = build_views_summary(views, 10)

        assert title == "GitHub: 1 PR to review, 2 issues assigned"
        assert body.splitlines() == [
            "✅ [acme/web] Add login",
            "📝 [acme/api] Crash on start",
            "📝 [acme/api] Typo",
        ]

    def test_nothing_to_notify(self) -> None:
        assert build_views_summary(ViewSet(organization="acme"), 10) is None


class TestBuildFeedSummary:
    """Test build_feed_summary."""

    def test_marks_work_items(self, make_item: ItemFactory) -> None:
        items = [
            make_item("1", kind=PR, repo="acme/api", title="Review me"),
            make_item("2", repo="other/lib", title="Question"),
            make_item("3", repo="acmecorp/lib", title="Not work"),
        ]

        title, body = build_feed_summary(items, ["acme"], limit=10)

        assert title == "3 GitHub Notifications"
        assert body.splitlines() == [
            "🔄 [WORK] acme/api: Review me",
            "💬 other/lib: Question",
            "💬 acmecorp/lib: Not work",
        ]

    def test_limit(self, make_item: ItemFactory) -> None:
        items = [make_item(str(i)) for i in range(1, 5)]

        title, body = build_feed_summary(items, [], limit=2)

        assert title == "4 GitHub Notifications"
        assert len(body.splitlines()) == 2

    def test_single_notification(self, make_item: ItemFactory) -> None:
        title, _ = build_feed_summary([make_item("1")], [], limit=5)

        assert title == "1 GitHub Notification"

    def test_empty(self) -> None:
        assert build_feed_summary([], ["acme"], limit=10) is None
