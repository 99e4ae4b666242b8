"""Terminal rendering of views, the to-do board and the notification feed."""

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from ..config import PokeConfig
from ..github_client.models import RemoteItem
from ..todo.board import TodoBoard, TodoEntry
from ..todo.models import TodoStatus
from ..views.aggregator import ViewSet

CATEGORY_ICONS = {
    "to-review": "✅",
    "reviewed": "👍",
    "done": "✓",
}

STATUS_ICONS = {
    TodoStatus.IN_PROGRESS: "🟨",
    TodoStatus.BLOCKED: "🟥",
    TodoStatus.REVIEW: "🟦",
    TodoStatus.BACKLOG: "⬜",
}

STATUS_HEADINGS = {
    TodoStatus.IN_PROGRESS: "In Progress",
    TodoStatus.BLOCKED: "Blocked",
    TodoStatus.REVIEW: "Ready for Review",
    TodoStatus.BACKLOG: "Backlog",
}


def _limit(items: Sequence[RemoteItem], limit: int | None) -> Sequence[RemoteItem]:
    return items if limit is None else items[:limit]


def _indent_notes(notes: str) -> str:
    return "     " + notes.replace("\n", "\n     ")


def render_item(console: Console, item: RemoteItem, category: str) -> None:
    icon = CATEGORY_ICONS.get(category, "🔄" if item.is_pull_request else "📝")
    console.print(f"{icon} [{item.repository_full_name}] {item.title}", markup=False)
    console.print(f"   #{item.number} • {category} • {item.url}\n", markup=False)


def _render_section(
    console: Console,
    heading: str,
    items: Sequence[RemoteItem],
    category: str,
    limit: int | None,
) -> None:
    if not items:
        return
    console.print(f"\n[bold]{heading}[/bold]\n")
    for item in _limit(items, limit):
        render_item(console, item, category)


def render_views(console: Console, views: ViewSet, config: PokeConfig) -> None:
    """Print every view, review requests first."""
    _render_section(
        console,
        f"🔥 {len(views.to_review)} Pull Requests need your review:",
        views.to_review,
        "to-review",
        config.listing_limit,
    )
    _render_section(
        console,
        f"📋 {len(views.assigned)} Issues assigned to you:",
        views.assigned,
        "assigned",
        config.listing_limit,
    )
    _render_section(
        console,
        f"✓ {len(views.done)} Issues recently completed:",
        views.done,
        "done",
        config.recent_limit,
    )
    _render_section(
        console,
        f"👍 {len(views.reviewed)} Pull Requests you've reviewed:",
        views.reviewed,
        "reviewed",
        config.recent_limit,
    )
    _render_section(
        console,
        f"💬 {len(views.mentioned)} Pull Requests where you're mentioned:",
        views.mentioned,
        "mentioned",
        config.listing_limit,
    )

    if views.assigned:
        console.print(
            "\nTip: Use 'gh-poke todo' to see issues as a to-do list "
            "with status tracking"
        )


def render_entry(console: Console, entry: TodoEntry) -> None:
    icon = STATUS_ICONS[entry.status]
    if entry.title:
        console.print(f"{icon} [{entry.key.repository}] {entry.title}", markup=False)
    else:
        console.print(f"{icon} {entry.key}", markup=False)

    details = [f"#{entry.key.number}", entry.status.value]
    if entry.url:
        details.append(entry.url)
    console.print("   " + " • ".join(details), markup=False)

    stale_title = entry.cached_title and entry.cached_title != entry.title
    if entry.item is not None and stale_title:
        console.print(f"   💡 Title: {entry.cached_title}", markup=False)
    if entry.notes:
        console.print(f"   📝 Notes:\n{_indent_notes(entry.notes)}", markup=False)
    console.print("")


def render_board(console: Console, board: TodoBoard) -> None:
    """Print the to-do board grouped by status."""
    console.print("\n📋 [bold]Your To-Do List:[/bold]\n")
    for group in board.groups:
        if not group.entries:
            continue
        heading = STATUS_HEADINGS[group.status]
        console.print(
            f"\n{STATUS_ICONS[group.status]} [bold]{heading} "
            f"({len(group.entries)}):[/bold]\n"
        )
        for entry in group.entries:
            render_entry(console, entry)

    console.print("\nCommands:")
    console.print(
        "  Update status: gh-poke update org/repo#123 --status in-progress",
        markup=False,
    )
    console.print(
        '  Add note:      gh-poke update org/repo#123 --note "Working on this now"',
        markup=False,
    )


def render_feed(
    console: Console, items: Sequence[RemoteItem], limit: int | None = None
) -> None:
    """Print prioritized notifications."""
    console.print(f"{len(items)} important notification(s):\n")
    for item in _limit(items, limit):
        icon = "🔄" if item.is_pull_request else "💬"
        console.print(f"{icon} [{item.repository_full_name}] {item.title}", markup=False)
        console.print(f"   {item.reason} • {item.url}\n", markup=False)


def render_error(console: Console, message: str) -> None:
    console.print(f"❌ [red]Error: {escape(message)}[/red]")
