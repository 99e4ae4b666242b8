"""CLI commands showing the GitHub views, the to-do list and notifications."""

import asyncio

import typer

from ..config import PokeConfig
from ..desktop.notifier import send_desktop_notification
from ..desktop.summary import build_feed_summary, build_views_summary
from ..exceptions import PokeError
from ..github_client.client import GitHubClient
from ..todo.board import merge_for_display
from ..todo.store import TodoStore
from ..views.aggregator import ViewAggregator, ViewSet
from ..views.prioritizer import prioritize
from .context import console, load_cli_config
from .options import (
    LIST_LIMIT_OPTION,
    NOTIFICATION_LIMIT_OPTION,
    NOTIFY_OPTION,
    ORG_ARGUMENT,
)
from .render import render_board, render_error, render_feed, render_views


def fetch_views(client: GitHubClient, config: PokeConfig, org: str | None) -> ViewSet:
    """Aggregate the views, exiting with an error message on failure."""
    aggregator = ViewAggregator(client, config)
    try:
        return asyncio.run(aggregator.aggregate(org))
    except PokeError as e:
        render_error(console, str(e))
        raise typer.Exit(1)


def show_todo_list(client: GitHubClient, config: PokeConfig, org: str | None) -> None:
    """Print the to-do board for an organization."""
    storage = TodoStore(config.state_path).load()
    views = fetch_views(client, config, org)
    board = merge_for_display(views.assigned, storage)

    if board.is_empty:
        console.print("No to-do items found.")
        console.print(
            "Use 'gh-poke update org/repo#123 --note \"Your note\"' to add items.",
            markup=False,
        )
        return

    render_board(console, board)


def show(
    org: str | None = ORG_ARGUMENT,
    limit: int | None = NOTIFICATION_LIMIT_OPTION,
    list_limit: int | None = LIST_LIMIT_OPTION,
    notify: bool = NOTIFY_OPTION,
) -> None:
    """Show review requests, assigned issues and mentions.

    Examples:
        gh-poke show
        gh-poke show myorg --limit 5 --no-notify
    """
    config = load_cli_config(notification_limit=limit, listing_limit=list_limit)
    client = GitHubClient(config.github_token)
    views = fetch_views(client, config, org)

    if views.is_empty:
        console.print(f"No items found for {views.organization}", markup=False)
        return

    render_views(console, views, config)

    if notify:
        summary = build_views_summary(views, config.notification_limit)
        if summary:
            send_desktop_notification(*summary)


def todo(org: str | None = ORG_ARGUMENT) -> None:
    """Show assigned and manually tracked issues grouped by status.

    Examples:
        gh-poke todo
        gh-poke todo myorg
    """
    config = load_cli_config()
    client = GitHubClient(config.github_token)
    show_todo_list(client, config, org)


def feed(
    org: str | None = ORG_ARGUMENT,
    limit: int | None = NOTIFICATION_LIMIT_OPTION,
    list_limit: int | None = LIST_LIMIT_OPTION,
    notify: bool = NOTIFY_OPTION,
) -> None:
    """Show unread GitHub notifications, most important first.

    Examples:
        gh-poke feed
        gh-poke feed myorg --no-notify
    """
    config = load_cli_config(notification_limit=limit, listing_limit=list_limit)
    client = GitHubClient(config.github_token)

    try:
        notifications = client.fetch_notifications(org_filter=org)
    except PokeError as e:
        render_error(console, str(e))
        raise typer.Exit(1)

    if not notifications:
        suffix = f" for {org}" if org else ""
        console.print(f"No new notifications{suffix}", markup=False)
        return

    items = prioritize(notifications, config.work_orgs)
    render_feed(console, items, config.listing_limit)

    if notify:
        summary = build_feed_summary(
            items, config.work_orgs, config.notification_limit
        )
        if summary:
            send_desktop_notification(*summary)
