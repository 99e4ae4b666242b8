"""CLI command for updating the status and notes of a tracked issue."""

import typer
from rich.markup import escape

from ..exceptions import PokeError
from ..github_client.client import GitHubClient
from ..keys import parse_issue_key
from ..todo.models import TodoStatus
from ..todo.status_writer import StatusLabelWriter
from ..todo.store import TodoStore
from ..todo.updater import TodoUpdater
from .context import console, load_cli_config
from .options import NOTE_OPTION, REMOTE_OPTION, SHOW_OPTION, STATUS_OPTION
from .render import render_error
from .views import show_todo_list


def _warn_missing_repo_scope(client: GitHubClient) -> None:
    try:
        scopes = client.check_token_scopes()
    except PokeError as e:
        console.print(
            f"⚠️  [yellow]Could not check token scopes: {escape(str(e))}[/yellow]"
        )
        return
    if scopes is not None and "repo" not in scopes:
        console.print(
            "⚠️  [yellow]WARNING: Your token may not have 'repo' scope! "
            "Create a new token at https://github.com/settings/tokens[/yellow]"
        )


def update(
    issue_key: str = typer.Argument(..., help="Issue key, e.g. myorg/repo#42"),
    status: str | None = STATUS_OPTION,
    note: str | None = NOTE_OPTION,
    show: bool = SHOW_OPTION,
    remote: bool = REMOTE_OPTION,
) -> None:
    """Update the status and/or add a note to a tracked issue.

    Notes are appended with today's date; earlier notes are kept. A status
    change is also written to GitHub as a status:<value> label unless
    --no-remote is given.

    Examples:
        gh-poke update myorg/repo#42 --status in-progress
        gh-poke update myorg/repo#42 --note "Working on authentication fix"
        gh-poke update myorg/repo#42 --status blocked --note "Waiting for API access"
    """
    try:
        key = parse_issue_key(issue_key)
        new_status = TodoStatus.parse(status) if status is not None else None
    except PokeError as e:
        render_error(console, str(e))
        raise typer.Exit(1)

    if new_status is None and note is None:
        render_error(console, "Give --status and/or --note to update an issue")
        raise typer.Exit(1)

    config = load_cli_config()
    client = GitHubClient(config.github_token)
    writer = None
    if remote and new_status is not None:
        _warn_missing_repo_scope(client)
        writer = StatusLabelWriter(client)

    updater = TodoUpdater(TodoStore(config.state_path), client=client, writer=writer)
    outcome = updater.update(key, status=new_status, note=note)

    if outcome.remote_updated is True:
        console.print(
            f"Updated GitHub status for {key} to {new_status.value}", markup=False
        )
    elif outcome.remote_updated is False:
        console.print(
            f"⚠️  [yellow]Failed to update GitHub status for {key}[/yellow]"
        )

    if not outcome.saved:
        render_error(console, outcome.error or f"Could not save local data for {key}")
        raise typer.Exit(1)

    suffix = "" if outcome.details_fetched else " (without fetching title)"
    console.print(f"Updated local data for {key}{suffix}", markup=False)

    if show:
        show_todo_list(client, config, None)
    else:
        console.print("\nTip: Use --show to see your updated to-do list")
