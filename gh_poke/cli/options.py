"""Shared CLI option definitions so every command uses the same flags."""

import typer

ORG_ARGUMENT = typer.Argument(
    None, help="GitHub organization (defaults to the first of WORK_ORGS)"
)

NOTIFICATION_LIMIT_OPTION = typer.Option(
    None, "--limit", "-n", help="Items shown in the desktop notification"
)

LIST_LIMIT_OPTION = typer.Option(
    None, "--list-limit", help="Maximum items listed per section"
)

NOTIFY_OPTION = typer.Option(
    True, "--notify/--no-notify", help="Send a desktop notification"
)

STATUS_OPTION = typer.Option(
    None,
    "--status",
    "-s",
    help="New status: backlog, in-progress, blocked or review",
)

NOTE_OPTION = typer.Option(None, "--note", help="Note to append to the issue")

SHOW_OPTION = typer.Option(
    False, "--show", help="Show the to-do list after updating"
)

REMOTE_OPTION = typer.Option(
    True,
    "--remote/--no-remote",
    help="Also set the status:* label on GitHub",
)
