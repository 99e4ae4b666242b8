"""Main CLI entry point."""

import logging

import typer

from .context import console
from .update import update
from .views import feed, show, todo

app = typer.Typer(
    name="gh-poke",
    help="GitHub review requests, assigned issues and a local to-do list",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def main(
    debug: bool = typer.Option(
        False, "--debug", help="Show debug information, including search queries"
    ),
) -> None:
    """GitHub review requests, assigned issues and a local to-do list."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


# All commands support -h shorthand via context_settings
app.command(name="show", context_settings={"help_option_names": ["-h", "--help"]})(
    show
)
app.command(name="todo", context_settings={"help_option_names": ["-h", "--help"]})(
    todo
)
app.command(name="update", context_settings={"help_option_names": ["-h", "--help"]})(
    update
)
app.command(name="feed", context_settings={"help_option_names": ["-h", "--help"]})(
    feed
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from gh_poke import __version__

    console.print(f"gh-poke v{__version__}")


if __name__ == "__main__":
    app()
