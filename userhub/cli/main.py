"""
UserHub CLI - Command-line interface for authentication and invitations.

Usage:
    userhub login           Create an API session with username/password
    userhub exchange        Exchange a provider token for a session token
    userhub invite          Send a join-organization invitation

Configuration is read from USERHUB_* environment variables or a .env file.
"""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from .commands import invites, sessions

# Create the main Typer app
app = typer.Typer(
    name="userhub",
    help="Client for the UserHub identity and membership API",
    add_completion=False,
)

# Create a Rich console for pretty output
console = Console()

# Register top-level commands
app.command(name="login")(sessions.login_command)
app.command(name="exchange")(sessions.exchange_command)
app.command(name="invite")(invites.invite_command)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP activity"),
) -> None:
    """
    UserHub - authenticate and invite users from the command line.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
