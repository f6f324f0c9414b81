"""
userhub login / exchange commands - obtain session tokens from the CLI.
"""

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...auth.models import SessionToken
from ...client import InvitationClient
from ...exceptions import UserHubError

console = Console()


def login_command(
    username: str = typer.Argument(..., help="Account username"),
    password: Optional[str] = typer.Option(
        None,
        "--password",
        "-p",
        help="Account password (will prompt if not provided)",
        prompt=True,
        hide_input=True,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Print only the token",
    ),
) -> None:
    """
    Create an API session with username and password.

    Example:
        $ userhub login admin
        $ userhub login admin -p secret -q
    """
    session = asyncio.run(_login(username, password or ""))
    _print_session(session, quiet)


async def _login(username: str, password: str) -> SessionToken:
    try:
        async with await InvitationClient.create() as hub:
            return await hub.authenticate_with_credentials(username, password)
    except (UserHubError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def exchange_command(
    provider_token: str = typer.Argument(..., help="Token issued by the identity provider"),
    provider: str = typer.Option(..., "--provider", "-P", help="Provider identifier (e.g. google)"),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Print only the token",
    ),
) -> None:
    """
    Exchange a third-party provider token for a session token.

    Example:
        $ userhub exchange ya29.a0Af... --provider google
    """
    session = asyncio.run(_exchange(provider_token, provider))
    _print_session(session, quiet)


async def _exchange(provider_token: str, provider: str) -> SessionToken:
    try:
        async with await InvitationClient.create() as hub:
            return await hub.authenticate_with_provider_token(provider_token, provider)
    except (UserHubError, ValidationError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


def _print_session(session: SessionToken, quiet: bool) -> None:
    if quiet:
        # Plain output so it can be captured by shell scripts
        typer.echo(session.token)
        return

    table = Table(title="Session")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Token", escape(session.token))
    table.add_row("Type", escape(session.token_type or "-"))
    table.add_row(
        "Expires in",
        f"{session.expires_in:g}s" if session.expires_in is not None else "-",
    )

    console.print("[green]✓[/green] Session created")
    console.print(table)
