"""
CLI commands for invitation management.
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ...client import InvitationClient
from ...exceptions import UserHubError
from ...invitations.models import InvitationResult

console = Console()


def invite_command(
    email: str = typer.Argument(..., help="Email address to invite"),
    role: str = typer.Option("member", "--role", "-r", help="Role to assign"),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        "-t",
        envvar="USERHUB_SESSION_TOKEN",
        help="Existing session token",
    ),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Authenticate first as this user"),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password for --username"),
    provider_token: Optional[str] = typer.Option(
        None, "--provider-token", help="Authenticate first by exchanging this token"
    ),
    provider: Optional[str] = typer.Option(None, "--provider", "-P", help="Provider for --provider-token"),
) -> None:
    """
    Send an invitation to join an organization.

    Example:
        $ userhub invite invitee@example.com --role member --token st_abc123
        $ userhub invite invitee@example.com -u admin -p secret
    """
    if token is None and username is None and provider_token is None:
        console.print("[red]Error:[/red] Pass --token, --username/--password or --provider-token/--provider")
        raise typer.Exit(1)
    if token is not None and any(v is not None for v in (username, password, provider_token, provider)):
        console.print(
            "[red]Error:[/red] --token (or USERHUB_SESSION_TOKEN) cannot be combined with other credentials"
        )
        raise typer.Exit(1)

    result = asyncio.run(
        _invite(email, role, token, username, password, provider_token, provider)
    )

    console.print(f"[green]✓[/green] Invitation sent to {escape(email)}")
    console.print(f"  Role: {escape(role)}")
    if result.message:
        console.print(f"  Message: {escape(result.message)}")


async def _invite(
    email: str,
    role: str,
    token: Optional[str],
    username: Optional[str],
    password: Optional[str],
    provider_token: Optional[str],
    provider: Optional[str],
) -> InvitationResult:
    try:
        async with await InvitationClient.create() as hub:
            if token is not None:
                return await hub.send_invitation(token, email, role)
            return await hub.invite(
                email,
                role,
                username=username,
                password=password,
                provider_token=provider_token,
                provider=provider,
            )
    except (UserHubError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
