"""
Basic UserHub usage example.

This example demonstrates the core features of the client:
- Password-based API session creation
- Provider token exchange
- Sending a join-organization invitation
- Handling classified errors

Run with:
    USERHUB_BASE_URL=https://api.userhub.example python examples/basic_usage.py
"""

import asyncio
import os

from userhub import (
    AuthError,
    InvitationClient,
    InvitationError,
    NetworkError,
)


async def main():
    # Create client (loads config from USERHUB_* env vars or .env)
    async with await InvitationClient.create() as hub:
        # =================================================================
        # 1. Authenticate
        # =================================================================
        print("Authenticating...")

        try:
            if os.getenv("USERHUB_PROVIDER_TOKEN"):
                session = await hub.authenticate_with_provider_token(
                    os.environ["USERHUB_PROVIDER_TOKEN"],
                    os.getenv("USERHUB_PROVIDER", "google"),
                )
                print(f"  Exchanged provider token (expires in {session.expires_in}s)")
            else:
                session = await hub.authenticate_with_credentials(
                    os.getenv("USERHUB_USERNAME", "admin"),
                    os.getenv("USERHUB_PASSWORD", "admin-password-123"),
                )
                print("  Created API session")
        except AuthError as e:
            print(f"  Authentication failed: {e}")
            return
        except NetworkError as e:
            print(f"  Could not reach UserHub: {e}")
            return

        # =================================================================
        # 2. Send invitation
        # =================================================================
        print("\nSending invitation...")

        try:
            result = await hub.send_invitation(session, "invitee@example.com", "member")
            print(f"  {result.status}: {result.message}")
        except InvitationError as e:
            # Duplicate invitations and expired sessions end up here
            print(f"  Invitation failed: {e.message}")

        # =================================================================
        # 3. One-shot flow
        # =================================================================
        print("\nInviting with a fresh login...")

        try:
            result = await hub.invite(
                "second@example.com",
                "member",
                username=os.getenv("USERHUB_USERNAME", "admin"),
                password=os.getenv("USERHUB_PASSWORD", "admin-password-123"),
            )
            print(f"  {result.message}")
        except (AuthError, InvitationError) as e:
            print(f"  Failed: {e}")


if __name__ == "__main__":
    asyncio.run(main())
