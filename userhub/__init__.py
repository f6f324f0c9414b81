"""
UserHub - async client for the UserHub identity and membership API.

Authenticate a caller and send join-organization invitations.

Example:
    ```python
    from userhub import InvitationClient

    # Initialize client
    hub = await InvitationClient.create(base_url="https://api.userhub.example")

    # Password-based session
    session = await hub.authenticate_with_credentials("admin", "secret")

    # Or exchange a third-party token
    session = await hub.authenticate_with_provider_token(oauth_token, "google")

    # Invitations
    result = await hub.send_invitation(session, "invitee@example.com", "member")

    await hub.close()
    ```
"""

from .auth import PasswordCredentials, ProviderCredentials, SessionManager, SessionToken
from .client import InvitationClient
from .config import UserHubConfig, load_config
from .exceptions import (
    AuthError,
    CancelledError,
    InvitationError,
    NetworkError,
    UserHubError,
)
from .invitations import InvitationManager, InvitationRequest, InvitationResult
from .version import __version__

__all__ = [
    # Main client
    "InvitationClient",
    "UserHubConfig",
    "load_config",
    # Sessions
    "SessionManager",
    "SessionToken",
    "PasswordCredentials",
    "ProviderCredentials",
    # Invitations
    "InvitationManager",
    "InvitationRequest",
    "InvitationResult",
    # Errors
    "UserHubError",
    "NetworkError",
    "AuthError",
    "InvitationError",
    "CancelledError",
    "__version__",
]
