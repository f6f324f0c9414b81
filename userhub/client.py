"""
Main UserHub client.

This is the primary interface users interact with.
"""

import logging
from typing import Optional, Union

import httpx

from .auth import SessionManager, SessionToken
from .config import UserHubConfig, load_config
from .invitations import InvitationManager, InvitationResult
from .utils.http import UserHubHTTPClient

logger = logging.getLogger(__name__)


class InvitationClient:
    """
    Stateless client for UserHub authentication and invitations.

    Holds no session state: every operation takes what it needs as arguments
    and performs exactly one request. Safe to share between concurrent tasks.

    Example:
        ```python
        from userhub import InvitationClient

        # Initialize from environment variables (USERHUB_BASE_URL, ...)
        async with await InvitationClient.create() as hub:
            session = await hub.authenticate_with_credentials("admin", "secret")
            result = await hub.send_invitation(session, "invitee@example.com", "member")
            print(result.message)
        ```
    """

    def __init__(self, config: UserHubConfig, http: UserHubHTTPClient) -> None:
        """
        Initialize InvitationClient.

        Args:
            config: UserHub configuration
            http: HTTP transport wrapper

        Note:
            Use InvitationClient.create() instead of direct instantiation.
        """
        self.config = config
        self.http = http

        if config.debug:
            logging.getLogger("userhub").setLevel(logging.DEBUG)

        self.sessions = SessionManager(self)
        self.invites = InvitationManager(self)

    @classmethod
    async def create(
        cls,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs,
    ) -> "InvitationClient":
        """
        Create and initialize an InvitationClient.

        Args:
            base_url: UserHub API base URL (optional, loads from env)
            transport: Optional httpx transport, e.g. httpx.MockTransport
            **kwargs: Additional configuration options (timeout, verify_ssl, ...)

        Returns:
            Initialized InvitationClient

        Raises:
            ValidationError: If required configuration is missing or invalid

        Example:
            ```python
            # Load from environment (.env file or USERHUB_* env vars)
            hub = await InvitationClient.create()

            # Explicit configuration
            hub = await InvitationClient.create(
                base_url="https://api.userhub.example",
                timeout=10,
            )
            ```
        """
        config_kwargs = kwargs.copy()
        if base_url:
            config_kwargs["base_url"] = base_url

        config = load_config(**config_kwargs)
        http = await UserHubHTTPClient.create(config, transport=transport)

        return cls(config=config, http=http)

    async def authenticate_with_credentials(self, username: str, password: str) -> SessionToken:
        """
        Exchange username and password for a session token.

        Raises:
            AuthError: If the service rejects the credentials or returns no token
            NetworkError: If no response was received
        """
        return await self.sessions.create_api_session(username, password)

    async def authenticate_with_provider_token(
        self, provider_token: str, provider: str
    ) -> SessionToken:
        """
        Exchange a third-party provider token for a session token.

        Raises:
            AuthError: If the exchange is rejected or returns no token
            NetworkError: If no response was received
        """
        return await self.sessions.exchange_token(provider_token, provider)

    async def send_invitation(
        self,
        session_token: Union[SessionToken, str],
        email: str,
        role: str,
    ) -> InvitationResult:
        """
        Send a join-organization invitation using an existing session token.

        Raises:
            InvitationError: If the input is invalid or the server rejects it
            NetworkError: If no response was received
        """
        return await self.invites.create(session_token, email, role)

    async def invite(
        self,
        email: str,
        role: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        provider_token: Optional[str] = None,
        provider: Optional[str] = None,
    ) -> InvitationResult:
        """
        Authenticate, then send an invitation.

        Exactly one credential pair must be given: username/password or
        provider_token/provider. The two calls are independent; a failed
        invitation leaves the issued session untouched.

        Args:
            email: Email address to invite
            role: Role identifier to assign
            username: Account username (password path)
            password: Account password (password path)
            provider_token: Third-party token (exchange path)
            provider: Provider identifier (exchange path)

        Returns:
            InvitationResult from the server

        Raises:
            ValueError: If neither or both credential pairs are given
            AuthError: If authentication fails
            InvitationError: If the invitation is rejected
            NetworkError: If either request gets no response
        """
        use_password = username is not None or password is not None
        use_provider = provider_token is not None or provider is not None

        if use_password == use_provider:
            raise ValueError(
                "Provide either username/password or provider_token/provider"
            )

        if use_password:
            session = await self.authenticate_with_credentials(username or "", password or "")
        else:
            session = await self.authenticate_with_provider_token(
                provider_token or "", provider or ""
            )

        return await self.send_invitation(session, email, role)

    async def close(self) -> None:
        """
        Close the client and release the HTTP connection pool.

        Example:
            ```python
            hub = await InvitationClient.create()
            try:
                # ... use hub
                pass
            finally:
                await hub.close()
            ```
        """
        await self.http.close()

    async def __aenter__(self) -> "InvitationClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
