"""
Session management for UserHub.

Obtains session tokens from the remote service, either by username/password
or by exchanging a third-party provider token.

Endpoints:
    POST /adminapi/users/create-api-session
    POST /userapi/session/exchange-token
"""

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from ..exceptions import AuthError
from ..utils.http import extract_error_message, is_success, parse_json
from .models import PasswordCredentials, ProviderCredentials, SessionToken

if TYPE_CHECKING:
    from ..client import InvitationClient

logger = logging.getLogger(__name__)

CREATE_API_SESSION_PATH = "/adminapi/users/create-api-session"
EXCHANGE_TOKEN_PATH = "/userapi/session/exchange-token"


class SessionManager:
    """
    Manages authentication against UserHub.

    Each method performs a single request; nothing is cached, retried or
    refreshed. The returned SessionToken belongs to the caller.
    """

    def __init__(self, hub: "InvitationClient") -> None:
        """
        Initialize SessionManager.

        Args:
            hub: Main InvitationClient instance
        """
        self.hub = hub
        self.http = hub.http

    async def create_api_session(self, username: str, password: str) -> SessionToken:
        """
        Create an API session with username and password.

        Args:
            username: Account username
            password: Account password

        Returns:
            SessionToken issued by the service

        Raises:
            AuthError: If credentials are missing, rejected, or the response has no token
            NetworkError: If no response was received
            CancelledError: If the call was cancelled

        Example:
            ```python
            session = await hub.sessions.create_api_session("admin", "secret")
            print(session.token)
            ```
        """
        try:
            credentials = PasswordCredentials(username=username, password=password)
        except ValidationError as e:
            raise AuthError("Username and password are required") from e

        response = await self.http.post_json(
            CREATE_API_SESSION_PATH,
            credentials.model_dump(),
            operation="create-api-session",
        )
        return self._parse_session(response, "create-api-session")

    async def exchange_token(self, provider_token: str, provider: str) -> SessionToken:
        """
        Exchange a third-party provider token for a UserHub session token.

        Args:
            provider_token: Token issued by the external identity provider
            provider: Provider identifier (e.g. "google", "github")

        Returns:
            SessionToken, with expires_in and token_type when the server sends them

        Raises:
            AuthError: If the exchange is rejected or the response has no token
            NetworkError: If no response was received
            CancelledError: If the call was cancelled

        Example:
            ```python
            session = await hub.sessions.exchange_token(oauth_token, "google")
            print(f"Expires in {session.expires_in}s")
            ```
        """
        try:
            credentials = ProviderCredentials(provider_token=provider_token, provider=provider)
        except ValidationError as e:
            raise AuthError("Provider token and provider are required") from e

        response = await self.http.post_json(
            EXCHANGE_TOKEN_PATH,
            credentials.model_dump(by_alias=True),
            operation="exchange-token",
        )
        return self._parse_session(response, "exchange-token")

    def _parse_session(self, response: httpx.Response, operation: str) -> SessionToken:
        """Classify an authentication response into a SessionToken or AuthError."""
        body = parse_json(response)

        if not is_success(response):
            message = extract_error_message(response, body)
            logger.warning("%s rejected with HTTP %s: %s", operation, response.status_code, message)
            raise AuthError(message, status_code=response.status_code, response_body=body)

        if not isinstance(body, dict) or not body.get("sessionToken"):
            logger.warning("%s response did not contain a session token", operation)
            raise AuthError(
                "Response did not contain a session token",
                status_code=response.status_code,
                response_body=body,
            )

        try:
            return SessionToken.model_validate(body)
        except ValidationError as e:
            raise AuthError(
                f"Malformed session response: {e.errors()[0]['msg']}",
                status_code=response.status_code,
                response_body=body,
            ) from e
