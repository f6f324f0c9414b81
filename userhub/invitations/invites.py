"""
Invitation management for UserHub.

Creates join-organization invitations on behalf of an authenticated caller.
The server is the authority on acceptance: duplicate invitations, unknown roles
and expired sessions are all reported by it and surfaced as InvitationError.

Endpoint:
    POST /userapi/flows/create-join-organization
"""

import logging
from typing import TYPE_CHECKING, Union

from pydantic import ValidationError

from ..auth.models import SessionToken
from ..exceptions import InvitationError
from ..utils.http import extract_error_message, is_success, parse_json
from .models import InvitationRequest, InvitationResult

if TYPE_CHECKING:
    from ..client import InvitationClient

logger = logging.getLogger(__name__)

CREATE_JOIN_ORGANIZATION_PATH = "/userapi/flows/create-join-organization"


class InvitationManager:
    """
    Manages organization invitation requests.

    The invitation flow:
    1. Caller obtains a SessionToken (either authentication path)
    2. Email and role are checked for basic shape
    3. One bearer-authenticated POST creates the invitation server-side
    4. The server's verdict is returned or raised; nothing is retried
    """

    def __init__(self, hub: "InvitationClient") -> None:
        """
        Initialize InvitationManager.

        Args:
            hub: Main InvitationClient instance
        """
        self.hub = hub
        self.http = hub.http

    async def create(
        self,
        session_token: Union[SessionToken, str],
        email: str,
        role: str,
    ) -> InvitationResult:
        """
        Create an invitation to join the caller's organization.

        Args:
            session_token: SessionToken or raw token string from either auth path
            email: Email address to invite
            role: Role identifier to assign (validated by the server)

        Returns:
            InvitationResult with the server's status and message

        Raises:
            InvitationError: If input is invalid or the server rejects the request
            NetworkError: If no response was received
            CancelledError: If the call was cancelled

        Example:
            ```python
            session = await hub.sessions.create_api_session("admin", "secret")
            result = await hub.invites.create(session, "invitee@example.com", "member")
            print(result.message)
            ```
        """
        token = session_token.token if isinstance(session_token, SessionToken) else session_token
        if not token:
            raise InvitationError("A session token is required")

        try:
            request = InvitationRequest(email=email, role=role)
        except ValidationError as e:
            field = e.errors()[0]["loc"][0]
            raise InvitationError(f"Invalid {field}: {e.errors()[0]['msg']}") from e

        response = await self.http.post_json(
            CREATE_JOIN_ORGANIZATION_PATH,
            request.model_dump(mode="json"),
            headers={"Authorization": f"Bearer {token}"},
            operation="create-join-organization",
        )

        body = parse_json(response)

        if not is_success(response):
            message = extract_error_message(response, body)
            logger.warning(
                "Invitation for role %r rejected with HTTP %s: %s",
                request.role,
                response.status_code,
                message,
            )
            raise InvitationError(message, status_code=response.status_code, response_body=body)

        if not isinstance(body, dict):
            return InvitationResult()

        # Some deployments answer 200 with {"status": "error", "error": "..."}
        if body.get("status", "success") != "success" or (
            "error" in body and "status" not in body
        ):
            message = extract_error_message(response, body)
            logger.warning("Invitation reported failure: %s", message)
            raise InvitationError(message, status_code=response.status_code, response_body=body)

        logger.info("Invitation created for role %r", request.role)
        return InvitationResult(
            status=body.get("status", "success"),
            message=body.get("message"),
            raw=body,
        )
