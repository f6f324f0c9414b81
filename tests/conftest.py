"""
Pytest configuration and fixtures for UserHub tests.

Provides an in-memory fake of the UserHub HTTP API served through
httpx.MockTransport, so no test touches the network.
"""

import json
from typing import Any, Callable, Dict, List, Optional, Set, Tuple

import httpx
import pytest

from userhub.client import InvitationClient
from userhub.config import UserHubConfig
from userhub.utils.http import UserHubHTTPClient

BASE_URL = "https://hub.test"

INVALID_SESSION_ERROR = "Invalid session token. Please authenticate again."


class FakeUserHub:
    """
    Minimal stand-in for the remote UserHub service.

    Implements the three endpoints the client talks to and records every
    request it receives.
    """

    def __init__(self) -> None:
        self.users: Dict[str, str] = {"admin": "correct-horse"}
        self.provider_tokens: Set[Tuple[str, str]] = {("google", "google-oauth-token")}
        self.session_token = "st_password_session"
        self.exchanged_token = "st_exchanged_session"
        self.valid_sessions: Set[str] = {self.session_token, self.exchanged_token}
        self.invited: Set[str] = set()
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        body = json.loads(request.content) if request.content else {}
        path = request.url.path

        if path == "/adminapi/users/create-api-session":
            return self._create_api_session(body)
        if path == "/userapi/session/exchange-token":
            return self._exchange_token(body)
        if path == "/userapi/flows/create-join-organization":
            return self._create_join_organization(request, body)
        return httpx.Response(404, json={"error": "Not found"})

    def _create_api_session(self, body: Dict[str, Any]) -> httpx.Response:
        username = body.get("username")
        if username in self.users and self.users[username] == body.get("password"):
            return httpx.Response(200, json={"sessionToken": self.session_token})
        return httpx.Response(401, json={"error": "Invalid username or password."})

    def _exchange_token(self, body: Dict[str, Any]) -> httpx.Response:
        if (body.get("provider"), body.get("providerToken")) in self.provider_tokens:
            return httpx.Response(
                200,
                json={
                    "sessionToken": self.exchanged_token,
                    "expiresIn": 3600,
                    "tokenType": "Bearer",
                },
            )
        return httpx.Response(401, json={"error": "Invalid provider token."})

    def _create_join_organization(
        self, request: httpx.Request, body: Dict[str, Any]
    ) -> httpx.Response:
        auth = request.headers.get("Authorization", "")
        token = auth[len("Bearer "):] if auth.startswith("Bearer ") else None
        if token not in self.valid_sessions:
            return httpx.Response(401, json={"error": INVALID_SESSION_ERROR})

        email = body.get("email")
        role = body.get("role")
        if not email or not role:
            return httpx.Response(400, json={"error": "Missing required parameters."})

        if email in self.invited:
            return httpx.Response(
                409, json={"error": "An invitation has already been sent to this email."}
            )

        self.invited.add(email)
        return httpx.Response(
            200,
            json={"status": "success", "message": f"Invitation sent to {email}."},
        )


def make_client(
    handler: Callable[[httpx.Request], Any],
    config: Optional[UserHubConfig] = None,
) -> InvitationClient:
    """Build an InvitationClient whose requests are served by ``handler``."""
    config = config or UserHubConfig(base_url=BASE_URL, timeout=5)
    http_client = httpx.AsyncClient(
        base_url=config.base_url,
        transport=httpx.MockTransport(handler),
        headers={"Content-Type": "application/json", "Accept": "application/json"},
    )
    return InvitationClient(config=config, http=UserHubHTTPClient(config, http_client))


def refuse_connection(request: httpx.Request) -> httpx.Response:
    """Transport handler that fails as if nothing listens on the port."""
    raise httpx.ConnectError("[Errno 111] Connection refused", request=request)


@pytest.fixture
def hub_config():
    """Create a test UserHubConfig."""
    return UserHubConfig(base_url=BASE_URL, timeout=5)


@pytest.fixture
def fake_hub():
    """Create a fresh fake UserHub service."""
    return FakeUserHub()


@pytest.fixture
def hub(fake_hub, hub_config):
    """Create an InvitationClient wired to the fake service."""
    return make_client(fake_hub.handler, hub_config)


@pytest.fixture
def offline_hub(hub_config):
    """Create an InvitationClient whose every connection is refused."""
    return make_client(refuse_connection, hub_config)


@pytest.fixture
def make_hub():
    """Factory for clients served by an ad-hoc transport handler."""
    return make_client
