"""
HTTP transport wrapper for UserHub.

Provides a thin wrapper around httpx.AsyncClient with UserHub-specific
configuration: JSON headers, base URL, timeout, and classification of
transport failures into UserHub errors.
"""

import asyncio
import logging
import sys
from typing import Any, Dict, Optional

import httpx

from ..config import UserHubConfig
from ..exceptions import CancelledError, NetworkError

logger = logging.getLogger(__name__)

# asyncio.timeout() on 3.11 converts only the exact CancelledError class into
# TimeoutError, so cancellations pass through unwrapped there
WRAP_CANCELLATION = sys.version_info[:2] != (3, 11)

# Maximum number of characters of a non-JSON error body kept in messages
MAX_ERROR_TEXT = 500


class UserHubHTTPClient:
    """
    Wrapper around httpx.AsyncClient configured for the UserHub API.

    Every call issues exactly one request. Non-2xx responses are returned to the
    caller, which decides how to classify them; only failures where no response
    arrived are raised here.

    Example:
        ```python
        from userhub.config import UserHubConfig
        from userhub.utils.http import UserHubHTTPClient

        config = UserHubConfig(base_url="https://api.userhub.example")
        http = await UserHubHTTPClient.create(config)

        response = await http.post_json(
            "/adminapi/users/create-api-session",
            {"username": "admin", "password": "secret"},
        )
        ```
    """

    def __init__(
        self,
        config: UserHubConfig,
        client: httpx.AsyncClient,
        owns_client: bool = True,
    ) -> None:
        """
        Initialize the UserHub HTTP client.

        Args:
            config: UserHub configuration
            client: Initialized httpx.AsyncClient
            owns_client: Whether close() should close the underlying client

        Note:
            Use UserHubHTTPClient.create() instead of direct instantiation.
        """
        self.config = config
        self._client = client
        self._owns_client = owns_client

    @classmethod
    async def create(
        cls,
        config: UserHubConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "UserHubHTTPClient":
        """
        Create and initialize a UserHubHTTPClient.

        Args:
            config: UserHub configuration with base URL and timeout
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests)

        Returns:
            Initialized UserHubHTTPClient
        """
        client_kwargs: Dict[str, Any] = {
            "base_url": config.base_url,
            "timeout": config.timeout,
            "verify": config.verify_ssl,
            "headers": {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": config.user_agent,
            },
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        elif config.proxy:
            client_kwargs["proxy"] = config.proxy

        return cls(config=config, client=httpx.AsyncClient(**client_kwargs))

    @property
    def client(self) -> httpx.AsyncClient:
        """Access the underlying httpx.AsyncClient."""
        return self._client

    async def post_json(
        self,
        path: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        operation: str = "request",
    ) -> httpx.Response:
        """
        POST a JSON body and return the response, whatever its status.

        Args:
            path: Endpoint path relative to the base URL
            payload: JSON-serializable request body
            headers: Extra headers (e.g. Authorization)
            operation: Operation name used in log and error messages

        Returns:
            httpx.Response

        Raises:
            NetworkError: If no response was received (refused, DNS, timeout)
            CancelledError: If the caller cancelled the in-flight request (a plain
                asyncio.CancelledError on Python 3.11)
        """
        logger.debug("POST %s (%s)", path, operation)

        try:
            response = await self._client.post(path, json=payload, headers=headers)
        except asyncio.CancelledError as e:
            logger.debug("%s cancelled while waiting for POST %s", operation, path)
            if not WRAP_CANCELLATION:
                raise
            raise CancelledError(operation) from e
        except httpx.TimeoutException as e:
            logger.warning("%s timed out after %ss: POST %s", operation, self.config.timeout, path)
            raise NetworkError(f"{operation} timed out: {e}") from e
        except httpx.RequestError as e:
            logger.warning("%s failed before a response arrived: %s", operation, e)
            raise NetworkError(f"{operation} failed: {e}") from e

        logger.debug("POST %s -> %s", path, response.status_code)
        return response

    async def close(self) -> None:
        """Close the underlying httpx client if this wrapper created it."""
        if self._owns_client:
            await self._client.aclose()


def parse_json(response: httpx.Response) -> Any:
    """
    Parse a response body as JSON.

    Returns:
        The decoded body, or None when the body is empty or not JSON
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def is_success(response: httpx.Response) -> bool:
    """Whether the response carries a 2xx status."""
    return 200 <= response.status_code < 300


def extract_error_message(response: httpx.Response, body: Any = None) -> str:
    """
    Pull a human-readable error message out of a failed response.

    Lookup order: ``error``, ``message`` and ``detail`` fields of a JSON object
    body, then the raw text, then the HTTP reason phrase.

    Args:
        response: Failed httpx.Response
        body: Already-parsed body (parsed here if not given)

    Returns:
        Error message string, never empty
    """
    if body is None:
        body = parse_json(response)

    if isinstance(body, dict):
        for key in ("error", "message", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
            # {"error": {"message": "..."}}
            if isinstance(value, dict):
                nested = value.get("message")
                if isinstance(nested, str) and nested.strip():
                    return nested.strip()

    if isinstance(body, str) and body.strip():
        return body.strip()[:MAX_ERROR_TEXT]

    if body is None:
        text = response.text.strip()
        if text:
            return text[:MAX_ERROR_TEXT]

    return response.reason_phrase or f"HTTP {response.status_code}"
