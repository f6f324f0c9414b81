"""
UserHub auth models.

Pydantic models for credentials and session tokens.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PasswordCredentials(BaseModel):
    """Request body for password-based API session creation."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(hide_input_in_errors=True)


class ProviderCredentials(BaseModel):
    """Request body for exchanging a third-party provider token."""

    provider_token: str = Field(..., min_length=1, alias="providerToken")
    provider: str = Field(..., min_length=1)

    model_config = ConfigDict(populate_by_name=True, hide_input_in_errors=True)


class SessionToken(BaseModel):
    """
    UserHub session token - an opaque bearer credential.

    Produced by either authentication path; both are accepted as the bearer
    credential for subsequent calls. The client never caches or renews it.
    """

    token: str = Field(..., min_length=1, alias="sessionToken")
    token_type: Optional[str] = Field(default=None, alias="tokenType")
    expires_in: Optional[float] = Field(
        default=None,
        alias="expiresIn",
        description="Lifetime in seconds, when the server reports one",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "sessionToken": "st_abc123...",
                "tokenType": "Bearer",
                "expiresIn": 3600,
            }
        },
    )

    @field_validator("expires_in", mode="before")
    @classmethod
    def lenient_expiry(cls, v: Any) -> Optional[float]:
        """Keep the token even when the server reports an unusable lifetime."""
        if v is None or isinstance(v, bool):
            return None
        try:
            seconds = float(v)
        except (TypeError, ValueError):
            return None
        return seconds if math.isfinite(seconds) else None

    def authorization_header(self) -> str:
        """Render the Authorization header value for this token."""
        return f"Bearer {self.token}"
