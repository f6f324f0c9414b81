"""
UserHub invitation models.

Pydantic models for join-organization invitations.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


class InvitationRequest(BaseModel):
    """
    Request body for creating a join-organization invitation.

    Roles are an open set of identifiers checked by the server, so any
    non-empty string is accepted here.
    """

    email: EmailStr = Field(..., description="Email address to invite")
    role: str = Field(..., min_length=1, description="Role to assign on acceptance")

    @field_validator("role")
    @classmethod
    def strip_role(cls, v: str) -> str:
        """Reject whitespace-only roles."""
        v = v.strip()
        if not v:
            raise ValueError("role must not be blank")
        return v


class InvitationResult(BaseModel):
    """
    Result of a successful invitation request, as returned by the server.

    ``raw`` keeps the full response body so fields this client does not model
    are still available to the caller.
    """

    status: str = "success"
    message: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict)

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "success",
                "message": "Invitation sent to invitee@example.com",
            }
        },
    }

    @property
    def ok(self) -> bool:
        """Whether the server reported success."""
        return self.status == "success"
