"""
UserHub invitations module.

Handles join-organization invitation requests.
"""

from .invites import InvitationManager
from .models import (
    InvitationRequest,
    InvitationResult,
)

__all__ = [
    "InvitationManager",
    "InvitationRequest",
    "InvitationResult",
]
