"""
UserHub authentication module.

Handles session creation and provider token exchange.
"""

from .models import PasswordCredentials, ProviderCredentials, SessionToken
from .sessions import SessionManager

__all__ = [
    "SessionManager",
    "SessionToken",
    "PasswordCredentials",
    "ProviderCredentials",
]
