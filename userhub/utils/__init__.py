"""
UserHub utilities.

HTTP transport wrapper and response helpers.
"""

from .http import UserHubHTTPClient, extract_error_message, is_success, parse_json

__all__ = [
    "UserHubHTTPClient",
    "extract_error_message",
    "is_success",
    "parse_json",
]
