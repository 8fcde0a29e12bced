"""Ohmyfin SDK exceptions"""

from typing import Dict, List, Optional

from httpx import TransportError


class OhmyfinError(Exception):
    """Base exception for the Ohmyfin SDK"""

    pass


class ConfigurationError(OhmyfinError):
    """Client configuration is missing or invalid"""

    pass


class ValidationError(OhmyfinError, ValueError):
    """Required request fields are missing; raised before any network I/O"""

    pass


class ApiError(OhmyfinError):
    """
    The API reported an error, returned an unparseable body, or timed out.

    Attributes:
        message: Error message from the API payload (or a fixed fallback)
        status_code: HTTP status, 408 for client-side timeouts
        errors: Optional field -> list of messages mapping from the API
    """

    def __init__(self, message: str, status_code: int, errors: Optional[Dict[str, List[str]]] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.errors = errors

    def __repr__(self) -> str:
        return f"ApiError(message={self.message!r}, status_code={self.status_code}, errors={self.errors!r})"


__all__ = [
    "OhmyfinError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "TransportError",
]
