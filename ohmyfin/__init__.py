"""Ohmyfin Python SDK - SWIFT transaction tracking and validation

See https://ohmyfin.ai for documentation and API keys.
"""

from ohmyfin.client import Ohmyfin
from ohmyfin.config import SDK_VERSION as __version__
from ohmyfin.config import ClientConfig, Settings
from ohmyfin.exceptions import (
    ApiError,
    ConfigurationError,
    OhmyfinError,
    TransportError,
    ValidationError,
)
from ohmyfin.models import (
    AvailableCorrespondent,
    ChangeRequest,
    ChangeResult,
    Correspondent,
    HopDetail,
    Limits,
    SSIRequest,
    SSIResult,
    TrackRequest,
    TrackResult,
    ValidateRequest,
    ValidateResult,
    ValidationStatus,
)

__all__ = [
    "Ohmyfin",
    "ClientConfig",
    "Settings",
    "OhmyfinError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "TransportError",
    "TrackRequest",
    "TrackResult",
    "HopDetail",
    "Limits",
    "ChangeRequest",
    "ChangeResult",
    "ValidateRequest",
    "ValidateResult",
    "ValidationStatus",
    "AvailableCorrespondent",
    "SSIRequest",
    "SSIResult",
    "Correspondent",
    "__version__",
]
