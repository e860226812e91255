"""
Client for the OneLink OTX translation service.
"""

from __future__ import annotations

from .client import OneLinkClient
from .config import ClientSettings, RequestOverrides, build_settings
from .errors import ConfigurationError, OneLinkError, ValidationError
from .models import RequestArgs
from .result import TranslationResult
from .tables import MIME_TYPES, SERVICE_TYPES

__version__ = "2.0.0"
API_VERSION = 2.0

__all__ = [
    "API_VERSION",
    "ClientSettings",
    "ConfigurationError",
    "MIME_TYPES",
    "OneLinkClient",
    "OneLinkError",
    "RequestArgs",
    "RequestOverrides",
    "SERVICE_TYPES",
    "TranslationResult",
    "ValidationError",
    "build_settings",
]
