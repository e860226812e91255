from __future__ import annotations


class OneLinkError(RuntimeError):
    """Base class for errors raised by the OneLink client."""


class ConfigurationError(OneLinkError):
    """Raised when client configuration is invalid."""


class ValidationError(OneLinkError):
    """Raised when a translation request fails validation before it is sent."""
