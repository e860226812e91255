from __future__ import annotations

from typing import Any

SERVICE_TYPES = frozenset(
    {
        "tx",
        "smt",
        "wmt",
        "tx+smt",
        "tx+wmt",
        "parse",
    }
)
MIME_TYPES = frozenset(
    {
        "text/html",
        "text/xml",
        "text/javascript",
        "text/json",
        "text/plain",
        "text/segment",
        "application/json",
    }
)

DEFAULT_SERVICE_TYPE = "tx"
DEFAULT_MIME_TYPE = "text/html"


def is_valid_service_type(value: Any) -> bool:
    """Exact, case-sensitive membership in SERVICE_TYPES."""
    return isinstance(value, str) and value in SERVICE_TYPES


def is_valid_mime_type(value: Any) -> bool:
    return isinstance(value, str) and value in MIME_TYPES
