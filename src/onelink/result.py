from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import httpx

from onelink.config import DEFAULT_TRANSLATED_THRESHOLD

LOGGER = logging.getLogger(__name__)

PERCENT_HEADER = "x-onelinktxpercent"


@dataclass(frozen=True)
class TranslationResult:
    """Interpreted outcome of a single OTX response.

    `success` is the transport-level signal; a result is only successful when
    the status code is also 200. Non-200 responses are not raised, callers
    check `is_successful` themselves.
    """

    status_code: int
    success: bool
    headers: Mapping[str, str] = field(hash=False)
    body: str
    threshold: int = DEFAULT_TRANSLATED_THRESHOLD
    response: httpx.Response | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        # read-only snapshot with lowercased names, detached from the response
        snapshot = {name.lower(): value for name, value in httpx.Headers(self.headers).items()}
        object.__setattr__(self, "headers", MappingProxyType(snapshot))

    @classmethod
    def from_response(
        cls,
        response: httpx.Response,
        *,
        threshold: int = DEFAULT_TRANSLATED_THRESHOLD,
    ) -> TranslationResult:
        result = cls(
            status_code=response.status_code,
            success=response.is_success,
            headers=response.headers,
            body=response.text,
            threshold=threshold,
            response=response,
        )
        LOGGER.debug(
            "OTX response %s (translated %s%%, %s chars)",
            result.status_code,
            result.translation_percent,
            len(result.body),
        )
        return result

    def __str__(self) -> str:
        return self.body

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        return self.headers.get(name.lower(), default)

    @property
    def is_successful(self) -> bool:
        return self.success and self.status_code == 200

    @property
    def is_failure(self) -> bool:
        return not self.is_successful

    @property
    def translation_percent(self) -> int:
        """Share of translated segments reported by the service, 0 when missing.

        This is segment based, not a word-for-word figure.
        """
        raw = self.header(PERCENT_HEADER)
        if raw is None or not raw.strip():
            return 0
        try:
            return int(raw.strip())
        except ValueError:
            LOGGER.warning("Ignoring non-numeric %s header: %r", PERCENT_HEADER, raw)
            return 0

    def is_translated(self, threshold: int | None = None) -> bool:
        limit = self.threshold if threshold is None else threshold
        return self.translation_percent >= limit

    @property
    def data(self) -> str | None:
        """Translated body, or None when the service returned nothing."""
        return self.body or None

    @property
    def raw(self) -> httpx.Response | None:
        return self.response
