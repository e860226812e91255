from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Mapping

import httpx

from onelink.config import (
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT,
    DEFAULT_TRANSLATED_THRESHOLD,
    ClientSettings,
    RequestOverrides,
)
from onelink.errors import ConfigurationError, ValidationError
from onelink.models import RequestArgs
from onelink.result import TranslationResult
from onelink.tables import (
    DEFAULT_MIME_TYPE,
    DEFAULT_SERVICE_TYPE,
    is_valid_mime_type,
    is_valid_service_type,
)

LOGGER = logging.getLogger(__name__)

SERVICE_URL_TEMPLATE = "https://{lang}-{host}.onelink-translations.com/OneLinkOTX/"
BASE_HEADERS = {"Content-Type": "application/x-www-form-urlencoded"}


class OneLinkClient:
    """Client for the OneLink OTX translation API.

    Requests are validated before anything is sent; the HTTP exchange itself
    is left to httpx. ``timeout`` only applies to the httpx.Client the
    instance creates itself; an injected ``http_client`` keeps its settings.
    """

    def __init__(
        self,
        username: str,
        password: str,
        host: str,
        *,
        service_type: str | None = None,
        language: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        translated_threshold: int = DEFAULT_TRANSLATED_THRESHOLD,
        http_client: httpx.Client | None = None,
    ):
        for name, value in (("username", username), ("password", password), ("host", host)):
            if not value:
                raise ConfigurationError(f"Missing {name}")
        if service_type and not is_valid_service_type(service_type):
            raise ConfigurationError(f"Invalid service type: {service_type!r}")

        self._username = username
        self._password = password
        self._host = host
        self._language = language or DEFAULT_LANGUAGE
        self._service_type = service_type or DEFAULT_SERVICE_TYPE
        self._translated_threshold = translated_threshold
        self._lock = threading.Lock()
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.Client(headers=BASE_HEADERS, timeout=timeout)

    @classmethod
    def from_settings(cls, settings: ClientSettings, *, http_client: httpx.Client | None = None) -> OneLinkClient:
        return cls(
            settings.username,
            settings.password,
            settings.host,
            service_type=settings.service_type,
            language=settings.language,
            timeout=settings.timeout,
            translated_threshold=settings.translated_threshold,
            http_client=http_client,
        )

    def __enter__(self) -> OneLinkClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http_client:
            self._http.close()

    @property
    def host(self) -> str:
        return self._host

    @property
    def language(self) -> str:
        return self._language

    @property
    def service_type(self) -> str:
        with self._lock:
            return self._service_type

    def set_service_type(self, new_type: str) -> str:
        """Replace the default service type and return the previous one."""
        if not is_valid_service_type(new_type):
            raise ConfigurationError(f"Invalid service type: {new_type!r}")
        with self._lock:
            previous, self._service_type = self._service_type, new_type
        LOGGER.debug("Service type changed from %s to %s", previous, new_type)
        return previous

    def translate_text(self, text: str, lang: str | None = None) -> TranslationResult:
        # OTX ignores text that is not wrapped in markup.
        return self.translate_html(f"<p>{text}</p>", lang)

    def translate_html(self, html: str, lang: str | None = None) -> TranslationResult:
        return self.translate(html, lang, RequestOverrides(mime_type="text/html"))

    def translate_segments(
        self,
        segments: Iterable[str] | Mapping[Any, str],
        lang: str | None = None,
    ) -> TranslationResult:
        """Translate several segments in one request.

        Segments are sent as a single payload of ``<div>`` blocks, so the
        result holds one combined translation rather than one per segment.
        Mapping keys only decide the order; a bare string is one segment.
        """
        if isinstance(segments, str):
            values: Iterable[str] = [segments]
        elif isinstance(segments, Mapping):
            values = segments.values()
        else:
            values = segments
        text = "".join(f"<div>{segment}</div>" for segment in values)
        return self.translate_text(text, lang)

    def translate(
        self,
        text: str,
        lang: str | None = None,
        overrides: RequestOverrides | None = None,
    ) -> TranslationResult:
        lang = lang or self._language
        if not lang:
            raise ValidationError("No language specified.")

        args = self._build_args(text, overrides or RequestOverrides())
        if not is_valid_mime_type(args.mime_type):
            raise ValidationError(f"Invalid mimetype specified: {args.mime_type!r}")
        if not is_valid_service_type(args.service_type):
            raise ValidationError(f"Invalid service type specified: {args.service_type!r}")

        return self.make_request(self.service_url(lang), args)

    def service_url(self, lang: str) -> str:
        return SERVICE_URL_TEMPLATE.format(lang=lang, host=self._host)

    def make_request(self, url: str, args: RequestArgs | Mapping[str, str]) -> TranslationResult:
        """POST the form fields to ``url`` and wrap the response.

        Transport failures from httpx propagate unchanged.
        """
        form = args.to_form() if isinstance(args, RequestArgs) else dict(args)
        LOGGER.info(
            "OTX request %s (mimetype=%s, service=%s)",
            url,
            form.get("otx_mimetype"),
            form.get("otx_service"),
        )
        try:
            response = self._http.post(url, data=form)
        except httpx.HTTPError as exc:
            LOGGER.error("OTX request to %s failed: %s", url, exc)
            raise
        return TranslationResult.from_response(response, threshold=self._translated_threshold)

    def _build_args(self, text: str, overrides: RequestOverrides) -> RequestArgs:
        return RequestArgs(
            account=f"{self._username},{self._password}",
            mime_type=overrides.mime_type if overrides.mime_type is not None else DEFAULT_MIME_TYPE,
            service_type=overrides.service_type if overrides.service_type is not None else self.service_type,
            content=text,
        )
