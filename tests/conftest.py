from __future__ import annotations

from typing import Callable
from urllib.parse import parse_qs

import httpx
import pytest

from onelink.client import OneLinkClient


class RecordingTransport:
    """Fake OTX endpoint that records every request it receives."""

    def __init__(self, *, status_code: int = 200, body: str = "", headers: dict[str, str] | None = None):
        self.status_code = status_code
        self.body = body
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, headers=self.headers, text=self.body)

    @property
    def last_form(self) -> dict[str, str]:
        assert self.requests, "no request was sent"
        parsed = parse_qs(self.requests[-1].content.decode("utf-8"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items()}


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport(body="<p>ok</p>", headers={"x-onelinktxpercent": "100"})


@pytest.fixture
def make_client(transport: RecordingTransport) -> Callable[..., OneLinkClient]:
    def factory(**kwargs) -> OneLinkClient:
        http_client = httpx.Client(transport=httpx.MockTransport(transport))
        return OneLinkClient("otx", "otxpass", "otx", http_client=http_client, **kwargs)

    return factory
