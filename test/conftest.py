from __future__ import annotations

from typing import Any, Callable, Iterable, List
from urllib.parse import parse_qsl

import httpx
import pytest

from mailchimp_api import MailChimp

MOCK_ENDPOINT = "http://mock/1.3/"


class RecordingTransport(httpx.MockTransport):
    """MockTransport that records requests and answers with a configurable JSON payload."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json=True)
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)

    def reply(self, payload: Any, status_code: int = 200) -> None:
        self.responder = lambda request: httpx.Response(status_code, json=payload)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_method(self) -> str:
        return self.last.url.params["method"]

    @property
    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last.content.decode(), keep_blank_values=True))


@pytest.fixture()
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture()
def mailchimp(transport: RecordingTransport) -> MailChimp:
    client = httpx.Client(transport=transport)
    return MailChimp("0123456789abcdef-us5", base_url=MOCK_ENDPOINT, client=client)


@pytest.fixture(autouse=True)
def _global_offline_http_guard(monkeypatch: pytest.MonkeyPatch):
    allowed_prefixes: Iterable[str] = (
        "http://mock",
        "https://mock",
        "http://localhost",
        "http://127.0.0.1",
    )

    orig_sync = httpx._client.Client.request

    def _is_allowed(url_str: str) -> bool:
        return any(url_str.startswith(p) for p in allowed_prefixes)

    def offline_sync(self, method, url, *args, **kwargs):
        url_str = str(url)
        if _is_allowed(url_str):
            return orig_sync(self, method, url, *args, **kwargs)
        raise RuntimeError(f"External HTTP blocked by global offline guard: {url_str}")

    monkeypatch.setattr(httpx._client.Client, "request", offline_sync, raising=True)


@pytest.fixture(autouse=True)
def _clean_mailchimp_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    for name in ("API_KEY", "SECURE", "TIMEOUT", "API_VERSION", "BASE_URL", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"MAILCHIMP_{name}", raising=False)
    # keep a developer's .env out of the settings tests
    monkeypatch.chdir(tmp_path)
