from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient

from search_proxy.core.config import Settings
from search_proxy.main import create_app

UPSTREAM_TEMPLATE = "https://upstream.test/_next/data/build-1/search.json?q={query}"


class FakeUpstream:
    """Records outbound requests and answers them with a canned handler."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"pageProps": {"data": []}}
        )

    def respond_json(self, payload, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, json=payload)

    def respond_text(self, text: str, status_code: int = 200) -> None:
        self.handler = lambda request: httpx.Response(status_code, text=text)

    def fail(self, exc: Exception) -> None:
        def _raise(request: httpx.Request) -> httpx.Response:
            raise exc

        self.handler = _raise

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def settings() -> Settings:
    return Settings(UPSTREAM_SEARCH_URL_TEMPLATE=UPSTREAM_TEMPLATE, METRICS_PORT=0)


@pytest.fixture
def client(settings: Settings, upstream: FakeUpstream):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    app = create_app(settings, http_client=http_client)
    with TestClient(app) as test_client:
        yield test_client


def image(**overrides) -> dict:
    entry = {"title": "T", "prompt": "P", "user": {"displayName": "U"}, "url": "http://x"}
    entry.update(overrides)
    return entry


def page(*entries: dict) -> dict:
    return {"pageProps": {"data": list(entries)}}
