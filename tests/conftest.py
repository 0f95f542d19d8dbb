"""
Shared fixtures: a configured API key and an httpx client whose transport is
a MockTransport, so no test touches the network.
"""
from typing import Callable, List

import httpx
import pytest

from fmp_client import Config, set_http_client

TEST_API_KEY = "test-key-0123456789"


class FakeFMP:
    """
    Records every request and answers with a canned response.

    Usage:
        fake_fmp.respond(json=[{"symbol": "AAPL"}])
        fake_fmp.respond(status_code=403, json={"Error Message": "..."})
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._handler: Callable[[httpx.Request], httpx.Response] = (
            lambda request: httpx.Response(200, json=[])
        )

    def respond(self, status_code: int = 200, json=None, text: str = None, content: bytes = None):
        def handler(request):
            if content is not None:
                return httpx.Response(status_code, content=content)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=json)
        self._handler = handler

    def raise_error(self, exc: Exception):
        def handler(request):
            raise exc
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_params(self) -> dict:
        return dict(self.last_request.url.params)


@pytest.fixture
def api_key(monkeypatch):
    """Configure a known API key and restore the previous state afterwards"""
    monkeypatch.delenv("FMP_API_KEY", raising=False)
    Config.set_fmp_api_key(TEST_API_KEY)
    yield TEST_API_KEY
    Config.set_fmp_api_key(None)


@pytest.fixture
def fake_fmp(api_key):
    """Route every request through a FakeFMP instance"""
    fake = FakeFMP()
    client = httpx.Client(transport=httpx.MockTransport(fake))
    set_http_client(client)
    yield fake
    client.close()
    set_http_client(None)


