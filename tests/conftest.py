from __future__ import annotations

import inspect
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Callable, List

import httpx
import pytest

from dumbmoney_mcp.client import DumbMoneyClient, build_http_client
from dumbmoney_mcp.config import Settings
from dumbmoney_mcp.dispatcher import Dispatcher

MINT = "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R"
WALLET = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"


class NetworkSpy:
    """Records every outbound request and answers with `responder`."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.responder: Callable[[httpx.Request], Any] = lambda request: httpx.Response(200, json={})

    async def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responder(request)
        if inspect.isawaitable(response):
            response = await response
        return response

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)


@pytest.fixture
def spy() -> NetworkSpy:
    return NetworkSpy()


@pytest.fixture
def make_dispatcher(spy: NetworkSpy):
    @asynccontextmanager
    async def factory(api_key: str = "") -> AsyncIterator[Dispatcher]:
        settings = Settings(api_key=api_key)
        async with build_http_client(settings, transport=spy.transport()) as http_client:
            yield Dispatcher(DumbMoneyClient(http_client, api_key=api_key), api_key=api_key)

    return factory
