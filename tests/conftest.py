"""Pytest configuration and shared fixtures."""

import asyncio
import json
from typing import Dict, List, Optional, Tuple

import httpx
import pytest

from app.errors import NetworkError
from app.models.symbol import TradingPairSymbol
from app.services.analysis_dispatcher import AnalysisDispatcher, WebhookAck
from app.services.result_resolver import ResultResolver
from app.storage.analysis_lookup import DEMO_ANALYSES, StaticAnalysisLookup

WEBHOOK_URL = "https://analysis.test/webhook/CryptoTraderAI"


class GatedDispatcher:
    """Dispatcher double whose replies are released per symbol by the test."""

    def __init__(self):
        self.calls: List[Tuple[str, Optional[str]]] = []
        self.gates: Dict[str, asyncio.Event] = {}
        self.failures: Dict[str, Exception] = {}

    def gate(self, symbol: str) -> asyncio.Event:
        return self.gates.setdefault(symbol, asyncio.Event())

    def release(self, symbol: str) -> None:
        self.gate(symbol).set()

    def release_all(self) -> None:
        for symbol, _ in self.calls:
            self.release(symbol)

    async def dispatch(self, symbol: TradingPairSymbol, request_id: Optional[str] = None) -> WebhookAck:
        self.calls.append((symbol.value, request_id))
        await self.gate(symbol.value).wait()
        if symbol.value in self.failures:
            raise self.failures[symbol.value]
        return WebhookAck(request_id=request_id, status_code=200, payload={"status": "received"})


class InstantDispatcher(GatedDispatcher):
    """Dispatcher double that answers immediately."""

    def gate(self, symbol: str) -> asyncio.Event:
        event = super().gate(symbol)
        event.set()
        return event


@pytest.fixture
def lookup() -> StaticAnalysisLookup:
    """Demo lookup with BTCUSDT, ETHUSDT and SOLUSDT."""
    return StaticAnalysisLookup(DEMO_ANALYSES)


@pytest.fixture
def resolver(lookup) -> ResultResolver:
    return ResultResolver(lookup)


@pytest.fixture
def gated_dispatcher() -> GatedDispatcher:
    return GatedDispatcher()


@pytest.fixture
def instant_dispatcher() -> InstantDispatcher:
    return InstantDispatcher()


@pytest.fixture
def network_failure() -> NetworkError:
    return NetworkError(ConnectionResetError("connection reset by peer"))


@pytest.fixture
def captured_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def webhook_transport(captured_requests) -> httpx.MockTransport:
    """Mock webhook that records requests and acknowledges them.

    ``ETHDOWNUSDT`` fails with a connection error.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        captured_requests.append(request)
        body = json.loads(request.content)
        if body["tradingPair"] == "ETHDOWNUSDT":
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"status": "received", "requestId": body["requestId"]})

    return httpx.MockTransport(handler)


@pytest.fixture
def mock_dispatcher(webhook_transport) -> AnalysisDispatcher:
    return AnalysisDispatcher(webhook_url=WEBHOOK_URL, timeout=5.0, transport=webhook_transport)
