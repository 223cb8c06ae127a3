"""Client for the external analysis webhook.

Submissions are POSTed as JSON. The response body is treated as an
acknowledgement only; no retries are performed here.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel

from app.config import get_settings
from app.errors import NetworkError, NonSuccessStatusError
from app.models.request import AnalysisRequest
from app.models.symbol import TradingPairSymbol

logger = logging.getLogger(__name__)


class WebhookAck(BaseModel):
    """Successful reply from the analysis webhook."""

    request_id: str
    status_code: int
    payload: Optional[Any] = None


class AnalysisDispatcher:
    """Sends analysis requests to the webhook over a shared async client."""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the dispatcher.

        Args:
            webhook_url: Target URL (defaults to settings)
            timeout: Per-request timeout in seconds (defaults to settings)
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests
        """
        settings = get_settings()
        self.webhook_url = webhook_url or settings.analysis_webhook_url
        self.timeout = timeout if timeout is not None else settings.analysis_webhook_timeout_seconds
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP async client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={"Content-Type": "application/json"},
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def dispatch(
        self,
        symbol: TradingPairSymbol,
        request_id: Optional[str] = None,
    ) -> WebhookAck:
        """Submit a trading pair for analysis.

        Args:
            symbol: Validated trading pair
            request_id: Token to bind the reply to; generated when omitted

        Returns:
            WebhookAck for the request

        Raises:
            NonSuccessStatusError: Webhook replied with a non-2xx status
            NetworkError: Request could not be sent, timed out, was dropped
                or failed with any other unexpected error
        """
        request = AnalysisRequest.for_symbol(symbol, request_id=request_id)
        client = self._get_client()

        logger.debug(f"Webhook request {request.request_id}: {symbol}")
        try:
            response = await client.post(self.webhook_url, json=request.to_wire())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Webhook error for {symbol}: {e.response.status_code}")
            raise NonSuccessStatusError(e.response.status_code) from e
        except httpx.RequestError as e:
            error_detail = str(e) or f"{type(e).__name__}: {repr(e)}"
            logger.error(f"Webhook connection error for {symbol}: {error_detail}")
            raise NetworkError(e) from e
        except Exception as e:
            logger.error(f"Unexpected webhook failure for {symbol}: {type(e).__name__}: {e}")
            raise NetworkError(e) from e

        try:
            payload = response.json()
        except ValueError:
            payload = None

        logger.info(f"Webhook acknowledged {request.request_id} ({symbol}): {response.status_code}")
        return WebhookAck(
            request_id=request.request_id,
            status_code=response.status_code,
            payload=payload,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None


# Singleton instance
_dispatcher: Optional[AnalysisDispatcher] = None


def get_analysis_dispatcher() -> AnalysisDispatcher:
    """Get the shared dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = AnalysisDispatcher()
    return _dispatcher
