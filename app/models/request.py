"""Request models: the outbound webhook body and API inputs."""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from app.models.symbol import TradingPairSymbol

REQUEST_ID_LENGTH = 9


def new_request_id() -> str:
    """Short alphanumeric token, unique enough to tell concurrent submissions apart."""
    return uuid.uuid4().hex[:REQUEST_ID_LENGTH]


def iso_timestamp(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class AnalysisRequest(BaseModel):
    """One submission to the external analysis service.

    Attributes:
        symbol: Validated trading pair
        issued_at: When the request was built (UTC)
        request_id: Token binding the eventual response to this submission
    """

    symbol: TradingPairSymbol
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str = Field(default_factory=new_request_id, min_length=1)

    model_config = {"frozen": True}

    @classmethod
    def for_symbol(cls, symbol: TradingPairSymbol, request_id: Optional[str] = None) -> "AnalysisRequest":
        if request_id is None:
            return cls(symbol=symbol)
        return cls(symbol=symbol, request_id=request_id)

    def to_wire(self) -> Dict[str, Any]:
        """JSON body expected by the webhook."""
        return {
            "tradingPair": self.symbol.value,
            "timestamp": iso_timestamp(self.issued_at),
            "requestId": self.request_id,
        }


class InputUpdate(BaseModel):
    """Request model for updating the session's input text."""

    text: str = Field(
        ...,
        description="Current contents of the trading pair input box",
        max_length=32,
        examples=["BTCUSDT", "ethusdt"]
    )
