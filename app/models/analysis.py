"""Analysis records shown on the result panel."""

from enum import Enum
from typing import Tuple
from pydantic import BaseModel, Field


class SuggestionAction(str, Enum):
    """Recommended trade direction."""
    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class RiskLevel(str, Enum):
    """Risk attached to a suggestion."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TradeSuggestion(BaseModel):
    """One buy/sell/hold suggestion for a trading pair.

    Target price and stop loss are not ordered relative to the action; a buy
    with target above stop loss is convention only.

    Attributes:
        action: Buy, sell or hold
        confidence: Confidence score (0-100)
        rationale: Why the suggestion was made
        target_price: Price target
        stop_loss: Stop loss price
        timeframe: Free-text holding period, e.g. '1-2 weeks'
        risk_level: Low, medium or high
    """

    action: SuggestionAction = Field(
        ...,
        description="Recommended trade direction"
    )
    confidence: int = Field(
        ...,
        description="Confidence score from 0 to 100",
        ge=0,
        le=100
    )
    rationale: str = Field(
        ...,
        description="Explanation of the suggestion",
        min_length=1
    )
    target_price: float = Field(
        ...,
        description="Price target"
    )
    stop_loss: float = Field(
        ...,
        description="Stop loss price"
    )
    timeframe: str = Field(
        ...,
        description="Expected holding period, e.g., '3-5 days'"
    )
    risk_level: RiskLevel = Field(
        ...,
        description="Risk level of the trade"
    )

    model_config = {"frozen": True}


class CoinAnalysis(BaseModel):
    """Analysis of one trading pair with its ordered suggestions.

    Suggestions are kept in priority order; the first one is the headline.
    """

    symbol: str = Field(
        ...,
        description="Trading pair symbol, e.g. BTCUSDT"
    )
    display_name: str = Field(
        ...,
        description="Human-readable asset name, e.g. Bitcoin"
    )
    current_price: float = Field(
        ...,
        description="Current price in the quote currency",
        gt=0
    )
    change_24h: float = Field(
        ...,
        description="Signed 24h change in percent"
    )
    market_cap: str = Field(
        ...,
        description="Formatted market capitalization, e.g. '$847.2B'"
    )
    volume: str = Field(
        ...,
        description="Formatted 24h volume, e.g. '$15.2B'"
    )
    suggestions: Tuple[TradeSuggestion, ...] = Field(
        ...,
        description="Suggestions in display priority order",
        min_length=1
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "symbol": "SOLUSDT",
                    "display_name": "Solana",
                    "current_price": 98.75,
                    "change_24h": 5.67,
                    "market_cap": "$44.3B",
                    "volume": "$1.8B",
                    "suggestions": [
                        {
                            "action": "buy",
                            "confidence": 89,
                            "rationale": "Clean breakout above key resistance.",
                            "target_price": 115,
                            "stop_loss": 92,
                            "timeframe": "2-3 weeks",
                            "risk_level": "low"
                        }
                    ]
                }
            ]
        }
    }

    @property
    def is_up(self) -> bool:
        return self.change_24h >= 0
