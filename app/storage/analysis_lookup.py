"""Analysis lookup used by the result resolver.

The webhook only acknowledges submissions today, so the displayed analysis
comes from a static fixture keyed by exact uppercase symbol. Any object with
a matching ``lookup`` method can replace it.
"""

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from app.models.analysis import CoinAnalysis, RiskLevel, SuggestionAction, TradeSuggestion

logger = logging.getLogger(__name__)


class AnalysisLookup(Protocol):
    """Source of CoinAnalysis records."""

    def lookup(self, symbol: str) -> Optional[CoinAnalysis]:
        ...


class StaticAnalysisLookup:
    """In-memory lookup over a fixed set of analyses."""

    def __init__(self, analyses: Iterable[CoinAnalysis]):
        self._analyses: Dict[str, CoinAnalysis] = {a.symbol: a for a in analyses}

    def lookup(self, symbol: str) -> Optional[CoinAnalysis]:
        analysis = self._analyses.get(symbol)
        if analysis is None:
            logger.info(f"No analysis available for {symbol}")
        return analysis

    @property
    def symbols(self) -> List[str]:
        return list(self._analyses)


DEMO_ANALYSES = (
    CoinAnalysis(
        symbol="BTCUSDT",
        display_name="Bitcoin",
        current_price=43250,
        change_24h=2.45,
        market_cap="$847.2B",
        volume="$15.2B",
        suggestions=(
            TradeSuggestion(
                action=SuggestionAction.BUY,
                confidence=78,
                rationale="Strong support level reached with bullish divergence on RSI. Volume increasing on bounce.",
                target_price=46500,
                stop_loss=41800,
                timeframe="1-2 weeks",
                risk_level=RiskLevel.MEDIUM,
            ),
            TradeSuggestion(
                action=SuggestionAction.HOLD,
                confidence=65,
                rationale="Consolidating near resistance level. Wait for clear breakout confirmation above $44,000.",
                target_price=45000,
                stop_loss=42000,
                timeframe="3-5 days",
                risk_level=RiskLevel.LOW,
            ),
        ),
    ),
    CoinAnalysis(
        symbol="ETHUSDT",
        display_name="Ethereum",
        current_price=2650,
        change_24h=-1.23,
        market_cap="$318.7B",
        volume="$8.9B",
        suggestions=(
            TradeSuggestion(
                action=SuggestionAction.SELL,
                confidence=82,
                rationale="Bearish pennant formation with weakness below 20-day MA. Declining volume suggests further downside.",
                target_price=2400,
                stop_loss=2750,
                timeframe="1 week",
                risk_level=RiskLevel.HIGH,
            ),
            TradeSuggestion(
                action=SuggestionAction.BUY,
                confidence=45,
                rationale="Oversold conditions on daily timeframe. Potential bounce from $2,500 support level.",
                target_price=2800,
                stop_loss=2500,
                timeframe="2-3 days",
                risk_level=RiskLevel.MEDIUM,
            ),
        ),
    ),
    CoinAnalysis(
        symbol="SOLUSDT",
        display_name="Solana",
        current_price=98.75,
        change_24h=5.67,
        market_cap="$44.3B",
        volume="$1.8B",
        suggestions=(
            TradeSuggestion(
                action=SuggestionAction.BUY,
                confidence=89,
                rationale="Clean breakout above key resistance with strong ecosystem developments. High momentum continuation expected.",
                target_price=115,
                stop_loss=92,
                timeframe="2-3 weeks",
                risk_level=RiskLevel.LOW,
            ),
        ),
    ),
)


# Singleton instance
_lookup: Optional[StaticAnalysisLookup] = None


def get_analysis_lookup() -> StaticAnalysisLookup:
    """Get the shared demo lookup."""
    global _lookup
    if _lookup is None:
        _lookup = StaticAnalysisLookup(DEMO_ANALYSES)
    return _lookup
