"""Pydantic models for data validation and serialization."""

from .symbol import QUOTE_CURRENCIES, TradingPairSymbol
from .request import AnalysisRequest, InputUpdate
from .analysis import CoinAnalysis, TradeSuggestion, SuggestionAction, RiskLevel
from .outcome import AnalysisOutcome, Found, NotFound, TransportFailure
from .session import DisplayPanel, SessionState, SessionView
from .market import MarketStat, MarketOverviewResponse

__all__ = [
    "QUOTE_CURRENCIES",
    "TradingPairSymbol",
    "AnalysisRequest",
    "InputUpdate",
    "CoinAnalysis",
    "TradeSuggestion",
    "SuggestionAction",
    "RiskLevel",
    "AnalysisOutcome",
    "Found",
    "NotFound",
    "TransportFailure",
    "DisplayPanel",
    "SessionState",
    "SessionView",
    "MarketStat",
    "MarketOverviewResponse",
]
