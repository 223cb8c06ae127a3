"""Storage module for in-memory lookup data.

Live sessions are held in ``app.storage.session_store``.
"""

from app.storage.analysis_lookup import AnalysisLookup, StaticAnalysisLookup, get_analysis_lookup
from app.storage.market_stats import get_market_stats

__all__ = [
    "AnalysisLookup",
    "StaticAnalysisLookup",
    "get_analysis_lookup",
    "get_market_stats",
]
