"""Static market overview figures shown on the dashboard header."""

from typing import List

from app.models.market import MarketStat

MARKET_STATS: List[MarketStat] = [
    MarketStat(label="Market Cap", value="$1.2T", change="+2.4%", positive=True),
    MarketStat(label="24h Volume", value="$85.3B", change="+12.8%", positive=True),
    MarketStat(label="Active Traders", value="1.2M", change="+5.2%", positive=True),
    MarketStat(label="Fear & Greed", value="65", change="-3.1%", positive=False),
]


def get_market_stats() -> List[MarketStat]:
    return list(MARKET_STATS)
