"""Static market overview cards."""

from typing import List
from pydantic import BaseModel


class MarketStat(BaseModel):
    """One market overview card."""

    label: str
    value: str
    change: str
    positive: bool


class MarketOverviewResponse(BaseModel):
    """Market overview shown above the search box."""

    stats: List[MarketStat]
    status: str = "LIVE"
