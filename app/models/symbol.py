"""Trading pair value object."""

import re
from typing import Tuple

from pydantic import BaseModel, field_validator

# Recognized quote currencies, checked as suffixes of the normalized symbol
QUOTE_CURRENCIES: Tuple[str, ...] = ("USDT", "USDC", "BTC", "ETH", "BNB", "BUSD")

SYMBOL_PATTERN = re.compile(r"^[A-Z0-9]+$")


class TradingPairSymbol(BaseModel):
    """A normalized trading pair such as ``BTCUSDT``.

    Build instances through ``app.tools.symbols.validate_trading_pair``;
    direct construction re-checks the invariant and rejects anything that
    is not already normalized.
    """

    value: str

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def check_normalized(cls, v: str) -> str:
        if not SYMBOL_PATTERN.match(v):
            raise ValueError("trading pair must be uppercase alphanumeric")
        if not v.endswith(QUOTE_CURRENCIES):
            raise ValueError("trading pair must end with a recognized quote currency")
        return v

    @property
    def quote_currency(self) -> str:
        """Recognized quote currency this pair ends with."""
        return max((q for q in QUOTE_CURRENCIES if self.value.endswith(q)), key=len)

    def __str__(self) -> str:
        return self.value
