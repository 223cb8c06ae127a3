"""Pure helpers for trading pair input."""

from .symbols import (
    POPULAR_PAIRS,
    normalize_symbol,
    validate_trading_pair,
    is_valid_trading_pair,
)

__all__ = [
    "POPULAR_PAIRS",
    "normalize_symbol",
    "validate_trading_pair",
    "is_valid_trading_pair",
]
