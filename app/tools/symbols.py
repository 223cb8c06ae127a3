"""Trading pair validation and the curated quick-pick list."""

import logging
from typing import List

from app.errors import SymbolValidationError, ValidationReason
from app.models.symbol import QUOTE_CURRENCIES, SYMBOL_PATTERN, TradingPairSymbol

logger = logging.getLogger(__name__)

# One-click shortcuts offered under the search box, in display order
POPULAR_PAIRS: List[str] = ["BTCUSDT", "ETHUSDT", "SOLUSDT", "ADAUSDT", "DOTUSDT"]


def normalize_symbol(raw: str) -> str:
    """Trim and uppercase raw input."""
    return raw.strip().upper()


def validate_trading_pair(raw: str) -> TradingPairSymbol:
    """Validate free-text input as a trading pair.

    Normalization is idempotent, so validating an already validated symbol
    returns an equal value.

    Args:
        raw: Text as typed by the user, any case, may be padded

    Returns:
        Normalized TradingPairSymbol

    Raises:
        SymbolValidationError: EMPTY when nothing is left after trimming,
            MISSING_QUOTE_CURRENCY when no recognized quote suffix is present,
            INVALID_CHARACTERS for anything outside A-Z and 0-9
    """
    normalized = normalize_symbol(raw)

    if not normalized:
        raise SymbolValidationError(ValidationReason.EMPTY, raw)
    if not normalized.endswith(QUOTE_CURRENCIES):
        raise SymbolValidationError(ValidationReason.MISSING_QUOTE_CURRENCY, raw)
    if not SYMBOL_PATTERN.match(normalized):
        raise SymbolValidationError(ValidationReason.INVALID_CHARACTERS, raw)

    return TradingPairSymbol(value=normalized)


def is_valid_trading_pair(raw: str) -> bool:
    """Check input without raising."""
    try:
        validate_trading_pair(raw)
    except SymbolValidationError as e:
        logger.debug(f"Rejected trading pair {raw!r}: {e.reason.value}")
        return False
    return True
