"""Exceptions raised by the analysis pipeline.

Validation errors never leave the session; transport errors are converted
into ``TransportFailure`` outcomes by the result resolver.
"""

from enum import Enum


class ValidationReason(str, Enum):
    """Why a trading pair was rejected."""

    EMPTY = "empty"
    MISSING_QUOTE_CURRENCY = "missing_quote_currency"
    INVALID_CHARACTERS = "invalid_characters"


class SymbolValidationError(ValueError):
    """Raised when raw input is not a valid trading pair."""

    def __init__(self, reason: ValidationReason, raw: str):
        self.reason = reason
        self.raw = raw
        super().__init__(f"Invalid trading pair {raw!r}: {reason.value}")


class TransportError(Exception):
    """Base class for failures talking to the analysis webhook."""


class NonSuccessStatusError(TransportError):
    """The webhook answered with a non-2xx status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP error! status: {status_code}")


class NetworkError(TransportError):
    """The request could not be sent or the connection was dropped."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"Network error: {detail}")
