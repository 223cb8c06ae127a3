"""Maps a dispatch result onto an AnalysisOutcome."""

import logging
from typing import Union

from app.errors import TransportError
from app.models.outcome import AnalysisOutcome, Found, NotFound, TransportFailure
from app.models.symbol import TradingPairSymbol
from app.services.analysis_dispatcher import WebhookAck
from app.storage.analysis_lookup import AnalysisLookup

logger = logging.getLogger(__name__)

DispatchResult = Union[WebhookAck, TransportError]


class ResultResolver:
    """Turns webhook acknowledgements and failures into outcomes.

    The acknowledgement payload is not consumed yet; the analysis comes from
    the injected lookup. Swapping in a payload-parsing lookup does not change
    this contract.
    """

    def __init__(self, lookup: AnalysisLookup):
        self.lookup = lookup

    def resolve(self, symbol: TradingPairSymbol, dispatch_result: DispatchResult) -> AnalysisOutcome:
        if isinstance(dispatch_result, TransportError):
            logger.warning(f"Analysis for {symbol} failed: {dispatch_result}")
            return TransportFailure(reason=str(dispatch_result))

        analysis = self.lookup.lookup(symbol.value)
        if analysis is None:
            return NotFound(symbol=symbol.value)
        return Found(analysis=analysis)
