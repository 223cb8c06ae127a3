"""Dashboard session state machine.

Transitions are pure functions from (state, event) to a new SessionState.
``AnalysisSession`` owns the current snapshot and runs each dispatch as an
asyncio task tagged with its request id, so a late reply for a superseded
request is dropped instead of overwriting newer state.
"""

import asyncio
import logging
import uuid
from dataclasses import dataclass
from typing import Optional, Set, Union

from app.errors import NetworkError, SymbolValidationError, TransportError, ValidationReason
from app.models.outcome import AnalysisOutcome, Found, NotFound, TransportFailure
from app.models.request import new_request_id
from app.models.session import SessionState
from app.models.symbol import TradingPairSymbol
from app.services.analysis_dispatcher import AnalysisDispatcher
from app.services.result_resolver import ResultResolver
from app.tools.symbols import validate_trading_pair

logger = logging.getLogger(__name__)

EMPTY_INPUT_MESSAGE = "Please enter a trading pair (e.g., BTCUSDT, ETHUSDT, SOLUSDT)"
MISSING_QUOTE_MESSAGE = "Please include the quote currency (e.g., BTCUSDT, ETHUSDT, SOLUSDT)"
INVALID_CHARACTERS_MESSAGE = "Trading pairs may only contain letters and digits (e.g., BTCUSDT)"
TRANSPORT_FAILURE_MESSAGE = "Failed to analyze trading pair. Please try again."


@dataclass(frozen=True)
class StartTyping:
    text: str


@dataclass(frozen=True)
class Submit:
    request_id: str


@dataclass(frozen=True)
class QuickPick:
    symbol: str
    request_id: str


@dataclass(frozen=True)
class Settle:
    request_id: str
    outcome: AnalysisOutcome


SessionEvent = Union[StartTyping, Submit, QuickPick, Settle]


def validation_message(error: SymbolValidationError) -> str:
    """User-facing message for a rejected trading pair."""
    if error.reason == ValidationReason.EMPTY:
        return EMPTY_INPUT_MESSAGE
    if error.reason == ValidationReason.INVALID_CHARACTERS:
        return INVALID_CHARACTERS_MESSAGE
    return MISSING_QUOTE_MESSAGE


def _start_typing(state: SessionState, event: StartTyping) -> SessionState:
    return state.model_copy(update={"input_text": event.text.upper(), "last_error": None})


def _submit(state: SessionState, event: Submit) -> SessionState:
    try:
        symbol = validate_trading_pair(state.input_text)
    except SymbolValidationError as e:
        return state.model_copy(update={"last_error": validation_message(e)})

    # The previous result is kept so a failed search does not clobber it;
    # the loading panel takes precedence while the request is in flight.
    return state.model_copy(update={
        "is_loading": True,
        "last_error": None,
        "pending_request_id": event.request_id,
        "pending_symbol": symbol.value,
        "has_searched": True,
    })


def _settle(state: SessionState, event: Settle) -> SessionState:
    if not state.is_loading or event.request_id != state.pending_request_id:
        logger.debug(f"Discarding stale settlement {event.request_id} (pending: {state.pending_request_id})")
        return state

    update = {"is_loading": False, "pending_request_id": None, "pending_symbol": None}
    outcome = event.outcome
    if isinstance(outcome, (Found, NotFound)):
        update["last_result"] = outcome
        update["last_error"] = None
    elif isinstance(outcome, TransportFailure):
        update["last_error"] = TRANSPORT_FAILURE_MESSAGE
    return state.model_copy(update=update)


def apply_event(state: SessionState, event: SessionEvent) -> SessionState:
    """Apply one event and return the resulting snapshot."""
    if isinstance(event, StartTyping):
        return _start_typing(state, event)
    if isinstance(event, Submit):
        return _submit(state, event)
    if isinstance(event, QuickPick):
        typed = _start_typing(state, StartTyping(event.symbol))
        return _submit(typed, Submit(event.request_id))
    if isinstance(event, Settle):
        return _settle(state, event)
    raise TypeError(f"Unknown session event: {event!r}")


class AnalysisSession:
    """One user's dashboard session.

    Must be driven from a running event loop; ``submit`` and ``quick_pick``
    schedule the dispatch and return immediately.
    """

    def __init__(
        self,
        dispatcher: AnalysisDispatcher,
        resolver: ResultResolver,
        session_id: Optional[str] = None,
    ):
        self.session_id = session_id or uuid.uuid4().hex
        self.dispatcher = dispatcher
        self.resolver = resolver
        self.state = SessionState()
        self._tasks: Set[asyncio.Task] = set()

    def _apply(self, event: SessionEvent) -> SessionState:
        self.state = apply_event(self.state, event)
        return self.state

    def start_typing(self, text: str) -> SessionState:
        return self._apply(StartTyping(text))

    def submit(self) -> Optional["asyncio.Task[SessionState]"]:
        """Validate the current input and dispatch it.

        Returns:
            The settlement task, or None when validation failed
        """
        request_id = new_request_id()
        return self._dispatch_if_accepted(self._apply(Submit(request_id)), request_id)

    def quick_pick(self, symbol: str) -> Optional["asyncio.Task[SessionState]"]:
        """Same as typing ``symbol`` and submitting."""
        request_id = new_request_id()
        return self._dispatch_if_accepted(self._apply(QuickPick(symbol, request_id)), request_id)

    def _dispatch_if_accepted(self, state: SessionState, request_id: str) -> Optional["asyncio.Task[SessionState]"]:
        if state.pending_request_id != request_id:
            logger.info(f"Session {self.session_id}: rejected input {state.input_text!r}")
            return None

        symbol = TradingPairSymbol(value=state.pending_symbol)
        logger.info(f"Session {self.session_id}: analyzing {symbol} (request {request_id})")
        task = asyncio.create_task(self._run(symbol, request_id))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, symbol: TradingPairSymbol, request_id: str) -> SessionState:
        try:
            result = await self.dispatcher.dispatch(symbol, request_id=request_id)
        except TransportError as e:
            result = e
        except Exception as e:
            logger.exception(f"Session {self.session_id}: dispatch of {symbol} failed unexpectedly")
            result = NetworkError(e)
        outcome = self.resolver.resolve(symbol, result)
        return self._apply(Settle(request_id, outcome))

    @property
    def in_flight(self) -> int:
        return len(self._tasks)

    def close(self) -> None:
        """Cancel in-flight dispatches; their results are never applied."""
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()
