"""Session snapshot and the panel it selects."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.models.analysis import CoinAnalysis
from app.models.outcome import AnalysisOutcome, Found, NotFound

DEFAULT_PLACEHOLDER = "BTCUSDT"
QUOTE_CURRENCY_HINT = "Must include quote currency (e.g., BTCUSDT, ETHUSDT, SOLUSDT)"


class DisplayPanel(str, Enum):
    """Which mutually exclusive panel the dashboard shows."""
    LOADING = "loading"
    ERROR = "error"
    RESULT = "result"
    NOT_FOUND = "not_found"
    NONE = "none"


class SessionState(BaseModel):
    """Immutable snapshot of one dashboard session.

    Transitions never mutate a snapshot; ``app.services.session.apply_event``
    returns a new one.

    Attributes:
        input_text: Current input box contents (uppercase)
        is_loading: A dispatch is in flight for ``pending_request_id``
        last_error: User-facing message for the inline error, if any
        last_result: Last settled Found or NotFound outcome
        pending_request_id: Request whose settlement is still awaited
        pending_symbol: Normalized symbol of the pending request
        has_searched: At least one submission passed validation
    """

    input_text: str = ""
    is_loading: bool = False
    last_error: Optional[str] = None
    last_result: Optional[AnalysisOutcome] = None
    pending_request_id: Optional[str] = None
    pending_symbol: Optional[str] = None
    has_searched: bool = False

    model_config = {"frozen": True}

    @property
    def active_panel(self) -> DisplayPanel:
        """Panel precedence: loading > error > result > not found > nothing."""
        if self.is_loading:
            return DisplayPanel.LOADING
        if self.last_error is not None:
            return DisplayPanel.ERROR
        if isinstance(self.last_result, Found):
            return DisplayPanel.RESULT
        if self.has_searched and isinstance(self.last_result, NotFound):
            return DisplayPanel.NOT_FOUND
        return DisplayPanel.NONE


class SessionView(BaseModel):
    """Render-ready view of a session returned by the API."""

    session_id: str = Field(..., description="Session identifier")
    state: SessionState = Field(..., description="Current session snapshot")
    panel: DisplayPanel = Field(..., description="Panel the dashboard should show")
    analysis: Optional[CoinAnalysis] = Field(
        None,
        description="Analysis to render (only when panel is 'result')"
    )
    not_found_symbol: Optional[str] = Field(
        None,
        description="Symbol the not-found panel refers to"
    )
    button_label: str = Field(..., description="Label of the analyze button")
    quote_currency_hint: str = Field(QUOTE_CURRENCY_HINT, description="Static input hint")

    @classmethod
    def from_state(cls, session_id: str, state: SessionState) -> "SessionView":
        panel = state.active_panel
        analysis = None
        not_found_symbol = None
        if panel == DisplayPanel.RESULT:
            analysis = state.last_result.analysis
        elif panel == DisplayPanel.NOT_FOUND:
            not_found_symbol = state.last_result.symbol
        return cls(
            session_id=session_id,
            state=state,
            panel=panel,
            analysis=analysis,
            not_found_symbol=not_found_symbol,
            button_label=f"Analyze {state.input_text or DEFAULT_PLACEHOLDER}",
        )
