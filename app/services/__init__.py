"""Services module for dispatching, resolving and session handling."""

from app.services.analysis_dispatcher import AnalysisDispatcher, WebhookAck, get_analysis_dispatcher
from app.services.result_resolver import ResultResolver
from app.services.session import AnalysisSession, apply_event

__all__ = [
    "AnalysisDispatcher",
    "WebhookAck",
    "get_analysis_dispatcher",
    "ResultResolver",
    "AnalysisSession",
    "apply_event",
]
