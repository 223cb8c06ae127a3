"""In-memory registry of live dashboard sessions.

Sessions live only as long as the process; nothing is written to disk.
"""

import logging
from collections import OrderedDict
from typing import Optional

from app.config import get_settings
from app.services.analysis_dispatcher import AnalysisDispatcher, get_analysis_dispatcher
from app.services.result_resolver import ResultResolver
from app.services.session import AnalysisSession
from app.storage.analysis_lookup import get_analysis_lookup

logger = logging.getLogger(__name__)


class SessionStore:
    """Holds sessions by id, evicting the oldest beyond ``max_sessions``."""

    def __init__(
        self,
        dispatcher: AnalysisDispatcher,
        resolver: ResultResolver,
        max_sessions: int = 1000,
    ):
        self.dispatcher = dispatcher
        self.resolver = resolver
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, AnalysisSession]" = OrderedDict()

    def create_session(self) -> AnalysisSession:
        session = AnalysisSession(self.dispatcher, self.resolver)
        self._sessions[session.session_id] = session
        logger.info(f"Session {session.session_id} started ({len(self._sessions)} active)")

        while len(self._sessions) > self.max_sessions:
            _, evicted = self._sessions.popitem(last=False)
            evicted.close()
            logger.info(f"Session {evicted.session_id} evicted")
        return session

    def get_session(self, session_id: str) -> Optional[AnalysisSession]:
        return self._sessions.get(session_id)

    def end_session(self, session_id: str) -> bool:
        session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.close()
        logger.info(f"Session {session_id} ended")
        return True

    def close_all(self) -> None:
        for session in self._sessions.values():
            session.close()
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


# Singleton instance
_store: Optional[SessionStore] = None


def get_session_store() -> SessionStore:
    """Get the singleton session store."""
    global _store
    if _store is None:
        _store = SessionStore(
            dispatcher=get_analysis_dispatcher(),
            resolver=ResultResolver(get_analysis_lookup()),
            max_sessions=get_settings().max_sessions,
        )
    return _store
