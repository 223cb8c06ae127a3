"""FastAPI application for CryptoTrader AI - trading pair analysis dashboard backend."""

import logging
from contextlib import asynccontextmanager
from typing import List

from fastapi import Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.config import get_settings
from app.errors import SymbolValidationError
from app.middleware.rate_limit import limiter, rate_limit_analyze, rate_limit_sessions
from app.models.market import MarketOverviewResponse
from app.models.request import InputUpdate
from app.models.session import SessionView
from app.services.analysis_dispatcher import get_analysis_dispatcher
from app.services.session import AnalysisSession
from app.storage.market_stats import get_market_stats
from app.storage.session_store import SessionStore, get_session_store
from app.tools.symbols import POPULAR_PAIRS, normalize_symbol, validate_trading_pair

# Configure logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info("Starting CryptoTrader AI backend...")
    settings = get_settings()
    logger.info(f"Environment: {settings.app_env}")
    logger.info(f"Analysis webhook: {settings.analysis_webhook_url} (timeout {settings.analysis_webhook_timeout_seconds}s)")

    yield

    # Cleanup
    get_session_store().close_all()
    await get_analysis_dispatcher().aclose()
    logger.info("Shutting down CryptoTrader AI backend...")


# Initialize FastAPI app
app = FastAPI(
    title="CryptoTrader AI API",
    description="Trading pair analysis with AI-generated buy/sell/hold suggestions",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS based on environment
if settings.is_production and settings.cors_origin_list:
    cors_origins = settings.cors_origin_list
else:
    # Development: Allow all origins
    cors_origins = ["*"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(self, request, call_next) -> Response:
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        # HSTS header for production (HTTPS only)
        if settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"

        return response


app.add_middleware(SecurityHeadersMiddleware)


def _require_session(session_id: str, store: SessionStore) -> AnalysisSession:
    session = store.get_session(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
    return session


@app.get("/")
async def root():
    """Root endpoint - API health check."""
    return {
        "service": "CryptoTrader AI API",
        "version": "1.0.0",
        "status": "operational",
        "endpoints": {
            "market_overview": "/market/overview",
            "popular_pairs": "/pairs/popular",
            "validate_pair": "/pairs/validate",
            "sessions": "/sessions",
            "session": "/sessions/{session_id}",
            "session_input": "/sessions/{session_id}/input",
            "session_submit": "/sessions/{session_id}/submit",
            "session_quick_pick": "/sessions/{session_id}/quick-pick/{symbol}",
            "health": "/health",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check(store: SessionStore = Depends(get_session_store)):
    """Health check endpoint."""
    settings = get_settings()
    return {
        "status": "healthy",
        "webhook_configured": bool(settings.analysis_webhook_url),
        "active_sessions": len(store),
    }


@app.get("/market/overview", response_model=MarketOverviewResponse)
async def market_overview():
    """Static market overview cards shown above the search box."""
    return MarketOverviewResponse(stats=get_market_stats())


@app.get("/pairs/popular", response_model=List[str])
async def popular_pairs():
    """Quick-pick trading pairs in display order."""
    return POPULAR_PAIRS


@app.get("/pairs/validate")
async def validate_pair(symbol: str = Query(..., max_length=32)):
    """Validate a trading pair without submitting it."""
    try:
        pair = validate_trading_pair(symbol)
    except SymbolValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"reason": e.reason.value, "message": str(e)}
        )
    return {"symbol": pair.value, "quote_currency": pair.quote_currency, "valid": True}


@app.post("/sessions", response_model=SessionView, status_code=status.HTTP_201_CREATED)
@rate_limit_sessions
async def create_session(request: Request, store: SessionStore = Depends(get_session_store)):
    """Start a new dashboard session."""
    session = store.create_session()
    return SessionView.from_state(session.session_id, session.state)


@app.get("/sessions/{session_id}", response_model=SessionView)
async def get_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """Current session view, including which panel to show."""
    session = _require_session(session_id, store)
    return SessionView.from_state(session.session_id, session.state)


@app.put("/sessions/{session_id}/input", response_model=SessionView)
async def update_input(
    session_id: str,
    update: InputUpdate,
    store: SessionStore = Depends(get_session_store),
):
    """Record what the user typed; clears any inline error."""
    session = _require_session(session_id, store)
    state = session.start_typing(update.text)
    return SessionView.from_state(session.session_id, state)


@app.post("/sessions/{session_id}/submit", response_model=SessionView)
@rate_limit_analyze
async def submit_session(
    request: Request,
    session_id: str,
    wait: bool = Query(False, description="Wait for the analysis to settle before responding"),
    store: SessionStore = Depends(get_session_store),
):
    """Validate the current input and send it for analysis."""
    session = _require_session(session_id, store)
    task = session.submit()
    if task is not None and wait:
        await task
    return SessionView.from_state(session.session_id, session.state)


@app.post("/sessions/{session_id}/quick-pick/{symbol}", response_model=SessionView)
@rate_limit_analyze
async def quick_pick(
    request: Request,
    session_id: str,
    symbol: str,
    wait: bool = Query(False, description="Wait for the analysis to settle before responding"),
    store: SessionStore = Depends(get_session_store),
):
    """Analyze one of the popular pairs, as if typed and submitted."""
    session = _require_session(session_id, store)
    pair = normalize_symbol(symbol)
    if pair not in POPULAR_PAIRS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{pair} is not a quick-pick pair; submit it instead",
        )
    task = session.quick_pick(pair)
    if task is not None and wait:
        await task
    return SessionView.from_state(session.session_id, session.state)


@app.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
async def end_session(session_id: str, store: SessionStore = Depends(get_session_store)):
    """End a session and drop any in-flight analysis."""
    if not store.end_session(session_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session {session_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
