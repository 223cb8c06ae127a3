"""Tests for Pydantic models."""

import re
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import TypeAdapter, ValidationError

from app.models.analysis import CoinAnalysis, RiskLevel, SuggestionAction, TradeSuggestion
from app.models.outcome import AnalysisOutcome, Found, NotFound, TransportFailure
from app.models.request import AnalysisRequest, iso_timestamp, new_request_id
from app.models.session import DisplayPanel, SessionState, SessionView
from app.models.symbol import TradingPairSymbol
from app.storage.analysis_lookup import DEMO_ANALYSES


def make_suggestion(**overrides) -> TradeSuggestion:
    fields = dict(
        action="buy",
        confidence=70,
        rationale="Higher lows on the 4h chart.",
        target_price=110.0,
        stop_loss=95.0,
        timeframe="1 week",
        risk_level="medium",
    )
    fields.update(overrides)
    return TradeSuggestion(**fields)


class TestTradingPairSymbol:
    """Tests for TradingPairSymbol model."""

    def test_valid_symbol(self):
        symbol = TradingPairSymbol(value="ETHBTC")

        assert symbol.value == "ETHBTC"
        assert str(symbol) == "ETHBTC"
        assert symbol.quote_currency == "BTC"

    @pytest.mark.parametrize("value", ["btcusdt", " BTCUSDT", "DOGE", "", "BTC-USDT"])
    def test_rejects_unnormalized_values(self, value):
        """Direct construction re-checks the invariant."""
        with pytest.raises(ValidationError):
            TradingPairSymbol(value=value)

    def test_immutable(self):
        symbol = TradingPairSymbol(value="BTCUSDT")

        with pytest.raises(ValidationError):
            symbol.value = "ETHUSDT"

    def test_equality_and_hash(self):
        assert TradingPairSymbol(value="BTCUSDT") == TradingPairSymbol(value="BTCUSDT")
        assert len({TradingPairSymbol(value="BTCUSDT"), TradingPairSymbol(value="BTCUSDT")}) == 1


class TestAnalysisRequest:
    """Tests for the outbound webhook request."""

    def test_wire_format(self):
        request = AnalysisRequest(
            symbol=TradingPairSymbol(value="SOLUSDT"),
            issued_at=datetime(2024, 1, 2, 3, 4, 5, 678900, tzinfo=timezone.utc),
            request_id="abc123xyz",
        )

        assert request.to_wire() == {
            "tradingPair": "SOLUSDT",
            "timestamp": "2024-01-02T03:04:05.678Z",
            "requestId": "abc123xyz",
        }

    def test_defaults(self):
        """Test timestamp and request id are filled in."""
        request = AnalysisRequest.for_symbol(TradingPairSymbol(value="BTCUSDT"))
        wire = request.to_wire()

        assert re.match(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$", wire["timestamp"])
        assert re.match(r"^[0-9a-z]{9}$", wire["requestId"])

    def test_bound_request_id(self):
        request = AnalysisRequest.for_symbol(TradingPairSymbol(value="BTCUSDT"), request_id="r1")

        assert request.request_id == "r1"

    def test_request_ids_are_unique(self):
        ids = {new_request_id() for _ in range(1000)}

        assert len(ids) == 1000

    def test_iso_timestamp_converts_to_utc(self):
        moment = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert iso_timestamp(moment) == "2024-06-01T10:00:00.000Z"


class TestTradeSuggestion:
    """Tests for TradeSuggestion model."""

    def test_valid_suggestion(self):
        suggestion = make_suggestion()

        assert suggestion.action == SuggestionAction.BUY
        assert suggestion.risk_level == RiskLevel.MEDIUM

    @pytest.mark.parametrize("confidence", [-1, 101])
    def test_confidence_bounds(self, confidence):
        with pytest.raises(ValidationError):
            make_suggestion(confidence=confidence)

    def test_invalid_action(self):
        with pytest.raises(ValidationError):
            make_suggestion(action="short")

    def test_invalid_risk_level(self):
        with pytest.raises(ValidationError):
            make_suggestion(risk_level="extreme")

    def test_empty_rationale(self):
        with pytest.raises(ValidationError):
            make_suggestion(rationale="")

    def test_no_ordering_between_target_and_stop(self):
        """A buy with target below stop loss is allowed by the model."""
        suggestion = make_suggestion(action="buy", target_price=90.0, stop_loss=100.0)

        assert suggestion.target_price < suggestion.stop_loss


class TestCoinAnalysis:
    """Tests for CoinAnalysis model."""

    def test_requires_at_least_one_suggestion(self):
        with pytest.raises(ValidationError):
            CoinAnalysis(
                symbol="BTCUSDT",
                display_name="Bitcoin",
                current_price=43250,
                change_24h=2.45,
                market_cap="$847.2B",
                volume="$15.2B",
                suggestions=(),
            )

    def test_price_must_be_positive(self):
        with pytest.raises(ValidationError):
            CoinAnalysis(
                symbol="BTCUSDT",
                display_name="Bitcoin",
                current_price=0,
                change_24h=2.45,
                market_cap="$847.2B",
                volume="$15.2B",
                suggestions=(make_suggestion(),),
            )

    def test_suggestion_order_preserved(self):
        suggestions = [make_suggestion(action="hold"), make_suggestion(action="sell")]
        analysis = CoinAnalysis(
            symbol="ADAUSDT",
            display_name="Cardano",
            current_price=0.5,
            change_24h=-0.4,
            market_cap="$17.6B",
            volume="$420M",
            suggestions=suggestions,
        )

        assert [s.action for s in analysis.suggestions] == [SuggestionAction.HOLD, SuggestionAction.SELL]
        assert analysis.is_up is False

    def test_demo_analyses_use_distinct_actions(self):
        """Each demo pair shows a different headline action mix."""
        by_symbol = {a.symbol: a for a in DEMO_ANALYSES}

        assert set(by_symbol) == {"BTCUSDT", "ETHUSDT", "SOLUSDT"}
        assert [s.action.value for s in by_symbol["BTCUSDT"].suggestions] == ["buy", "hold"]
        assert [s.action.value for s in by_symbol["ETHUSDT"].suggestions] == ["sell", "buy"]
        assert [s.action.value for s in by_symbol["SOLUSDT"].suggestions] == ["buy"]


class TestAnalysisOutcome:
    """Tests for the outcome union."""

    def test_discriminated_parsing(self):
        adapter = TypeAdapter(AnalysisOutcome)

        assert isinstance(adapter.validate_python({"kind": "not_found", "symbol": "XYZUSDT"}), NotFound)
        assert isinstance(adapter.validate_python({"kind": "transport_failure", "reason": "x"}), TransportFailure)

    def test_found_round_trip(self):
        outcome = Found(analysis=DEMO_ANALYSES[0])
        parsed = TypeAdapter(AnalysisOutcome).validate_python(outcome.model_dump())

        assert parsed == outcome


class TestSessionPanel:
    """Tests for panel precedence on SessionState."""

    def test_initial_state(self):
        state = SessionState()

        assert state.input_text == ""
        assert state.is_loading is False
        assert state.last_error is None
        assert state.last_result is None
        assert state.active_panel == DisplayPanel.NONE

    def test_loading_wins(self):
        state = SessionState(
            is_loading=True,
            last_error="boom",
            last_result=Found(analysis=DEMO_ANALYSES[0]),
            has_searched=True,
        )

        assert state.active_panel == DisplayPanel.LOADING

    def test_error_beats_result(self):
        state = SessionState(last_error="boom", last_result=Found(analysis=DEMO_ANALYSES[0]), has_searched=True)

        assert state.active_panel == DisplayPanel.ERROR

    def test_result(self):
        state = SessionState(last_result=Found(analysis=DEMO_ANALYSES[0]), has_searched=True)

        assert state.active_panel == DisplayPanel.RESULT

    def test_not_found(self):
        state = SessionState(last_result=NotFound(symbol="XYZUSDT"), has_searched=True)

        assert state.active_panel == DisplayPanel.NOT_FOUND

    def test_typing_without_search_shows_nothing(self):
        """Typing alone is not a search; no not-found panel."""
        state = SessionState(input_text="XYZUSDT")

        assert state.active_panel == DisplayPanel.NONE


class TestSessionView:
    """Tests for SessionView rendering."""

    def test_result_view(self):
        state = SessionState(input_text="BTCUSDT", last_result=Found(analysis=DEMO_ANALYSES[0]), has_searched=True)
        view = SessionView.from_state("s1", state)

        assert view.panel == DisplayPanel.RESULT
        assert view.analysis.display_name == "Bitcoin"
        assert view.not_found_symbol is None
        assert view.button_label == "Analyze BTCUSDT"

    def test_not_found_view(self):
        state = SessionState(input_text="XYZUSDT", last_result=NotFound(symbol="XYZUSDT"), has_searched=True)
        view = SessionView.from_state("s1", state)

        assert view.panel == DisplayPanel.NOT_FOUND
        assert view.analysis is None
        assert view.not_found_symbol == "XYZUSDT"

    def test_placeholder_label(self):
        view = SessionView.from_state("s1", SessionState())

        assert view.button_label == "Analyze BTCUSDT"
        assert "quote currency" in view.quote_currency_hint
