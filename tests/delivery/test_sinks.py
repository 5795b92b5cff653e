"""Tests for output sinks."""

import io
import json
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest

from hfscore.delivery import MemorySink, StdoutAdvisorySink, TelemetrySink
from hfscore.errors import DeliveryError
from hfscore.logging.config import log_advisory, log_score_frame
from hfscore.models.scores import Advisory, Direction, LevelSet, ScoreFrame

OPEN_TIME = datetime(2024, 1, 1, 12, tzinfo=timezone.utc)


@pytest.fixture
def levels() -> LevelSet:
    return LevelSet(
        direction=Direction.BUY, reference_price=1.1000, atr=0.0010, pip_size=0.0001,
        atr_pips=10.0, sl_pips=-10.0, tp1_pips=15.0, tp2_pips=25.0, tp3_pips=40.0,
        sl_price=1.0990, tp1_price=1.1015, tp2_price=1.1025, tp3_price=1.1040
    )


@pytest.fixture
def frame(levels) -> ScoreFrame:
    return ScoreFrame(
        index=30, open_time=OPEN_TIME, close=1.1000,
        rsi_score=1.0, stoch_rsi_score=0.0, macd_score=0.3, ema_score=1.0, mfi_score=1.0,
        combined_score=0.625, confidence=0.625, threshold_pos=0.55, threshold_neg=-0.55,
        rsi=100.0, atr=0.0010, warmed_up=True, levels=levels
    )


@pytest.fixture
def advisory(levels) -> Advisory:
    return Advisory(
        index=30, open_time=OPEN_TIME, direction=Direction.BUY,
        combined_score=0.625, confidence_pct=62.5, threshold_pct=55.0, levels=levels
    )


class TestMemorySink:
    """Test in-memory collection."""

    def test_collects(self, frame, advisory):
        sink = MemorySink()
        sink.emit(frame, advisory, "EURUSD")
        sink.emit(frame, None, "EURUSD")

        assert sink.frames == [frame, frame]
        assert sink.advisories == [advisory]
        assert sink.get_stats()["delivery_count"] == 2

    def test_clear(self, frame, advisory):
        sink = MemorySink()
        sink.emit(frame, advisory, "EURUSD")
        sink.clear()
        assert sink.frames == []
        assert sink.advisories == []

    def test_accepts_transient_only_when_opted_in(self, frame):
        transient = ScoreFrame(index=31, open_time=None, close=1.1, is_final=False)

        assert MemorySink().accepts(frame)
        assert not MemorySink().accepts(transient)
        assert MemorySink(include_transient=True).accepts(transient)


class TestStdoutAdvisorySink:
    """Test advisory printing."""

    def test_json_format(self, frame, advisory):
        stream = io.StringIO()
        sink = StdoutAdvisorySink(stream=stream)
        sink.emit(frame, advisory, "EURUSD")

        payload = json.loads(stream.getvalue())
        assert payload["instrument"] == "EURUSD"
        assert payload["direction"] == "BUY"
        assert payload["confidence_pct"] == 62.5
        assert payload["sl_price"] == 1.0990
        assert payload["open_time"] == "2024-01-01T12:00:00+00:00"

    def test_pretty_format(self, frame, advisory):
        stream = io.StringIO()
        sink = StdoutAdvisorySink(format="pretty", stream=stream)
        sink.emit(frame, advisory, "EURUSD")

        output = stream.getvalue()
        assert "[EURUSD #30]" in output
        assert "BUY" in output
        assert "62.5%" in output
        assert "SL=-10.0p" in output
        assert "TP3=+40.0p" in output

    def test_no_advisory_prints_nothing(self, frame):
        stream = io.StringIO()
        sink = StdoutAdvisorySink(stream=stream)
        sink.emit(frame, None, "EURUSD")

        assert stream.getvalue() == ""
        assert sink.get_stats()["delivery_count"] == 0

    def test_closed_stream_raises_delivery_error(self, frame, advisory):
        stream = io.StringIO()
        stream.close()
        sink = StdoutAdvisorySink(stream=stream)

        with pytest.raises(DeliveryError) as exc_info:
            sink.emit(frame, advisory, "EURUSD")

        assert exc_info.value.sink_name == "stdout"
        assert sink.get_stats()["error_count"] == 1
        assert sink.health_check() is False


class TestTelemetrySink:
    """Test structured telemetry output."""

    def test_logs_frame_and_advisory(self, frame, advisory):
        sink = TelemetrySink()
        with patch("hfscore.delivery.telemetry.log_score_frame") as mock_frame, \
                patch("hfscore.delivery.telemetry.log_advisory") as mock_advisory:
            sink.emit(frame, advisory, "EURUSD")

        mock_frame.assert_called_once_with(sink.telemetry_logger, "EURUSD", frame)
        mock_advisory.assert_called_once_with(sink.telemetry_logger, "EURUSD", advisory)

    def test_skips_frames_before_warmup(self):
        sink = TelemetrySink()
        cold = ScoreFrame(index=3, open_time=OPEN_TIME, close=1.1)
        with patch("hfscore.delivery.telemetry.log_score_frame") as mock_frame:
            sink.emit(cold, None, "EURUSD")

        mock_frame.assert_not_called()

    def test_disabled(self, frame):
        sink = TelemetrySink(enabled=False)
        with patch("hfscore.delivery.telemetry.log_score_frame") as mock_frame:
            sink.emit(frame, None, "EURUSD")

        mock_frame.assert_not_called()


class TestTelemetryHelpers:
    """Test the event shape of the logging helpers."""

    def test_log_score_frame_binds_levels(self, frame):
        logger = Mock()
        log_score_frame(logger, "EURUSD", frame)

        first_bind = logger.bind.call_args.kwargs
        assert first_bind["instrument_id"] == "EURUSD"
        assert first_bind["bar_index"] == 30
        assert first_bind["direction"] == "BUY"
        assert first_bind["confidence_pct"] == 62.5
        assert first_bind["scores"]["macd"] == 0.3

        level_bind = logger.bind.return_value.bind.call_args.kwargs
        assert level_bind["sl_pips"] == -10.0
        assert level_bind["tp1_pips"] == 15.0
        logger.bind.return_value.bind.return_value.info.assert_called_once_with("Score frame")

    def test_log_score_frame_without_levels(self):
        logger = Mock()
        log_score_frame(logger, "EURUSD", ScoreFrame(index=1, open_time=None, close=1.0))

        logger.bind.return_value.bind.assert_not_called()
        logger.bind.return_value.info.assert_called_once_with("Score frame")

    def test_log_advisory_is_warning(self, advisory):
        logger = Mock()
        log_advisory(logger, "EURUSD", advisory)

        assert logger.bind.call_args.kwargs["direction"] == "BUY"
        logger.bind.return_value.warning.assert_called_once_with("Advisory signal")
