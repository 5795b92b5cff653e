"""
Main scoring engine coordinator.

Owns the bar history and indicator state for one instrument on one
timeframe, and turns every new bar into a ScoreFrame:
Bar → Indicators → Composite score → Levels → Advisory → Sinks
"""

import copy
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import structlog

from .config.defaults import ScoringConfig, get_default_config
from .config.loader import ConfigLoader, build_config
from .data.models import Bar, BarSeries, InstrumentSpec
from .delivery.base import BaseOutputSink
from .delivery.telemetry import TelemetrySink
from .metrics.calculator import IndicatorCalculator, IndicatorValues
from .models.scores import Advisory, Direction, ScoreFrame
from .scoring.composite import CompositeScorer
from .scoring.levels import LevelCalculator

logger = structlog.get_logger(__name__)


class ScoringEngine:
    """
    Streaming composite-score engine for a single instrument.

    Two evaluation modes:
    - advance(bar) commits a closed bar, advancing indicator state once.
    - peek(bar) scores the still-open bar against a snapshot of the
      committed state, which is restored afterwards. Repeated peeks for the
      same open bar overwrite each other; this is the only non-idempotent
      output of the engine.

    Replaying the same closed bars into a fresh engine reproduces identical
    frames.
    """

    def __init__(
        self,
        config: Optional[ScoringConfig] = None,
        instrument: Optional[InstrumentSpec] = None,
        sinks: Optional[Iterable[BaseOutputSink]] = None
    ) -> None:
        """
        Initialize the engine with a validated configuration.

        Args:
            config: Scoring configuration, defaults when None
            instrument: Instrument metadata for pip conversions
            sinks: Output sinks receiving frames and advisories
        """
        self.config = config or get_default_config()
        self.instrument = instrument or InstrumentSpec()
        self.sinks: list[BaseOutputSink] = list(sinks or [])

        if self.config.telemetry.enabled and not any(isinstance(s, TelemetrySink) for s in self.sinks):
            self.sinks.append(TelemetrySink())

        self.logger = logger.bind(instrument=self.instrument.symbol)
        self._build_state()

        self.logger.info(
            "Scoring engine initialized",
            warmup=self.warmup,
            pip_size=self.level_calculator.pip_size,
            threshold_pct=self.config.signal.threshold_pct,
            sinks=[s.name for s in self.sinks]
        )

    @classmethod
    def from_config_dict(
        cls,
        config: dict[str, Any],
        instrument: Optional[InstrumentSpec] = None,
        sinks: Optional[Iterable[BaseOutputSink]] = None
    ) -> "ScoringEngine":
        """
        Build an engine from a nested config dict.

        Raises:
            ConfigurationError: If the config fails validation
        """
        return cls(build_config(config), instrument, sinks)

    @classmethod
    def for_instrument(
        cls,
        instrument: InstrumentSpec,
        config_dir: Optional[Union[str, Path]] = None,
        overrides: Optional[dict[str, Any]] = None,
        sinks: Optional[Iterable[BaseOutputSink]] = None
    ) -> "ScoringEngine":
        """
        Build an engine with defaults < instruments.yaml < overrides precedence.

        Raises:
            ConfigurationError: If the merged config fails validation
        """
        loader = ConfigLoader.create(Path(config_dir) if config_dir is not None else None)
        return cls(loader.load_config(instrument.symbol, overrides), instrument, sinks)

    def _build_state(self) -> None:
        self.series = BarSeries()
        self.calculator = IndicatorCalculator(self.config)
        self.scorer = CompositeScorer(self.calculator.warmup)
        self.level_calculator = LevelCalculator(
            self.config.levels,
            self.config.pip_size,
            self.instrument
        )
        self._frames: list[ScoreFrame] = []
        self._transient: Optional[ScoreFrame] = None

    @property
    def warmup(self) -> int:
        """First bar index with non-neutral scores"""
        return self.calculator.warmup

    @property
    def bar_count(self) -> int:
        return len(self.series)

    @property
    def frames(self) -> tuple[ScoreFrame, ...]:
        """Committed frames, parallel to the bar history"""
        return tuple(self._frames)

    @property
    def last_frame(self) -> Optional[ScoreFrame]:
        """Most recent committed frame"""
        return self._frames[-1] if self._frames else None

    @property
    def current_frame(self) -> Optional[ScoreFrame]:
        """Transient frame of the open bar if one was peeked, else the last committed frame"""
        return self._transient or self.last_frame

    def advance(self, bar: Bar) -> ScoreFrame:
        """
        Commit a closed bar and score it.

        Args:
            bar: Next closed bar; its open time must be after the last bar's

        Returns:
            Committed ScoreFrame for the bar

        Raises:
            TemporalDataError: If the bar is out of order; state is untouched
        """
        self.series.check_next(bar)
        values = self.calculator.update(bar, len(self.series))
        self.series.append(bar)

        frame = self._build_frame(bar, values, is_final=True)
        self._frames.append(frame)
        self._transient = None

        self.logger.debug(
            "Bar committed",
            bar_index=frame.index,
            open_time=bar.open_time.isoformat(),
            close=bar.close,
            combined=frame.combined_score
        )

        self._deliver(frame, self.evaluate_advisory(frame))
        return frame

    def peek(self, partial_bar: Bar) -> ScoreFrame:
        """
        Score the still-open bar without committing it.

        Indicator state is snapshotted, advanced by the partial bar and then
        rolled back, so committed state is unchanged.

        Args:
            partial_bar: Current state of the bar that has not closed yet

        Returns:
            Transient ScoreFrame (is_final=False) for index bar_count

        Raises:
            TemporalDataError: If the bar is not after the last committed bar
        """
        self.series.check_next(partial_bar)

        snapshot = copy.deepcopy(self.calculator)
        try:
            values = self.calculator.update(partial_bar, len(self.series))
        finally:
            self.calculator = snapshot

        frame = self._build_frame(partial_bar, values, is_final=False)
        self._transient = frame
        self._deliver(frame, self.evaluate_advisory(frame))
        return frame

    def replay(self, bars: Iterable[Bar]) -> list[ScoreFrame]:
        """Advance over a sequence of closed bars (backfill) and return their frames"""
        frames = [self.advance(bar) for bar in bars]

        self.logger.info(
            "Replay complete",
            bars_replayed=len(frames),
            bar_count=self.bar_count,
            last_combined=frames[-1].combined_score if frames else None
        )
        return frames

    def reset(self) -> None:
        """Discard all bars and indicator state"""
        self._build_state()
        self.logger.info("Scoring engine reset")

    def evaluate_advisory(self, frame: ScoreFrame) -> Optional[Advisory]:
        """
        Advisory for a frame, if its confidence reaches the threshold.

        Frames below warmup never raise an advisory.
        """
        if not frame.warmed_up:
            return None

        threshold_pct = self.config.signal.threshold_pct
        if frame.confidence_pct < threshold_pct:
            return None

        return Advisory(
            index=frame.index,
            open_time=frame.open_time,
            direction=Direction.from_score(frame.combined_score),
            combined_score=frame.combined_score,
            confidence_pct=frame.confidence_pct,
            threshold_pct=threshold_pct,
            levels=frame.levels
        )

    def _build_frame(self, bar: Bar, values: IndicatorValues, is_final: bool) -> ScoreFrame:
        score = self.scorer.score(values)
        threshold = self.config.signal.threshold_pct / 100.0
        levels = self.level_calculator.calculate(bar.close, values.atr, score.combined)

        return ScoreFrame(
            index=values.index,
            open_time=bar.open_time,
            close=bar.close,
            rsi_score=score.rsi,
            stoch_rsi_score=score.stoch_rsi,
            macd_score=score.macd,
            ema_score=score.ema,
            mfi_score=score.mfi,
            combined_score=score.combined,
            confidence=score.confidence,
            threshold_pos=threshold,
            threshold_neg=-threshold,
            rsi=values.rsi,
            atr=values.atr,
            warmed_up=self.calculator.is_warmed_up(values.index),
            is_final=is_final,
            levels=levels
        )

    def _deliver(self, frame: ScoreFrame, advisory: Optional[Advisory]) -> None:
        """Hand a frame to every sink; a failing sink does not stop scoring."""
        for sink in self.sinks:
            if not sink.accepts(frame):
                continue
            try:
                sink.emit(frame, advisory, self.instrument.symbol)
            except Exception as e:
                self.logger.error(
                    "Output sink failed",
                    sink=sink.name,
                    bar_index=frame.index,
                    error=str(e),
                    error_type=type(e).__name__
                )

    def get_runtime_stats(self) -> dict[str, Any]:
        """Get runtime statistics."""
        last = self.last_frame
        return {
            'instrument': self.instrument.symbol,
            'bar_count': self.bar_count,
            'warmup': self.warmup,
            'warmed_up': last.warmed_up if last else False,
            'last_combined_score': last.combined_score if last else None,
            'sinks': [sink.get_stats() for sink in self.sinks]
        }
