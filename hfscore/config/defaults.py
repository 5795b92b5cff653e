"""Default configuration parameters for the composite scoring engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RSIParams:
    """RSI component parameters."""
    period: int = 14


@dataclass(frozen=True)
class StochRSIParams:
    """Stochastic-of-RSI component parameters."""
    rsi_period: int = 14               # RSI fed into the stochastic formula
    stoch_period: int = 14             # Min/max window over the RSI series
    k_smooth: int = 3                  # %K smoothing window
    d_smooth: int = 3                  # %D smoothing window


@dataclass(frozen=True)
class MACDParams:
    """MACD histogram-direction component parameters."""
    fast: int = 12
    slow: int = 26
    signal: int = 9


@dataclass(frozen=True)
class EMACrossParams:
    """EMA cross spread component parameters."""
    fast: int = 9
    slow: int = 21


@dataclass(frozen=True)
class MFIParams:
    """Money Flow Index component parameters."""
    period: int = 14


@dataclass(frozen=True)
class LevelParams:
    """ATR-based take-profit / stop-loss parameters."""
    atr_period: int = 14
    tp1_mult: float = 1.5
    tp2_mult: float = 2.5
    tp3_mult: float = 4.0
    sl_mult: float = 1.0


@dataclass(frozen=True)
class SignalParams:
    """Advisory gating parameters."""
    threshold_pct: float = 55.0        # Min confidence % before an advisory


@dataclass(frozen=True)
class PipSizeParams:
    """Pip size resolution parameters."""
    use_custom: bool = False           # Use override instead of instrument pip
    override: float = 0.0001


@dataclass(frozen=True)
class TelemetryParams:
    """Telemetry logging parameters."""
    enabled: bool = False


@dataclass(frozen=True)
class ScoringConfig:
    """Complete scoring engine configuration."""
    rsi: RSIParams = field(default_factory=RSIParams)
    stoch_rsi: StochRSIParams = field(default_factory=StochRSIParams)
    macd: MACDParams = field(default_factory=MACDParams)
    ema: EMACrossParams = field(default_factory=EMACrossParams)
    mfi: MFIParams = field(default_factory=MFIParams)
    levels: LevelParams = field(default_factory=LevelParams)
    signal: SignalParams = field(default_factory=SignalParams)
    pip_size: PipSizeParams = field(default_factory=PipSizeParams)
    telemetry: TelemetryParams = field(default_factory=TelemetryParams)


# Section name -> params dataclass, used to rebuild configs from dicts
SECTION_TYPES = {
    "rsi": RSIParams,
    "stoch_rsi": StochRSIParams,
    "macd": MACDParams,
    "ema": EMACrossParams,
    "mfi": MFIParams,
    "levels": LevelParams,
    "signal": SignalParams,
    "pip_size": PipSizeParams,
    "telemetry": TelemetryParams,
}


def get_default_config() -> ScoringConfig:
    """Get the default configuration instance."""
    return ScoringConfig(
        rsi=RSIParams(),
        stoch_rsi=StochRSIParams(),
        macd=MACDParams(),
        ema=EMACrossParams(),
        mfi=MFIParams(),
        levels=LevelParams(),
        signal=SignalParams(),
        pip_size=PipSizeParams(),
        telemetry=TelemetryParams(),
    )
