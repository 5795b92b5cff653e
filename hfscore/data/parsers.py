"""
Bar payload parsers for converting raw feed records to normalized bars.

Feeds deliver bars as flat dictionaries (or CSV rows) with either a real
volume column or a tick count. The tick count is accepted as the volume
proxy unchanged.
"""

import csv
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Union

from ..errors import MalformedDataError, MissingDataError
from .models import Bar

TIMESTAMP_KEYS = ("open_time", "timestamp", "ts", "time")
VOLUME_KEYS = ("volume_proxy", "volume", "tick_volume", "ticks")
PRICE_KEYS = ("open", "high", "low", "close")

# Epoch values above this are milliseconds, below are seconds
_EPOCH_MS_CUTOFF = 1e11


def parse_timestamp(value: Any) -> datetime:
    """
    Parse a bar timestamp into a UTC datetime.

    Accepts epoch milliseconds, epoch seconds, ISO-8601 strings (a trailing
    'Z' is allowed) and datetime objects. Naive datetimes are taken as UTC.

    Raises:
        MalformedDataError: If the value cannot be interpreted
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return parse_timestamp(int(text))
        try:
            return parse_timestamp(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError as e:
            raise MalformedDataError(
                f"Invalid timestamp '{value}': {e}",
                raw_data=str(value),
                expected_format="ISO-8601 or epoch"
            )

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        seconds = value / 1000.0 if abs(value) >= _EPOCH_MS_CUTOFF else float(value)
        try:
            return datetime.fromtimestamp(seconds, tz=timezone.utc)
        except (ValueError, OverflowError, OSError) as e:
            raise MalformedDataError(f"Invalid epoch timestamp {value}: {e}", raw_data=str(value))

    raise MalformedDataError(
        f"Unsupported timestamp type: {type(value).__name__}",
        raw_data=str(value)[:100]
    )


def _parse_number(payload: dict[str, Any], key: str) -> float:
    raw = payload[key]
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise MalformedDataError(f"Invalid {key} value '{raw}': {e}", raw_data=str(payload)[:100])
    if math.isnan(value) or math.isinf(value):
        raise MalformedDataError(f"Non-finite {key} value: {value}", raw_data=str(payload)[:100])
    return value


def _first_key(payload: dict[str, Any], keys: tuple) -> Union[str, None]:
    for key in keys:
        if key in payload and payload[key] not in (None, ""):
            return key
    return None


def parse_bar_payload(payload: dict[str, Any]) -> Bar:
    """
    Parse a flat bar record into a Bar.

    Args:
        payload: Dict with a timestamp key, OHLC prices and a volume or tick count

    Returns:
        Validated Bar

    Raises:
        MissingDataError: If a required field is absent
        MalformedDataError: If values are invalid or OHLC is inconsistent
    """
    if not isinstance(payload, dict):
        raise MalformedDataError(
            f"Bar payload must be dict, got {type(payload).__name__}",
            raw_data=str(payload)[:100]
        )

    ts_key = _first_key(payload, TIMESTAMP_KEYS)
    if ts_key is None:
        raise MissingDataError("Bar payload missing timestamp", data_type="timestamp")

    missing = [key for key in PRICE_KEYS if payload.get(key) in (None, "")]
    if missing:
        raise MissingDataError(f"Bar payload missing prices: {', '.join(missing)}", data_type="ohlc")

    vol_key = _first_key(payload, VOLUME_KEYS)
    if vol_key is None:
        raise MissingDataError("Bar payload missing volume or tick count", data_type="volume")

    open_price, high, low, close = (_parse_number(payload, key) for key in PRICE_KEYS)
    volume = _parse_number(payload, vol_key)

    if high < max(open_price, close):
        raise MalformedDataError(
            f"High {high} must be >= max(open {open_price}, close {close})",
            raw_data=str(payload)[:100]
        )
    if low > min(open_price, close):
        raise MalformedDataError(
            f"Low {low} must be <= min(open {open_price}, close {close})",
            raw_data=str(payload)[:100]
        )
    if volume < 0:
        raise MalformedDataError(f"Negative volume: {volume}", raw_data=str(payload)[:100])

    return Bar(
        open_time=parse_timestamp(payload[ts_key]),
        open=open_price,
        high=high,
        low=low,
        close=close,
        volume_proxy=volume,
    )


def load_bars_csv(path: Union[str, Path]) -> list[Bar]:
    """Load bars from a CSV file whose header uses the payload key names."""
    with open(path, newline="") as f:
        return [parse_bar_payload(row) for row in csv.DictReader(f)]
