#!/usr/bin/env python3
"""
Replay a CSV bar history through the scoring engine.

Usage:
    python scripts/replay_csv.py BARS.csv [SYMBOL] [PIP_SIZE]

The CSV header uses bar payload names: timestamp, open, high, low, close
and volume (or tick_volume). Advisories are printed as JSON lines; the
telemetry log goes to stdout through structlog.
"""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hfscore.data.models import InstrumentSpec
from hfscore.data.parsers import load_bars_csv
from hfscore.delivery import StdoutAdvisorySink, TelemetrySink
from hfscore.engine import ScoringEngine
from hfscore.errors import ConfigurationError, DataQualityError
from hfscore.logging import configure_logging


def main() -> int:
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    csv_path = Path(sys.argv[1])
    symbol = sys.argv[2] if len(sys.argv) > 2 else csv_path.stem.upper()
    pip_size = float(sys.argv[3]) if len(sys.argv) > 3 else 0.0

    configure_logging(level="INFO")

    try:
        bars = load_bars_csv(csv_path)
        engine = ScoringEngine.for_instrument(
            InstrumentSpec(symbol=symbol, pip_size=pip_size),
            sinks=[TelemetrySink(), StdoutAdvisorySink(format="pretty")]
        )
        engine.replay(bars)
    except (DataQualityError, ConfigurationError) as e:
        print(f"❌ Replay failed: {e}")
        return 1

    stats = engine.get_runtime_stats()
    print(f"\n✅ Replayed {stats['bar_count']} bars (warmup {stats['warmup']}), "
          f"last combined score {stats['last_combined_score']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
