"""
Gemeinsame Fixtures für HTF Overlay Tests
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from htf_overlay.models.chart_data import Candle

# 2024-01-01 00:00:00 UTC
BASE_TIME = 1704067200


def make_candle(time, open_, high, low, close):
    """Kerze mit Decimal-Preisen aus Strings/Zahlen"""
    return Candle(
        time=time,
        open=Decimal(str(open_)),
        high=Decimal(str(high)),
        low=Decimal(str(low)),
        close=Decimal(str(close))
    )


def make_series(count, step_seconds, start=BASE_TIME, bullish=True):
    """Serie mit festem Abstand, abwechselnd bullish/bearish wenn bullish=None"""
    candles = []
    for i in range(count):
        base = 100 + i
        is_bull = bullish if bullish is not None else i % 2 == 0
        if is_bull:
            candles.append(make_candle(start + i * step_seconds, base, base + 2, base - 2, base + 1))
        else:
            candles.append(make_candle(start + i * step_seconds, base + 1, base + 2, base - 2, base))
    return candles


@pytest.fixture
def chart_5m():
    """5m Chart-Serie (4 Stunden)"""
    return make_series(48, 300)


@pytest.fixture
def htf_4h():
    """4H HTF-Serie, 30 Kerzen"""
    return make_series(30, 4 * 3600, bullish=None)


@pytest.fixture
def far_future():
    """Zeitpunkt nach allen Test-Kerzen (kein Countdown)"""
    return datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def candle_factory():
    """make_candle als Fixture"""
    return make_candle


@pytest.fixture
def series_factory():
    """make_series als Fixture"""
    return make_series
