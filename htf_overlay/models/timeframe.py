"""
Timeframe Models
Timeframe-Konfigurationen und Definitionen
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class TimeframeConfig:
    """
    Timeframe-Konfiguration

    Attributes:
        timeframe: Timeframe-String (z.B. "5m", "4H")
        minutes: Anzahl Minuten des Timeframes
        display_name: Anzeigename für UI
    """
    timeframe: str
    minutes: int
    display_name: str

    @property
    def seconds(self) -> int:
        """Timeframe in Sekunden"""
        return self.minutes * 60

    def __repr__(self) -> str:
        return f"TimeframeConfig({self.timeframe}, {self.minutes}min)"


# Zentrale Timeframe-Definitionen (Auswahl-Werte des Indicators)
TIMEFRAME_CONFIGS: Dict[str, TimeframeConfig] = {
    "1m": TimeframeConfig(
        timeframe="1m",
        minutes=1,
        display_name="1 Minute"
    ),
    "5m": TimeframeConfig(
        timeframe="5m",
        minutes=5,
        display_name="5 Minutes"
    ),
    "15m": TimeframeConfig(
        timeframe="15m",
        minutes=15,
        display_name="15 Minutes"
    ),
    "30m": TimeframeConfig(
        timeframe="30m",
        minutes=30,
        display_name="30 Minutes"
    ),
    "1H": TimeframeConfig(
        timeframe="1H",
        minutes=60,
        display_name="1 Hour"
    ),
    "4H": TimeframeConfig(
        timeframe="4H",
        minutes=240,
        display_name="4 Hours"
    ),
    "1D": TimeframeConfig(
        timeframe="1D",
        minutes=1440,
        display_name="1 Day"
    )
}

# Liste aller verfügbaren Timeframes (aufsteigend)
AVAILABLE_TIMEFRAMES = list(TIMEFRAME_CONFIGS.keys())

# Case-insensitive Lookup ("4h" -> "4H")
_LOOKUP = {name.lower(): config for name, config in TIMEFRAME_CONFIGS.items()}


def parse_timeframe(timeframe: Any) -> Optional[TimeframeConfig]:
    """
    Parst Timeframe-String tolerant

    Args:
        timeframe: Timeframe-String (z.B. "4H", "4h", " 15m ")

    Returns:
        TimeframeConfig oder None wenn nicht parsebar
    """
    if not isinstance(timeframe, str):
        return None
    return _LOOKUP.get(timeframe.strip().lower())

