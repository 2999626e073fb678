"""
Indicator Context - Schnittstelle zum Host
Settings, Chart-Kerzen und Resampling-Abfrage pro Berechnung
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..models.chart_data import Candle
from ..models.timeframe import TimeframeConfig, parse_timeframe

logger = logging.getLogger(__name__)

# Host-Resampler: Timeframe-Name -> HTF-Kerzen (oder None wenn nicht unterstützt)
Resampler = Callable[[str], Optional[List[Candle]]]


def _canonical_timeframe(name: str) -> str:
    """Normalisiert Timeframe-Namen ("4h" -> "4H"), unbekannte bleiben unverändert"""
    config = parse_timeframe(name)
    return config.timeframe if config is not None else name


class IndicatorContext:
    """
    Read-only Sicht auf die Host-Daten für einen Berechnungs-Aufruf

    Das Resampling selbst passiert im Host. Entweder liefert der Host
    einen `resampler` Callback, oder die bereits resampelten Serien
    liegen als Dictionary (Timeframe-Name -> Kerzen) vor.
    """

    def __init__(self,
                 settings: Optional[Mapping[str, Any]] = None,
                 kline_data: Optional[List[Candle]] = None,
                 resampled: Optional[Mapping[str, List[Candle]]] = None,
                 resampler: Optional[Resampler] = None):
        """
        Args:
            settings: Settings-Mapping (Parameter-Name -> Wert)
            kline_data: Kerzen des aktuellen Charts (aufsteigend)
            resampled: Vorab resampelte Serien pro Timeframe-Name (case-insensitive)
            resampler: Host-Callback für Resampling-Abfragen
        """
        self.settings: Mapping[str, Any] = settings if settings is not None else {}
        self.kline_data: List[Candle] = list(kline_data) if kline_data else []
        self._resampled: Dict[str, List[Candle]] = {
            _canonical_timeframe(name): candles for name, candles in (resampled or {}).items()
        }
        self._resampler = resampler

    def resampled_kline_data(self, timeframe: str) -> Optional[List[Candle]]:
        """
        Fragt HTF-Kerzen für einen Timeframe beim Host an

        Args:
            timeframe: Kanonischer Timeframe-Name (z.B. "4H")

        Returns:
            Kerzen-Liste oder None wenn nicht verfügbar
        """
        if self._resampler is not None:
            try:
                return self._resampler(timeframe)
            except Exception as e:
                # Host-Fehler bedeutet hier nur "keine Daten"
                logger.warning(f"[IndicatorContext] Resampler failed for {timeframe}: {e}")
                return None
        return self._resampled.get(timeframe)

    def current_timeframe_seconds(self) -> Optional[int]:
        """
        Abstand der ersten beiden Chart-Kerzen

        Returns:
            Dauer in Sekunden oder None bei weniger als 2 Kerzen
        """
        if len(self.kline_data) < 2:
            return None
        return self.kline_data[1].time - self.kline_data[0].time

    def is_chart_too_coarse(self, htf: TimeframeConfig, hide_above: TimeframeConfig) -> bool:
        """
        Prüft ob das Overlay unterdrückt werden muss

        Unterdrückt wenn der Chart-Timeframe gröber als die "Hide"-Schwelle ist
        oder nicht strikt feiner als der HTF.
        """
        current = self.current_timeframe_seconds()
        if current is None:
            return False
        return current > hide_above.seconds or current >= htf.seconds
