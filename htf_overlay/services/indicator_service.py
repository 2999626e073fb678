"""
Indicator Service - Business Logic für das HTF Overlay
Koordiniert Parameter-Deklaration, Context-Aufbau und Rendering
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ..config import INDICATOR_NAME, INDICATOR_TYPE
from ..core.context import IndicatorContext
from ..core.overlay_renderer import HTFOverlayRenderer
from ..models.chart_data import candles_from_dicts
from ..models.drawables import Drawable
from ..models.parameters import HTF_OVERLAY_PARAMETERS

logger = logging.getLogger(__name__)


class IndicatorService:
    """
    Service für alle Indicator-bezogenen Operationen
    Dependency Injection Pattern für den Renderer
    """

    def __init__(self, renderer: Optional[HTFOverlayRenderer] = None):
        """
        Args:
            renderer: HTFOverlayRenderer-Instanz (Default: neue Instanz)
        """
        self.renderer = renderer or HTFOverlayRenderer()
        logger.info("[IndicatorService] Initialized")

    def describe(self) -> Dict[str, Any]:
        """Metadaten und Parameter-Liste für den Host"""
        return {
            'name': INDICATOR_NAME,
            'type': INDICATOR_TYPE,
            'parameters': self.get_parameters()
        }

    @staticmethod
    def get_parameters() -> List[Dict[str, Any]]:
        """Deklarative Parameter-Liste als Dictionaries"""
        return [parameter.to_dict() for parameter in HTF_OVERLAY_PARAMETERS]

    def calculate(self, context: IndicatorContext, now: Optional[datetime] = None) -> List[Drawable]:
        """
        Führt die Overlay-Berechnung aus

        Args:
            context: Host-Context
            now: Zeitpunkt für den Countdown (None = jetzt)

        Returns:
            Drawable-Liste
        """
        drawables = self.renderer.calculate(context, now=now)
        logger.info(f"[IndicatorService] Calculated {len(drawables)} drawables "
                    f"({len(context.kline_data)} chart candles)")
        return drawables

    def calculate_from_payload(self, payload: Mapping[str, Any],
                               now: Optional[datetime] = None) -> Dict[str, Any]:
        """
        Berechnung aus JSON-Payload (Settings, Chart-Kerzen, resampelte Serien)

        Args:
            payload: Dict mit 'settings', 'kline_data', 'resampled'
            now: Zeitpunkt für den Countdown

        Returns:
            Dict mit serialisierten Drawables und Anzahl

        Raises:
            KeyError/ValueError/TypeError: Bei ungültigen Kerzen-Daten
        """
        resampled = {
            timeframe: candles_from_dicts(candles)
            for timeframe, candles in (payload.get('resampled') or {}).items()
        }
        context = IndicatorContext(
            settings=payload.get('settings') or {},
            kline_data=candles_from_dicts(payload.get('kline_data') or []),
            resampled=resampled
        )

        drawables = self.calculate(context, now=now)
        return {
            'drawables': [drawable.to_dict() for drawable in drawables],
            'count': len(drawables)
        }
