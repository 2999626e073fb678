"""
HTF Overlay Renderer
Rendert Higher-Timeframe Kerzen als Drawables auf dem aktuellen Chart
"""

import logging
from datetime import datetime
from typing import List, Optional

from ..config import MAX_HTF_CANDLES
from ..models.chart_data import Candle
from ..models.drawables import DataPoint, Drawable, DrawableBox, DrawableCandle, DrawableLine
from ..models.timeframe import TimeframeConfig, parse_timeframe
from .context import IndicatorContext
from .countdown import build_countdown_label
from .overlay_settings import DisplayStyle, OverlaySettings

logger = logging.getLogger(__name__)


class HTFOverlayRenderer:
    """
    Rendert HTF-Kerzen als Liste von Drawables - reine Funktion der Eingaben

    Verantwortlichkeiten:
    - Unterdrückung wenn der Chart-Timeframe zu grob ist
    - Auswahl der letzten N HTF-Kerzen
    - Box-Stil (Body-Box, Dochte) oder Candle-Stil
    - Open/Close Linien und Countdown-Label
    """

    def calculate(self, context: IndicatorContext, now: Optional[datetime] = None) -> List[Drawable]:
        """
        Berechnet alle Drawables für einen Redraw-Zyklus

        Args:
            context: Host-Context mit Settings, Chart-Kerzen und Resampling
            now: Zeitpunkt für den Countdown (None = jetzt)

        Returns:
            Geordnete Drawable-Liste (chronologisch, Countdown zuletzt);
            leer wenn nichts zu zeichnen ist
        """
        settings = OverlaySettings.from_mapping(context.settings)
        if not settings.enabled:
            return []

        htf = parse_timeframe(settings.higher_timeframe)
        hide_above = parse_timeframe(settings.hide_above)
        if htf is None or hide_above is None:
            logger.debug(f"[HTFOverlay] Unparseable timeframe: {settings.higher_timeframe!r} / "
                         f"{settings.hide_above!r}")
            return []

        if context.is_chart_too_coarse(htf, hide_above):
            logger.debug(f"[HTFOverlay] Suppressed: chart {context.current_timeframe_seconds()}s, "
                         f"HTF {htf.timeframe}, hide above {hide_above.timeframe}")
            return []

        htf_data = context.resampled_kline_data(htf.timeframe)
        if not htf_data:
            logger.debug(f"[HTFOverlay] No resampled data for {htf.timeframe}")
            return []

        drawables: List[Drawable] = []
        for candle in self.select_candles(htf_data, settings.candles_to_show):
            drawables.extend(self.render_candle(candle, htf, settings))

        if settings.show_countdown:
            label = build_countdown_label(
                htf_data[-1], htf,
                settings.timer_position,
                settings.timer_text_size,
                settings.timer_text_color,
                now=now
            )
            if label is not None:
                drawables.append(label)

        logger.debug(f"[HTFOverlay] {htf.timeframe}: {len(drawables)} drawables")
        return drawables

    @staticmethod
    def select_candles(htf_data: List[Candle], candles_to_show: int) -> List[Candle]:
        """
        Letzte N Kerzen (0 = alle, begrenzt auf MAX_HTF_CANDLES)
        """
        max_candles = MAX_HTF_CANDLES if candles_to_show == 0 else candles_to_show
        start_index = max(0, len(htf_data) - max_candles)
        return htf_data[start_index:]

    def render_candle(self, candle: Candle, htf: TimeframeConfig,
                      settings: OverlaySettings) -> List[Drawable]:
        """
        Drawables für eine einzelne HTF-Kerze

        Args:
            candle: HTF-Kerze
            htf: HTF-Timeframe (liefert die Zeitspanne)
            settings: Overlay-Settings

        Returns:
            Drawables dieser Kerze in Zeichen-Reihenfolge
        """
        open_time = candle.time
        close_time = open_time + htf.seconds
        mid_time = open_time + htf.seconds // 2

        bullish = candle.is_bullish
        body_top = candle.body_top
        body_bottom = candle.body_bottom
        wick_color = settings.bull_wick if bullish else settings.bear_wick

        drawables: List[Drawable] = []

        if settings.display_style is DisplayStyle.CANDLE:
            drawables.append(DrawableCandle(
                time=open_time,
                close_time=close_time,
                open=candle.open,
                high=candle.high,
                low=candle.low,
                close=candle.close,
                body_color=settings.bull_fill if bullish else settings.bear_fill,
                wick_color=wick_color
            ))
        else:
            fill_color = None
            if settings.body_shading:
                fill_color = settings.bull_fill if bullish else settings.bear_fill

            drawables.append(DrawableBox(
                corner1=DataPoint(open_time, body_top),
                corner2=DataPoint(close_time, body_bottom),
                fill_color=fill_color,
                border_color=settings.bull_outline if bullish else settings.bear_outline,
                stroke_width=float(settings.outline_width)
            ))

            if settings.wicks:
                drawables.extend(self._render_wicks(candle, mid_time, wick_color,
                                                    float(settings.wick_line_width)))

        if settings.show_open_close_lines:
            width = float(settings.open_close_line_width)
            drawables.append(DrawableLine(
                start=DataPoint(open_time, candle.open),
                end=DataPoint(mid_time, candle.open),
                color=settings.open_line_color,
                stroke_width=width
            ))
            drawables.append(DrawableLine(
                start=DataPoint(mid_time, candle.close),
                end=DataPoint(close_time, candle.close),
                color=settings.close_line_color,
                stroke_width=width
            ))

        return drawables

    @staticmethod
    def _render_wicks(candle: Candle, mid_time: int, color, width: float) -> List[DrawableLine]:
        """Dochte nur wenn High/Low strikt außerhalb des Body liegt"""
        wicks = []
        if candle.high > candle.body_top:
            wicks.append(DrawableLine(
                start=DataPoint(mid_time, candle.high),
                end=DataPoint(mid_time, candle.body_top),
                color=color,
                stroke_width=width
            ))
        if candle.low < candle.body_bottom:
            wicks.append(DrawableLine(
                start=DataPoint(mid_time, candle.body_bottom),
                end=DataPoint(mid_time, candle.low),
                color=color,
                stroke_width=width
            ))
        return wicks
