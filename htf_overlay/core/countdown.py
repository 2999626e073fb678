"""
Countdown Timer
Restzeit bis zum Schluss der letzten HTF-Kerze als Text-Label
"""

from datetime import datetime, timezone
from typing import Optional

from ..config import (
    COUNTDOWN_FONT_BOLD,
    COUNTDOWN_FONT_FAMILY,
    COUNTDOWN_FONT_SIZES,
    DEFAULT_COUNTDOWN_FONT_SIZE,
)
from ..models.chart_data import Candle
from ..models.color import Color
from ..models.drawables import DataPoint, DrawableText, FontSpec, TextAnchor
from ..models.timeframe import TimeframeConfig

# Position -> Text-Anker (invertiert: "Top" Label hängt über dem Body)
_TEXT_ANCHORS = {
    "Top Left": TextAnchor.BOTTOM_LEFT,
    "Top Center": TextAnchor.BOTTOM_CENTER,
    "Top Right": TextAnchor.BOTTOM_RIGHT,
    "Bottom Left": TextAnchor.TOP_LEFT,
    "Bottom Right": TextAnchor.TOP_RIGHT,
}


def _to_epoch_ms(now: Optional[datetime]) -> int:
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int(now.timestamp() * 1000)


def remaining_ms(last_candle: Candle, timeframe: TimeframeConfig, now: Optional[datetime] = None) -> int:
    """
    Restzeit bis Kerzen-Schluss

    Args:
        last_candle: Letzte (laufende) HTF-Kerze
        timeframe: HTF-Timeframe
        now: Aktueller Zeitpunkt (naive = UTC, None = jetzt)

    Returns:
        Millisekunden bis Open + Timeframe-Dauer (negativ wenn vorbei)
    """
    close_ms = (last_candle.time + timeframe.seconds) * 1000
    return close_ms - _to_epoch_ms(now)


def format_countdown(ms: int) -> Optional[str]:
    """
    Formatiert Restzeit

    Example:
        >>> format_countdown(3661000)
        '1:01:01'
        >>> format_countdown(125000)
        '02:05'

    Returns:
        'H:MM:SS' ab einer Stunde, sonst 'MM:SS'; None wenn ms <= 0
    """
    if ms <= 0:
        return None
    hours = ms // 3_600_000
    minutes = (ms // 60_000) % 60
    seconds = (ms // 1000) % 60
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def text_anchor_for(position: str) -> TextAnchor:
    """Text-Anker für Timer-Position (Default TOP_CENTER)"""
    return _TEXT_ANCHORS.get(position, TextAnchor.TOP_CENTER)


def font_for(size_name: str) -> FontSpec:
    """Font für Timer-Größe (Tiny=10, Small=12, Medium=14, Large=16)"""
    size = COUNTDOWN_FONT_SIZES.get(size_name, DEFAULT_COUNTDOWN_FONT_SIZE)
    return FontSpec(family=COUNTDOWN_FONT_FAMILY, size=size, bold=COUNTDOWN_FONT_BOLD)


def label_position(position: str, last_candle: Candle, timeframe: TimeframeConfig) -> DataPoint:
    """
    Ankerpunkt des Labels an der letzten HTF-Kerze

    X: Open-Zeit bei "Left", Close-Zeit bei "Right", sonst Mitte.
    Y: Body-Top bei "Top", sonst Body-Bottom.
    """
    open_time = last_candle.time
    if "Left" in position:
        x = open_time
    elif "Right" in position:
        x = open_time + timeframe.seconds
    else:
        x = open_time + timeframe.seconds // 2

    y = last_candle.body_top if "Top" in position else last_candle.body_bottom
    return DataPoint(time=x, price=y)


def build_countdown_label(last_candle: Candle,
                          timeframe: TimeframeConfig,
                          position: str,
                          size_name: str,
                          color: Color,
                          now: Optional[datetime] = None) -> Optional[DrawableText]:
    """
    Baut das Countdown-Label

    Returns:
        DrawableText oder None wenn die Kerze bereits geschlossen ist
    """
    text = format_countdown(remaining_ms(last_candle, timeframe, now))
    if text is None:
        return None

    return DrawableText(
        position=label_position(position, last_candle, timeframe),
        text=text,
        font=font_for(size_name),
        color=color,
        anchor=text_anchor_for(position)
    )
