"""
Overlay Settings
Typisierte Sicht auf das Host-Settings-Mapping
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from ..models.color import Color
from ..models.parameters import ParameterType, get_parameter
from ..models import parameters as p


class DisplayStyle(Enum):
    BOX = "Box"
    CANDLE = "Candle"


def read_setting(settings: Mapping[str, Any], name: str) -> Any:
    """
    Liest einen Setting-Wert mit Default aus der Parameter-Deklaration

    Falsch typisierte Werte fallen auf den Default zurück. Timeframe-Choices
    werden unverändert durchgereicht (auch None), das Parsen übernimmt
    der Renderer.
    """
    parameter = get_parameter(name)
    value = settings.get(name, parameter.default)

    if parameter.type is ParameterType.BOOLEAN:
        return value if isinstance(value, bool) else parameter.default

    if parameter.type is ParameterType.INTEGER:
        if isinstance(value, bool) or not isinstance(value, int):
            return parameter.default
        return value

    if parameter.type is ParameterType.COLOR:
        color = Color.coerce(value)
        return color if color is not None else parameter.default

    # CHOICE
    if name in (p.HIGHER_TIMEFRAME, p.HIDE_ABOVE):
        return value
    if not isinstance(value, str):
        return parameter.default
    return value if value in parameter.choices else parameter.default


@dataclass(frozen=True)
class OverlaySettings:
    """Alle Overlay-Optionen eines Berechnungs-Aufrufs"""
    enabled: bool
    higher_timeframe: Any
    candles_to_show: int
    hide_above: Any
    display_style: DisplayStyle
    body_shading: bool
    show_open_close_lines: bool
    wicks: bool
    outline_width: int
    wick_line_width: int
    open_close_line_width: int
    bull_outline: Color
    bear_outline: Color
    bull_fill: Color
    bear_fill: Color
    bull_wick: Color
    bear_wick: Color
    open_line_color: Color
    close_line_color: Color
    show_countdown: bool
    timer_position: str
    timer_text_size: str
    timer_text_color: Color

    @classmethod
    def from_mapping(cls, settings: Optional[Mapping[str, Any]]) -> 'OverlaySettings':
        """Baut Settings aus dem Host-Mapping (fehlende Keys -> Defaults)"""
        settings = settings or {}

        def get(name: str) -> Any:
            return read_setting(settings, name)

        candles_to_show = get(p.CANDLES_TO_SHOW)
        if candles_to_show < 0:
            candles_to_show = get_parameter(p.CANDLES_TO_SHOW).default

        return cls(
            enabled=get(p.ENABLE),
            higher_timeframe=get(p.HIGHER_TIMEFRAME),
            candles_to_show=candles_to_show,
            hide_above=get(p.HIDE_ABOVE),
            display_style=DisplayStyle(get(p.DISPLAY_STYLE)),
            body_shading=get(p.BODY_SHADING),
            show_open_close_lines=get(p.SHOW_OPEN_CLOSE_LINES),
            wicks=get(p.WICKS),
            outline_width=get(p.OUTLINE_WIDTH),
            wick_line_width=get(p.WICK_LINE_WIDTH),
            open_close_line_width=get(p.OPEN_CLOSE_LINE_WIDTH),
            bull_outline=get(p.BULL_OUTLINE),
            bear_outline=get(p.BEAR_OUTLINE),
            bull_fill=get(p.BULL_FILL),
            bear_fill=get(p.BEAR_FILL),
            bull_wick=get(p.BULL_WICK),
            bear_wick=get(p.BEAR_WICK),
            open_line_color=get(p.OPEN_LINE_COLOR),
            close_line_color=get(p.CLOSE_LINE_COLOR),
            show_countdown=get(p.SHOW_COUNTDOWN),
            timer_position=get(p.TIMER_POSITION),
            timer_text_size=get(p.TIMER_TEXT_SIZE),
            timer_text_color=get(p.TIMER_TEXT_COLOR),
        )
