"""
Parameter Models
Deklarative Parameter-Liste des HTF Overlay für den Host (Settings-Dialog)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .color import Color, GRAY
from .timeframe import AVAILABLE_TIMEFRAMES
from ..config import COUNTDOWN_FONT_SIZES, DEFAULT_CANDLES_TO_SHOW


class ParameterType(Enum):
    BOOLEAN = "boolean"
    CHOICE = "choice"
    INTEGER = "integer"
    COLOR = "color"


@dataclass(frozen=True)
class Parameter:
    """
    Einzelner konfigurierbarer Parameter

    Attributes:
        name: Anzeigename, gleichzeitig Settings-Key
        type: Parameter-Typ
        default: Default-Wert
        choices: Erlaubte Werte (nur CHOICE)
        description: Hinweis für UI (optional)
    """
    name: str
    type: ParameterType
    default: Any
    choices: Tuple[str, ...] = ()
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Konvertiert Parameter zu Dictionary für JSON-Serialisierung"""
        default = self.default.to_rgba() if isinstance(self.default, Color) else self.default
        data = {
            'name': self.name,
            'type': self.type.value,
            'default': default
        }
        if self.choices:
            data['choices'] = list(self.choices)
        if self.description:
            data['description'] = self.description
        return data


# Settings-Keys
ENABLE = "Enable HTF Overlay"
HIGHER_TIMEFRAME = "Higher Timeframe"
CANDLES_TO_SHOW = "Candles to Show"
HIDE_ABOVE = "Hide When Chart Is Above"
DISPLAY_STYLE = "Display Style"
BODY_SHADING = "Body Shading (Box Style)"
SHOW_OPEN_CLOSE_LINES = "Show Open/Close Lines"
WICKS = "Wicks On/Off"
OUTLINE_WIDTH = "Outline Width (Box Style)"
WICK_LINE_WIDTH = "Wick Line Width"
OPEN_CLOSE_LINE_WIDTH = "Open/Close Line Width"
BULL_OUTLINE = "Bull Candle Outline"
BEAR_OUTLINE = "Bear Candle Outline"
BULL_FILL = "Bull Candle Fill"
BEAR_FILL = "Bear Candle Fill"
BULL_WICK = "Bull Candle Wick"
BEAR_WICK = "Bear Candle Wick"
OPEN_LINE_COLOR = "Open Line Color"
CLOSE_LINE_COLOR = "Close Line Color"
SHOW_COUNTDOWN = "Show Countdown Timer"
TIMER_POSITION = "Timer Position"
TIMER_TEXT_SIZE = "Timer Text Size"
TIMER_TEXT_COLOR = "Timer Text Color"

DISPLAY_STYLES = ("Box", "Candle")
TIMER_POSITIONS = ("Top Left", "Top Center", "Top Right", "Bottom Left", "Bottom Center", "Bottom Right")
TIMER_TEXT_SIZES = tuple(COUNTDOWN_FONT_SIZES.keys())

HTF_OVERLAY_PARAMETERS: List[Parameter] = [
    Parameter(ENABLE, ParameterType.BOOLEAN, True),
    Parameter(HIGHER_TIMEFRAME, ParameterType.CHOICE, "4H", tuple(AVAILABLE_TIMEFRAMES)),
    Parameter(CANDLES_TO_SHOW, ParameterType.INTEGER, DEFAULT_CANDLES_TO_SHOW,
              description="Set to 0 to show all available HTF candles"),
    Parameter(HIDE_ABOVE, ParameterType.CHOICE, "1D", tuple(AVAILABLE_TIMEFRAMES)),
    Parameter(DISPLAY_STYLE, ParameterType.CHOICE, "Box", DISPLAY_STYLES),
    Parameter(BODY_SHADING, ParameterType.BOOLEAN, False),
    Parameter(SHOW_OPEN_CLOSE_LINES, ParameterType.BOOLEAN, False),
    Parameter(WICKS, ParameterType.BOOLEAN, True),
    Parameter(OUTLINE_WIDTH, ParameterType.INTEGER, 2),
    Parameter(WICK_LINE_WIDTH, ParameterType.INTEGER, 1),
    Parameter(OPEN_CLOSE_LINE_WIDTH, ParameterType.INTEGER, 1),
    Parameter(BULL_OUTLINE, ParameterType.COLOR, Color.pine(38, 166, 153, 58)),
    Parameter(BEAR_OUTLINE, ParameterType.COLOR, Color(125, 129, 126, 100)),
    Parameter(BULL_FILL, ParameterType.COLOR, Color(38, 166, 153, 90)),
    Parameter(BEAR_FILL, ParameterType.COLOR, Color(239, 83, 80, 90)),
    Parameter(BULL_WICK, ParameterType.COLOR, Color.pine(38, 166, 153, 58)),
    Parameter(BEAR_WICK, ParameterType.COLOR, Color(239, 83, 80, 100)),
    Parameter(OPEN_LINE_COLOR, ParameterType.COLOR, GRAY),
    Parameter(CLOSE_LINE_COLOR, ParameterType.COLOR, GRAY),
    Parameter(SHOW_COUNTDOWN, ParameterType.BOOLEAN, True),
    Parameter(TIMER_POSITION, ParameterType.CHOICE, "Bottom Center", TIMER_POSITIONS),
    Parameter(TIMER_TEXT_SIZE, ParameterType.CHOICE, "Small", TIMER_TEXT_SIZES),
    Parameter(TIMER_TEXT_COLOR, ParameterType.COLOR, Color.pine(21, 255, 0, 56)),
]

_PARAMETERS_BY_NAME: Dict[str, Parameter] = {p.name: p for p in HTF_OVERLAY_PARAMETERS}


def get_parameter(name: str) -> Parameter:
    """
    Holt Parameter-Deklaration

    Raises:
        KeyError: Wenn Parameter nicht existiert
    """
    return _PARAMETERS_BY_NAME[name]


def default_settings() -> Dict[str, Any]:
    """Settings-Dictionary mit allen Default-Werten"""
    return {p.name: p.default for p in HTF_OVERLAY_PARAMETERS}
