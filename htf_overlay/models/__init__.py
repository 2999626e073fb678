"""
Models Layer für HTF Overlay
Domain Models und Dataclasses
"""

from .chart_data import Candle, CandleFactory, candles_from_dicts, candles_from_dataframe
from .timeframe import TimeframeConfig, TIMEFRAME_CONFIGS, AVAILABLE_TIMEFRAMES, parse_timeframe
from .color import Color, GRAY
from .drawables import (
    DataPoint,
    TextAnchor,
    FontSpec,
    DrawableBox,
    DrawableLine,
    DrawableText,
    DrawableCandle,
    Drawable,
)
from .parameters import Parameter, ParameterType, HTF_OVERLAY_PARAMETERS, default_settings

__all__ = [
    'Candle',
    'CandleFactory',
    'candles_from_dicts',
    'candles_from_dataframe',
    'TimeframeConfig',
    'TIMEFRAME_CONFIGS',
    'AVAILABLE_TIMEFRAMES',
    'parse_timeframe',
    'Color',
    'GRAY',
    'DataPoint',
    'TextAnchor',
    'FontSpec',
    'DrawableBox',
    'DrawableLine',
    'DrawableText',
    'DrawableCandle',
    'Drawable',
    'Parameter',
    'ParameterType',
    'HTF_OVERLAY_PARAMETERS',
    'default_settings',
]
