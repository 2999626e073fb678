"""
Core Module für HTF Overlay
Host-Context, Settings-Auswertung, Countdown und Renderer
"""

from .context import IndicatorContext
from .overlay_settings import OverlaySettings, DisplayStyle
from .countdown import format_countdown, build_countdown_label
from .overlay_renderer import HTFOverlayRenderer

__all__ = [
    'IndicatorContext',
    'OverlaySettings',
    'DisplayStyle',
    'format_countdown',
    'build_countdown_label',
    'HTFOverlayRenderer'
]
