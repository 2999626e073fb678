"""
Drawable Models
Zeichen-Primitive für den Host-Renderer (Box, Linie, Text, Kerze)

Alle Geometrie liegt im (Zeit, Preis) Raum. Jedes Drawable ist
selbstbeschreibend: der Renderer braucht keine weitere Interpretation.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional, Union

from .color import Color


def _color(color: Optional[Color]) -> Optional[str]:
    return color.to_rgba() if color is not None else None


@dataclass(frozen=True)
class DataPoint:
    """
    Punkt im Chart

    Attributes:
        time: Unix Timestamp (Sekunden)
        price: Preis
    """
    time: int
    price: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {'time': self.time, 'price': str(self.price)}


class TextAnchor(Enum):
    """Ankerpunkt des Text-Labels relativ zur Position"""
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


@dataclass(frozen=True)
class FontSpec:
    family: str = "SansSerif"
    size: int = 12
    bold: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {'family': self.family, 'size': self.size, 'bold': self.bold}


@dataclass(frozen=True)
class DrawableBox:
    """
    Rechteck zwischen zwei Eckpunkten

    Attributes:
        corner1: Oben-links (Open-Zeit, Body-Top)
        corner2: Unten-rechts (Close-Zeit, Body-Bottom)
        fill_color: Füllfarbe oder None (nur Umriss)
        border_color: Umrissfarbe
        stroke_width: Linienstärke des Umrisses
    """
    corner1: DataPoint
    corner2: DataPoint
    fill_color: Optional[Color]
    border_color: Color
    stroke_width: float
    kind: str = field(default="box", init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind,
            'corner1': self.corner1.to_dict(),
            'corner2': self.corner2.to_dict(),
            'fill_color': _color(self.fill_color),
            'border_color': _color(self.border_color),
            'stroke_width': self.stroke_width
        }


@dataclass(frozen=True)
class DrawableLine:
    """Liniensegment zwischen zwei Punkten"""
    start: DataPoint
    end: DataPoint
    color: Color
    stroke_width: float
    kind: str = field(default="line", init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind,
            'start': self.start.to_dict(),
            'end': self.end.to_dict(),
            'color': _color(self.color),
            'stroke_width': self.stroke_width
        }


@dataclass(frozen=True)
class DrawableText:
    """Text-Label an einem Ankerpunkt"""
    position: DataPoint
    text: str
    font: FontSpec
    color: Color
    anchor: TextAnchor
    kind: str = field(default="text", init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind,
            'position': self.position.to_dict(),
            'text': self.text,
            'font': self.font.to_dict(),
            'color': _color(self.color),
            'anchor': self.anchor.value
        }


@dataclass(frozen=True)
class DrawableCandle:
    """Komplette Kerzen-Glyphe (Body + Dochte) über die HTF-Zeitspanne"""
    time: int
    close_time: int
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    body_color: Color
    wick_color: Color
    kind: str = field(default="candle", init=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.kind,
            'time': self.time,
            'close_time': self.close_time,
            'open': str(self.open),
            'high': str(self.high),
            'low': str(self.low),
            'close': str(self.close),
            'body_color': _color(self.body_color),
            'wick_color': _color(self.wick_color)
        }


Drawable = Union[DrawableBox, DrawableLine, DrawableText, DrawableCandle]
