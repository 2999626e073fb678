"""
Unit Tests für Drawable Models
"""

import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal
from htf_overlay.models.color import Color, GRAY
from htf_overlay.models.drawables import (
    DataPoint,
    DrawableBox,
    DrawableCandle,
    DrawableLine,
    DrawableText,
    FontSpec,
    TextAnchor
)

RED = Color(255, 0, 0)


class TestDrawables:
    """Tests für Drawable-Serialisierung"""

    def test_box_to_dict(self):
        """Test: Box ohne Füllung"""
        box = DrawableBox(
            corner1=DataPoint(100, Decimal("10.5")),
            corner2=DataPoint(200, Decimal("9.5")),
            fill_color=None,
            border_color=RED,
            stroke_width=2.0
        )

        data = box.to_dict()

        assert data['type'] == "box"
        assert data['corner1'] == {'time': 100, 'price': "10.5"}
        assert data['corner2'] == {'time': 200, 'price': "9.5"}
        assert data['fill_color'] is None
        assert data['border_color'] == "rgba(255, 0, 0, 1.0)"
        assert data['stroke_width'] == 2.0

    def test_line_to_dict(self):
        """Test: Linie"""
        line = DrawableLine(DataPoint(1, Decimal(2)), DataPoint(3, Decimal(4)), GRAY, 1.0)

        data = line.to_dict()

        assert data['type'] == "line"
        assert data['start'] == {'time': 1, 'price': "2"}
        assert data['end'] == {'time': 3, 'price': "4"}

    def test_text_to_dict(self):
        """Test: Text mit Font und Anker"""
        text = DrawableText(DataPoint(1, Decimal(2)), "02:05", FontSpec(size=14), RED, TextAnchor.BOTTOM_LEFT)

        data = text.to_dict()

        assert data['type'] == "text"
        assert data['text'] == "02:05"
        assert data['font'] == {'family': "SansSerif", 'size': 14, 'bold': True}
        assert data['anchor'] == "bottom_left"

    def test_candle_to_dict(self):
        """Test: Kerzen-Glyphe"""
        candle = DrawableCandle(0, 14400, Decimal(1), Decimal(3), Decimal("0.5"), Decimal(2), RED, GRAY)

        data = candle.to_dict()

        assert data['type'] == "candle"
        assert data['close_time'] == 14400
        assert data['low'] == "0.5"
        assert data['wick_color'] == GRAY.to_rgba()

    def test_drawables_are_immutable(self):
        """Test: Drawables sind frozen"""
        line = DrawableLine(DataPoint(1, Decimal(2)), DataPoint(3, Decimal(4)), GRAY, 1.0)

        with pytest.raises(FrozenInstanceError):
            line.stroke_width = 5.0

    def test_kind_not_constructor_argument(self):
        """Test: kind ist fest und kein Init-Parameter"""
        with pytest.raises(TypeError):
            DrawableLine(DataPoint(1, Decimal(2)), DataPoint(3, Decimal(4)), GRAY, 1.0, "box")
