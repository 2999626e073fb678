"""
Unit Tests für IndicatorContext und OverlaySettings
"""

import pytest
from htf_overlay.core.context import IndicatorContext
from htf_overlay.core.overlay_settings import DisplayStyle, OverlaySettings, read_setting
from htf_overlay.models.color import Color
from htf_overlay.models.parameters import default_settings
from htf_overlay.models.timeframe import TIMEFRAME_CONFIGS


class TestIndicatorContext:
    """Tests für IndicatorContext"""

    def test_defaults(self):
        """Test: Leerer Context"""
        context = IndicatorContext()

        assert context.settings == {}
        assert context.kline_data == []
        assert context.resampled_kline_data("4H") is None
        assert context.current_timeframe_seconds() is None

    def test_resampled_lookup(self, htf_4h):
        """Test: Vorab resampelte Serien per Name"""
        context = IndicatorContext(resampled={"4H": htf_4h})

        assert context.resampled_kline_data("4H") == htf_4h
        assert context.resampled_kline_data("1D") is None

    def test_resampled_keys_case_insensitive(self, htf_4h):
        """Test: "4h" als Key wird auf 4H normalisiert"""
        context = IndicatorContext(resampled={"4h": htf_4h, "weekly": []})

        assert context.resampled_kline_data("4H") == htf_4h
        assert context.resampled_kline_data("weekly") == []

    def test_resampler_preferred(self, htf_4h):
        """Test: Resampler-Callback hat Vorrang"""
        context = IndicatorContext(resampled={"4H": []}, resampler=lambda tf: htf_4h)

        assert context.resampled_kline_data("4H") == htf_4h

    def test_resampler_exception_logged(self, caplog):
        """Test: Resampler-Fehler -> None mit Warnung"""
        def resampler(timeframe):
            raise ValueError("unsupported")

        context = IndicatorContext(resampler=resampler)

        assert context.resampled_kline_data("4H") is None
        assert "Resampler failed for 4H" in caplog.text

    def test_current_timeframe_seconds(self, chart_5m):
        """Test: Abstand der ersten beiden Kerzen"""
        assert IndicatorContext(kline_data=chart_5m).current_timeframe_seconds() == 300

    @pytest.mark.parametrize("step,hide,expected", [
        (300, "1D", False),
        (3600, "30m", True),
        (14400, "1D", True),
        (86400, "1D", True),
    ])
    def test_is_chart_too_coarse(self, series_factory, step, hide, expected):
        """Test: Unterdrückungs-Regel gegen HTF 4H"""
        context = IndicatorContext(kline_data=series_factory(3, step))

        assert context.is_chart_too_coarse(TIMEFRAME_CONFIGS["4H"], TIMEFRAME_CONFIGS[hide]) is expected


class TestOverlaySettings:
    """Tests für OverlaySettings"""

    def test_from_empty_mapping(self):
        """Test: Leeres Mapping -> alle Defaults"""
        settings = OverlaySettings.from_mapping({})

        assert settings.enabled is True
        assert settings.higher_timeframe == "4H"
        assert settings.hide_above == "1D"
        assert settings.candles_to_show == 20
        assert settings.display_style is DisplayStyle.BOX
        assert settings.wicks is True
        assert settings.body_shading is False
        assert settings.timer_position == "Bottom Center"

    def test_from_none(self):
        """Test: None -> Defaults"""
        assert OverlaySettings.from_mapping(None) == OverlaySettings.from_mapping(default_settings())

    def test_color_coercion(self):
        """Test: Hex-Farben werden zu Color"""
        settings = OverlaySettings.from_mapping({"Bull Candle Fill": "#112233"})

        assert settings.bull_fill == Color(0x11, 0x22, 0x33)

    @pytest.mark.parametrize("name,value", [
        ("Enable HTF Overlay", "yes"),
        ("Wicks On/Off", 1),
        ("Wick Line Width", "3"),
        ("Wick Line Width", False),
        ("Bull Candle Wick", "not-a-color"),
        ("Display Style", "Bars"),
        ("Timer Text Size", 14),
    ])
    def test_wrong_type_falls_back(self, name, value):
        """Test: Falsch typisierte Werte -> Default"""
        assert read_setting({name: value}, name) == default_settings()[name]

    def test_timeframe_passed_through(self):
        """Test: Timeframe-Werte werden nicht vorab validiert"""
        assert read_setting({"Higher Timeframe": "4h"}, "Higher Timeframe") == "4h"
        assert read_setting({"Higher Timeframe": None}, "Higher Timeframe") is None

    def test_candle_style(self):
        """Test: Display Style Candle"""
        assert OverlaySettings.from_mapping({"Display Style": "Candle"}).display_style is DisplayStyle.CANDLE
