"""
Unit Tests für Timeframe Models
"""

import pytest
from htf_overlay.models.timeframe import (
    TimeframeConfig,
    TIMEFRAME_CONFIGS,
    AVAILABLE_TIMEFRAMES,
    parse_timeframe
)


class TestTimeframeConfig:
    """Tests für TimeframeConfig"""

    def test_timeframe_config_creation(self):
        """Test: TimeframeConfig-Erstellung"""
        config = TimeframeConfig(timeframe="5m", minutes=5, display_name="5 Minutes")

        assert config.timeframe == "5m"
        assert config.minutes == 5
        assert config.display_name == "5 Minutes"

    def test_timeframe_config_seconds(self):
        """Test: seconds Property"""
        assert TIMEFRAME_CONFIGS["1m"].seconds == 60
        assert TIMEFRAME_CONFIGS["4H"].seconds == 14400
        assert TIMEFRAME_CONFIGS["1D"].seconds == 86400

    def test_timeframe_config_repr(self):
        """Test: Kompakte Darstellung"""
        assert repr(TIMEFRAME_CONFIGS["4H"]) == "TimeframeConfig(4H, 240min)"


class TestTimeframeConfigs:
    """Tests für TIMEFRAME_CONFIGS"""

    def test_all_timeframes_exist(self):
        """Test: Alle Auswahl-Timeframes vorhanden, aufsteigend sortiert"""
        assert AVAILABLE_TIMEFRAMES == ["1m", "5m", "15m", "30m", "1H", "4H", "1D"]

        minutes = [TIMEFRAME_CONFIGS[tf].minutes for tf in AVAILABLE_TIMEFRAMES]
        assert minutes == sorted(minutes)


class TestParseTimeframe:
    """Tests für parse_timeframe()"""

    def test_parse_timeframe_exact(self):
        """Test: Kanonische Namen"""
        config = parse_timeframe("1H")

        assert config is TIMEFRAME_CONFIGS["1H"]
        assert config.minutes == 60

    def test_parse_timeframe_case_insensitive(self):
        """Test: "4h" und " 1d " werden aufgelöst"""
        assert parse_timeframe("4h") is TIMEFRAME_CONFIGS["4H"]
        assert parse_timeframe(" 1d ") is TIMEFRAME_CONFIGS["1D"]

    @pytest.mark.parametrize("value", [None, "", "10m", "weekly", 240, ["4H"]])
    def test_parse_timeframe_invalid(self, value):
        """Test: Nicht parsebare Werte -> None"""
        assert parse_timeframe(value) is None
