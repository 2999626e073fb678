"""
Zentrale Konfiguration für das HTF Overlay
Konstanten und Default-Werte an einer Stelle
"""

# Obergrenze wenn "Candles to Show" = 0 (alle verfügbaren HTF-Kerzen)
MAX_HTF_CANDLES = 5000

# Default für "Candles to Show"
DEFAULT_CANDLES_TO_SHOW = 20

# Countdown-Timer Schrift
COUNTDOWN_FONT_FAMILY = "SansSerif"
COUNTDOWN_FONT_BOLD = True
DEFAULT_COUNTDOWN_FONT_SIZE = 12
COUNTDOWN_FONT_SIZES = {
    'Tiny': 10,
    'Small': 12,
    'Medium': 14,
    'Large': 16
}

# Indicator-Metadaten
INDICATOR_NAME = "HTF Overlay"
INDICATOR_TYPE = "OVERLAY"

# API
API_PREFIX = "/api/indicator/htf-overlay"
SERVER_CONFIG = {
    'title': "HTF Overlay Indicator Server",
    'version': "1.0.0",
    'host': "127.0.0.1",
    'port': 8003
}
