"""
HTF Overlay
Higher-Timeframe Kerzen als Overlay auf einem Lower-Timeframe Chart
"""

__version__ = "1.0.0"
