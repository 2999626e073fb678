"""
Services Layer für HTF Overlay
Business Logic Layer - koordiniert Core und Models
"""

from .indicator_service import IndicatorService

__all__ = [
    'IndicatorService'
]
