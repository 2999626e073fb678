"""
Routes Package - FastAPI Route Modules
"""

from . import indicator

__all__ = [
    'indicator'
]
