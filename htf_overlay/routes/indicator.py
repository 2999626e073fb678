"""
Indicator Routes - API Endpoints für das HTF Overlay
Parameter-Deklaration und Berechnung für externe Hosts
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, FastAPI, Request

from ..config import API_PREFIX
from ..services.indicator_service import IndicatorService

logger = logging.getLogger(__name__)


def parse_now(value: Any) -> Optional[datetime]:
    """
    Parst optionalen Zeitpunkt aus dem Payload

    Args:
        value: Unix Timestamp (Sekunden), ISO-String oder None

    Raises:
        ValueError: Bei nicht parsebarem Wert
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Ungültiger Zeitpunkt: {value!r}")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError) as e:
            raise ValueError(f"Zeitpunkt außerhalb des gültigen Bereichs: {value!r}") from e
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    raise ValueError(f"Ungültiger Zeitpunkt: {value!r}")


def setup_indicator_routes(app: FastAPI, indicator_service: IndicatorService) -> APIRouter:
    """
    Registriert Indicator-Routes am FastAPI App

    Args:
        app: FastAPI App-Instanz
        indicator_service: IndicatorService-Instanz

    Returns:
        Registrierter Router
    """
    router = APIRouter(prefix=API_PREFIX, tags=["indicator"])

    @router.get("/parameters")
    async def get_parameters():
        """Indicator-Metadaten und deklarative Parameter-Liste"""
        return indicator_service.describe()

    @router.post("/calculate")
    async def calculate(request: Request):
        """Berechnet Overlay-Drawables aus Settings und Kerzen-Serien"""
        try:
            data = await request.json()
            if not isinstance(data, dict):
                raise ValueError("Payload muss ein JSON-Objekt sein")

            result = indicator_service.calculate_from_payload(data, now=parse_now(data.get('now')))

            return {
                "status": "success",
                "drawables": result['drawables'],
                "count": result['count']
            }

        except (KeyError, ValueError, TypeError, AttributeError, OverflowError) as e:
            logger.error(f"[IndicatorRoutes] Invalid calculate payload: {e}")
            return {
                "status": "error",
                "message": f"Ungültiger Payload: {e}"
            }

    app.include_router(router)
    return router
