"""
HTF Overlay Server
FastAPI App für Hosts, die den Indicator über HTTP ansprechen

Start:
    uvicorn htf_overlay.server:app --port 8003
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .config import SERVER_CONFIG
from .routes.indicator import setup_indicator_routes
from .services.indicator_service import IndicatorService


def create_app(indicator_service: Optional[IndicatorService] = None) -> FastAPI:
    """
    Erstellt FastAPI App mit registrierten Indicator-Routes

    Args:
        indicator_service: Optionaler Service (Default: neue Instanz)
    """
    logging.basicConfig(level=logging.INFO)

    app = FastAPI(title=SERVER_CONFIG['title'], version=SERVER_CONFIG['version'])
    setup_indicator_routes(app, indicator_service or IndicatorService())
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=SERVER_CONFIG['host'], port=SERVER_CONFIG['port'])
