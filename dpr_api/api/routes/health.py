"""
Health Check Routes

Reports whether the API is up and whether the database answers.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Request

from dpr_api.api.config import Settings
from dpr_api.api.dependencies import get_optional_data_store, get_settings
from dpr_api.api.models import HealthResponse
from dpr_api.api.utils import log_api_call
from dpr_api.data.data_store import DataStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
@log_api_call
def health_check(
    request: Request,
    store: Optional[DataStore] = Depends(get_optional_data_store),
    settings: Settings = Depends(get_settings)
):
    """
    Health check endpoint to verify the API and database are functioning properly.

    Always answers 200; a missing or unreachable database is reported as
    ``degraded`` rather than failing the probe.
    """
    db_connected = bool(store and store.ping())
    if not db_connected:
        logger.warning("Health check: database unavailable")

    return {
        "success": True,
        "status": "healthy" if db_connected else "degraded",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected" if db_connected else "disconnected",
        "environment": settings.ENVIRONMENT,
    }
