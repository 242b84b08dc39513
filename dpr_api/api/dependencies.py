"""
API Dependencies

FastAPI dependencies injected into route handlers. The DataStore instance is
created by the application lifespan and stored here.
"""

import logging
from typing import Optional

from fastapi import status

from dpr_api.api.config import Settings, settings
from dpr_api.api.error_handlers import APIError
from dpr_api.data.data_store import DataStore

logger = logging.getLogger(__name__)

# Global service instance - initialized in app.py
data_store: Optional[DataStore] = None


def get_settings() -> Settings:
    """Dependency that yields the application settings."""
    return settings


def get_data_store() -> DataStore:
    """
    Dependency that yields the global data_store.

    Returns:
        DataStore instance

    Raises:
        APIError: 503 if the DataStore is not initialized
    """
    if not data_store:
        logger.critical("Attempted to access DataStore before initialization")
        raise APIError(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            "Service unavailable",
            "Layanan database belum siap"
        )
    return data_store


def get_optional_data_store() -> Optional[DataStore]:
    """Dependency for endpoints that report on the store instead of requiring it."""
    return data_store


# Export all dependencies
__all__ = [
    'get_settings',
    'get_data_store',
    'get_optional_data_store',
]
