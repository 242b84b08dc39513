"""
API Routes Package

This package contains all the route modules for the members API.
Each module corresponds to a specific area of functionality; app.py mounts
them all under the API prefix.
"""

from .health import router as health_router
from .members import router as members_router
from .search import router as search_router
from .stats import router as stats_router
from .export import router as export_router

# Export all routers for easy access
__all__ = [
    'health_router',
    'members_router',
    'search_router',
    'stats_router',
    'export_router',
]
