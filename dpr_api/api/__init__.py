"""
dpr_api/api/__init__.py

HTTP layer for the members API.
"""

from .app import app

__all__ = ['app']
