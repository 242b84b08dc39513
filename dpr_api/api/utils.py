"""
API Utilities

This module contains utility functions used across the API endpoints.
"""

import asyncio
import logging
from datetime import datetime
from functools import wraps
from typing import Any, Callable, Dict, Optional

from fastapi import Request, Response

logger = logging.getLogger(__name__)


def _find_request(args: tuple, kwargs: Dict[str, Any]) -> Optional[Request]:
    request = kwargs.get('request')
    if request is None:
        for arg in args:
            if isinstance(arg, Request):
                return arg
    return request


def _describe(request: Optional[Request], func: Callable) -> str:
    if request is not None:
        return f"{request.method} {request.url.path}"
    return func.__name__


def log_api_call(func: Callable):
    """
    Decorator to log API calls with timing information.

    Works for both ``def`` and ``async def`` endpoints; the wrapper keeps the
    kind of the wrapped function so FastAPI still runs sync endpoints in its
    threadpool.

    Args:
        func: The API endpoint function to wrap

    Returns:
        Wrapped function with logging
    """
    if asyncio.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            request = _find_request(args, kwargs)
            endpoint = _describe(request, func)
            logger.info(f"API call: {endpoint}")
            start_time = datetime.now()
            try:
                response = await func(*args, **kwargs)
            except Exception as e:
                elapsed = (datetime.now() - start_time).total_seconds() * 1000
                logger.error(f"API call failed: {endpoint} ({elapsed:.2f}ms) - {e}")
                raise
            elapsed = (datetime.now() - start_time).total_seconds() * 1000
            logger.info(f"API call completed: {endpoint} ({elapsed:.2f}ms)")
            return response

        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        request = _find_request(args, kwargs)
        endpoint = _describe(request, func)
        logger.info(f"API call: {endpoint}")
        start_time = datetime.now()
        try:
            response = func(*args, **kwargs)
        except Exception as e:
            elapsed = (datetime.now() - start_time).total_seconds() * 1000
            logger.error(f"API call failed: {endpoint} ({elapsed:.2f}ms) - {e}")
            raise
        elapsed = (datetime.now() - start_time).total_seconds() * 1000
        logger.info(f"API call completed: {endpoint} ({elapsed:.2f}ms)")
        return response

    return wrapper


def add_pagination_headers(response: Response, pagination: Dict[str, Any]) -> None:
    """
    Add pagination headers to the response.

    Args:
        response: FastAPI response object
        pagination: Pagination block as built by calculate_pagination_info

    Returns:
        None, modifies the response in place
    """
    response.headers["X-Total-Count"] = str(pagination["totalItems"])
    response.headers["X-Page-Count"] = str(pagination["totalPages"])
    response.headers["X-Current-Page"] = str(pagination["currentPage"])
    response.headers["X-Page-Size"] = str(pagination["itemsPerPage"])
