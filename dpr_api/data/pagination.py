"""
dpr_api/data/pagination.py

Page-based pagination helpers shared by the listing and search endpoints.
"""

import math
from typing import Any, Dict, Optional, Tuple

DEFAULT_PAGE_SIZE = 25


def _as_int(value: Any) -> Optional[int]:
    """Best-effort integer coercion; returns None for missing or unparsable values."""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def normalize_page_params(
    page: Any,
    limit: Any,
    default_limit: int = DEFAULT_PAGE_SIZE
) -> Tuple[int, int, int]:
    """
    Clamp raw page/limit values into a usable (page, limit, offset) triple.

    A missing, non-numeric or non-positive page becomes 1 and a non-positive
    limit becomes ``default_limit``, so the offset is never negative and the
    page count never divides by zero.

    Args:
        page: 1-based page number as received from the client
        limit: Page size as received from the client
        default_limit: Page size used when ``limit`` is unusable

    Returns:
        Tuple of (page, limit, offset)
    """
    page_num = _as_int(page)
    if page_num is None or page_num < 1:
        page_num = 1

    page_size = _as_int(limit)
    if page_size is None or page_size < 1:
        page_size = max(1, default_limit)

    return page_num, page_size, (page_num - 1) * page_size


def calculate_pagination_info(page: int, limit: int, total: int) -> Dict[str, Any]:
    """
    Calculate pagination metadata for a page of results.

    Args:
        page: 1-based current page
        limit: Page size
        total: Total number of matching records

    Returns:
        Dict[str, Any]: currentPage, totalPages, totalItems, itemsPerPage, hasNext, hasPrev
    """
    total = max(0, int(total or 0))
    total_pages = math.ceil(total / limit) if limit > 0 else 0

    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total,
        "itemsPerPage": limit,
        "hasNext": page < total_pages,
        "hasPrev": page > 1,
    }
