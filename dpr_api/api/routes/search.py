"""
Search Routes

Free-text search combined with structured filters.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Request, Response

from dpr_api.api.config import Settings
from dpr_api.api.dependencies import get_data_store, get_settings
from dpr_api.api.error_handlers import error_handler
from dpr_api.api.models import SearchRequest, SearchResponse
from dpr_api.api.utils import add_pagination_headers, log_api_call
from dpr_api.data.data_store import DataStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/search", response_model=SearchResponse)
@log_api_call
def search_members(
    request: Request,
    response: Response,
    search: Optional[SearchRequest] = Body(None),
    store: DataStore = Depends(get_data_store),
    settings: Settings = Depends(get_settings)
):
    """
    Search members.

    The query matches name, faction, party, electoral district, birthplace
    and education (case-insensitive substring, any column). Filters are
    ANDed on top. ``total`` counts every match; ``results`` holds one page.
    """
    search = search or SearchRequest()
    with error_handler("search_members", "Gagal melakukan pencarian"):
        result = store.search_members(
            query=search.query,
            filters=search.filters.to_mapping(),
            page=search.page,
            limit=search.limit,
            sort_by=search.sort_by,
            sort_order=search.sort_order,
            default_limit=settings.DEFAULT_PAGE_SIZE
        )

    add_pagination_headers(response, result["pagination"])
    return {
        "success": True,
        "results": result["items"],
        "query": search.query,
        "count": len(result["items"]),
        "total": result["total"],
        "pagination": result["pagination"],
    }
