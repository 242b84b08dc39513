"""
Statistics Routes

Aggregate statistics for the dashboard and the distinct values that feed the
search filter dropdowns.
"""

import logging

from fastapi import APIRouter, Depends, Request

from dpr_api.api.dependencies import get_data_store
from dpr_api.api.error_handlers import error_handler
from dpr_api.api.models import FilterOptionsResponse, StatsResponse
from dpr_api.api.utils import log_api_call
from dpr_api.data.data_store import DataStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=StatsResponse)
@log_api_call
async def get_stats(request: Request, store: DataStore = Depends(get_data_store)):
    """
    Statistics bundle. A failing sub-query yields an empty list for its key
    instead of failing the whole response.
    """
    with error_handler("get_stats", "Gagal mengambil statistik"):
        stats = await store.get_stats()
    return {"success": True, "data": stats}


@router.get("/filters", response_model=FilterOptionsResponse)
@log_api_call
async def get_filter_options(request: Request, store: DataStore = Depends(get_data_store)):
    """
    Distinct non-empty values for fraksi, partai, agama, pendidikan and dapil.
    """
    with error_handler("get_filter_options", "Gagal mengambil opsi filter"):
        options = await store.get_filter_options()
    return {"success": True, "data": options}
