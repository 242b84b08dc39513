"""
Member Routes

Paginated listing of members and lookup of a single member.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from dpr_api.api.config import Settings
from dpr_api.api.dependencies import get_data_store, get_settings
from dpr_api.api.error_handlers import APIError, error_handler
from dpr_api.api.models import MemberDetailResponse, MemberListResponse
from dpr_api.api.utils import add_pagination_headers, log_api_call
from dpr_api.data.data_store import DataStore
from dpr_api.data.query_builder import DEFAULT_SORT_FIELD

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/members", response_model=MemberListResponse)
@log_api_call
def list_members(
    request: Request,
    response: Response,
    page: str = Query("1"),
    limit: Optional[str] = Query(None),
    sort_by: str = Query(DEFAULT_SORT_FIELD, alias="sortBy"),
    sort_order: str = Query("ASC", alias="sortOrder"),
    store: DataStore = Depends(get_data_store),
    settings: Settings = Depends(get_settings)
):
    """
    List members, one page at a time.

    Unparsable or non-positive ``page``/``limit`` values fall back to the
    defaults; unknown sort fields fall back to ``nama``.
    """
    with error_handler("list_members", "Gagal mengambil data anggota"):
        result = store.search_members(
            page=page,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
            default_limit=settings.DEFAULT_PAGE_SIZE
        )

    add_pagination_headers(response, result["pagination"])
    return {
        "success": True,
        "data": result["items"],
        "pagination": result["pagination"],
    }


@router.get("/members/{member_id}", response_model=MemberDetailResponse)
@log_api_call
def get_member(
    request: Request,
    member_id: str,
    store: DataStore = Depends(get_data_store)
):
    """
    Retrieve one member by primary key or by the ``anggota`` reference id.
    """
    with error_handler("get_member", "Gagal mengambil data anggota"):
        member = store.get_member(member_id)

    if member is None:
        raise APIError(status.HTTP_404_NOT_FOUND, "Member not found", "Anggota DPR tidak ditemukan")

    return {"success": True, "data": member}
