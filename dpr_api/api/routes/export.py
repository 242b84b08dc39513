"""
Export Routes

Bulk export of the member table as CSV or JSON.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import Response

from dpr_api.api.config import Settings
from dpr_api.api.dependencies import get_data_store, get_settings
from dpr_api.api.error_handlers import error_handler
from dpr_api.api.utils import log_api_call
from dpr_api.data.data_store import DataStore
from dpr_api.data.export import EXPORT_FILENAME, to_csv, to_json_payload

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/export")
@log_api_call
def export_members(
    request: Request,
    export_format: str = Query("json", alias="format"),
    store: DataStore = Depends(get_data_store),
    settings: Settings = Depends(get_settings)
):
    """
    Export up to EXPORT_LIMIT members ordered by name.

    ``format=csv`` returns a file attachment; any other value returns the
    JSON envelope.
    """
    with error_handler("export_members", "Gagal mengekspor data"):
        members = store.export_members(settings.EXPORT_LIMIT)

        if export_format.lower() == "csv":
            content = to_csv(members, strict=settings.EXPORT_CSV_STRICT)
            logger.info(f"Exported {len(members)} members as CSV")
            return Response(
                content=content,
                media_type="text/csv",
                headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'}
            )

        logger.info(f"Exported {len(members)} members as JSON")
        return to_json_payload(members)
