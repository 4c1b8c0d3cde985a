"""Timecard export endpoint.

Endpoints:
- POST /excel - Populate the timecard template and return it as Timecard.xlsx
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response

from timecard.excel.excel_template_loader import ExcelTemplateLoader
from timecard.excel.timecard_writer import TimecardWriter
from timecard.models.schema import ErrorResponse, TimecardRequest
from timecard.services.config_service import ConfigService
from timecard.utils.helpers.exceptions import InsufficientRowsError, SerializationError, TemplateLoadError
from timecard.utils.logging_utils import log_timecard_event

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
DOWNLOAD_FILENAME = "Timecard.xlsx"

router = APIRouter(tags=["timecard"])

# Singleton writer instance; the template bytes it holds are read-only.
_timecard_writer: Optional[TimecardWriter] = None


def get_timecard_writer() -> TimecardWriter:
    """Get or create the TimecardWriter singleton."""
    global _timecard_writer
    if _timecard_writer is None:
        config = ConfigService()
        _timecard_writer = TimecardWriter(
            template_loader=ExcelTemplateLoader(config.template_path),
            layouts=config.get_layouts(),
        )
    return _timecard_writer


@router.post(
    "/excel",
    response_class=Response,
    responses={
        200: {"content": {XLSX_MEDIA_TYPE: {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def make_timecard(
    request: TimecardRequest,
    writer: TimecardWriter = Depends(get_timecard_writer),
) -> Response:
    """Return the populated timecard workbook as a download."""
    try:
        result = writer.populate_report(request)
    except InsufficientRowsError as exc:
        log_timecard_event({"event": "populate_rejected", "row_count": exc.count})
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="need at least 7 rows (Sun..Sat)") from exc
    except (TemplateLoadError, SerializationError) as exc:
        logger.exception("Timecard population failed")
        log_timecard_event({"event": "populate_failed", "error": type(exc).__name__})
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)) from exc

    log_timecard_event({
        "event": "populate_succeeded",
        "week_number": request.week_number,
        "sheet": result.sheet,
        "row_count": len(request.rows),
        "skipped_cells": result.skipped_cells,
        "size": len(result.content),
    })
    return Response(
        content=result.content,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOWNLOAD_FILENAME}"'},
    )
