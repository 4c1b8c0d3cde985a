"""Excel repository: serialize populated workbooks to bytes."""

from __future__ import annotations

import logging
from io import BytesIO

from openpyxl.workbook.workbook import Workbook

from timecard.utils.helpers.exceptions import SerializationError


class ExcelRepository:
    """Thin persistence layer over ``Workbook.save``."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    # -----------------
    # Public API
    # -----------------
    def to_bytes(self, workbook: Workbook) -> bytes:
        buffer = BytesIO()
        try:
            workbook.save(buffer)
        except Exception as exc:
            raise SerializationError(f"write xlsx: {exc}") from exc
        data = buffer.getvalue()
        self.logger.debug("Timecard workbook serialized", extra={"size": len(data)})
        return data


__all__ = ["ExcelRepository"]
