"""Timecard writer: populate the week template from a submitted timecard.

Responsibilities:
- Reject requests with fewer than seven rows before touching the template
- Resolve the week layout (unknown weeks fall back to week 1)
- Open a fresh workbook per request from the template loader
- Write the employee name, both date columns and the "Sun Date Start" box
- Write OC/OT totals when the layout names cells for them
- Serialize the workbook to xlsx bytes

Dates are best-effort: a row whose date does not parse leaves its cells as
the template has them, and every other cell is still written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Mapping, Optional

from openpyxl.styles import Alignment
from openpyxl.workbook.workbook import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from timecard.excel.excel_repository import ExcelRepository
from timecard.excel.excel_template_loader import ExcelTemplateLoader
from timecard.excel.week_layouts import DAYS_PER_WEEK, WEEK_LAYOUTS, WeekLayout, block_cells, resolve_layout
from timecard.models.schema import TimecardRequest
from timecard.utils.helpers.date_utils import try_parse_timecard_date, week_start
from timecard.utils.helpers.exceptions import InsufficientRowsError, TemplateLoadError

# Excel built-in number format 14: short date, rendered in the viewer's locale.
DATE_NUMBER_FORMAT = "mm-dd-yy"
DATE_ALIGNMENT = Alignment(horizontal="center", vertical="center")


@dataclass
class PopulateResult:
    """Serialized workbook plus the date cells left untouched."""

    content: bytes
    sheet: str
    skipped_cells: List[str] = field(default_factory=list)


class TimecardWriter:
    """Write one timecard request into a fresh copy of the template."""

    def __init__(
        self,
        *,
        template_loader: Optional[ExcelTemplateLoader] = None,
        repository: Optional[ExcelRepository] = None,
        layouts: Mapping[int, WeekLayout] = WEEK_LAYOUTS,
    ) -> None:
        self.template_loader = template_loader or ExcelTemplateLoader()
        self.repository = repository or ExcelRepository()
        self.layouts = layouts
        self.logger = logging.getLogger(__name__)

    def populate(self, request: TimecardRequest) -> bytes:
        """Return the populated workbook as xlsx bytes."""
        return self.populate_report(request).content

    def populate_report(self, request: TimecardRequest) -> PopulateResult:
        if len(request.rows) < DAYS_PER_WEEK:
            raise InsufficientRowsError(len(request.rows), DAYS_PER_WEEK)

        layout = resolve_layout(request.week_number, self.layouts)
        wb = self.template_loader.open_fresh()
        try:
            ws = self._sheet(wb, layout.sheet)

            if request.employee_name:
                ws[layout.employee_cell] = request.employee_name

            dates = [try_parse_timecard_date(row.date) for row in request.rows[:DAYS_PER_WEEK]]
            skipped: List[str] = []
            skipped += self._fill_dates(ws, layout.main_dates_top, dates)
            skipped += self._fill_dates(ws, layout.ot_dates_top, dates)
            if skipped:
                self.logger.warning(
                    "Unparseable timecard dates left blank",
                    extra={"sheet": layout.sheet, "cells": skipped},
                )

            if dates[0] is not None:
                self._write_date(ws, layout.week_start_cell, week_start(dates[0]))
            else:
                self.logger.debug("Week start not written; first row date did not parse")

            if layout.total_oc_cell:
                ws[layout.total_oc_cell] = request.total_oc
            if layout.total_ot_cell:
                ws[layout.total_ot_cell] = request.total_ot

            content = self.repository.to_bytes(wb)
        finally:
            wb.close()

        return PopulateResult(content=content, sheet=layout.sheet, skipped_cells=skipped)

    # -----------------
    # Internals
    # -----------------
    @staticmethod
    def _sheet(wb: Workbook, name: str) -> Worksheet:
        if name not in wb.sheetnames:
            raise TemplateLoadError(f"Sheet '{name}' not found in template")
        return wb[name]

    def _fill_dates(self, ws: Worksheet, top: str, dates: List[Optional[date]]) -> List[str]:
        """Write ``dates`` down the column from ``top``; return cells skipped."""
        skipped = []
        for cell, value in zip(block_cells(top, DAYS_PER_WEEK), dates):
            if value is None:
                skipped.append(cell)
                continue
            self._write_date(ws, cell, value)
        return skipped

    @staticmethod
    def _write_date(ws: Worksheet, coordinate: str, value: date) -> None:
        # Only alignment and number format change; borders and fills stay.
        cell = ws[coordinate]
        cell.value = value
        cell.alignment = DATE_ALIGNMENT
        cell.number_format = DATE_NUMBER_FORMAT


__all__ = ["PopulateResult", "TimecardWriter", "DATE_NUMBER_FORMAT"]
