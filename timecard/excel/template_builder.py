"""Built-in two-week timecard template.

Used when no template file is configured. The grid matches ``WEEK_LAYOUTS``:
employee name in M2, "Sun Date Start" in B4, regular hours on rows 5-11 and
overtime on rows 16-22 with the date in column B.
"""

from __future__ import annotations

from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from timecard.excel.week_layouts import DAYS_PER_WEEK, WEEK_LAYOUTS

WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
BLOCK_HEADERS = ["Day", "Date", "Project", "Hours", "Type", "Notes"]

MAIN_HEADER_ROW = 3
MAIN_FIRST_ROW = 5
OT_TITLE_ROW = 14
OT_HEADER_ROW = 15
OT_FIRST_ROW = 16

_THIN = Side(style="thin")
THIN_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(start_color="D9E1F2", end_color="D9E1F2", fill_type="solid")
TOTAL_FILL = PatternFill(start_color="F2F2F2", end_color="F2F2F2", fill_type="solid")


def build_default_template() -> bytes:
    """Return the default template workbook serialized as xlsx bytes."""
    wb = Workbook()
    wb.remove(wb.active)
    for layout in WEEK_LAYOUTS.values():
        _create_week_sheet(wb, layout.sheet)

    buffer = BytesIO()
    wb.save(buffer)
    wb.close()
    return buffer.getvalue()


def _create_week_sheet(wb: Workbook, title: str) -> Worksheet:
    ws = wb.create_sheet(title=title)

    ws["A1"] = "Weekly Timecard"
    ws["A1"].font = Font(bold=True, size=14)
    ws["L2"] = "Employee:"
    ws["L2"].font = HEADER_FONT
    ws["M2"].border = THIN_BORDER
    ws.merge_cells("M2:O2")

    ws["A4"] = "Sun Date Start"
    ws["A4"].font = HEADER_FONT
    ws["B4"].border = THIN_BORDER

    _write_block(ws, MAIN_HEADER_ROW, MAIN_FIRST_ROW)
    ws.cell(row=MAIN_FIRST_ROW + DAYS_PER_WEEK, column=3, value="Total").font = HEADER_FONT

    ws.cell(row=OT_TITLE_ROW, column=1, value="Overtime").font = Font(bold=True, size=12)
    _write_block(ws, OT_HEADER_ROW, OT_FIRST_ROW)
    ws.cell(row=OT_FIRST_ROW + DAYS_PER_WEEK, column=3, value="Total").font = HEADER_FONT

    widths = {"A": 16, "B": 12, "C": 24, "D": 8, "E": 12, "F": 30, "L": 11, "M": 14}
    for column, width in widths.items():
        ws.column_dimensions[column].width = width
    return ws


def _write_block(ws: Worksheet, header_row: int, first_row: int) -> None:
    for col_idx, header in enumerate(BLOCK_HEADERS, start=1):
        cell = ws.cell(row=header_row, column=col_idx, value=header)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = THIN_BORDER
        cell.alignment = Alignment(horizontal="center")

    for offset, day_name in enumerate(WEEKDAY_NAMES):
        row = first_row + offset
        ws.cell(row=row, column=1, value=day_name).border = THIN_BORDER
        for col_idx in range(2, len(BLOCK_HEADERS) + 1):
            ws.cell(row=row, column=col_idx).border = THIN_BORDER

    total_row = first_row + DAYS_PER_WEEK
    for col_idx in range(1, len(BLOCK_HEADERS) + 1):
        cell = ws.cell(row=total_row, column=col_idx)
        cell.fill = TOTAL_FILL
        cell.border = THIN_BORDER


__all__ = ["build_default_template", "WEEKDAY_NAMES"]
