"""Fixed cell coordinates of the timecard template, per week.

Mapping-only module. No file I/O, no openpyxl workbook access. Each week of
the two-week timecard lives on its own sheet with an identical grid:
employee name at the top right, the "Sun Date Start" box, the regular-hours
date column and the overtime date column seven rows each.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, List, Mapping, Optional

from openpyxl.utils.cell import coordinate_from_string
from openpyxl.utils.exceptions import CellCoordinatesException

from timecard.utils.helpers.exceptions import ConfigurationError


DAYS_PER_WEEK = 7
DEFAULT_WEEK = 1


@dataclass(frozen=True)
class WeekLayout:
    """Target cells for one week of the timecard template."""

    sheet: str                          # Worksheet title in the template
    employee_cell: str                  # Employee display name
    main_dates_top: str                 # First (Sunday) cell of the regular-hours date column
    ot_dates_top: str                   # First (Sunday) cell of the overtime date column
    week_start_cell: str = "B4"         # "Sun Date Start" box
    total_oc_cell: Optional[str] = None  # Optional home for the caller's OC total
    total_ot_cell: Optional[str] = None  # Optional home for the caller's OT total


WEEK_LAYOUTS: Mapping[int, WeekLayout] = MappingProxyType({
    1: WeekLayout(sheet="Week 1", employee_cell="M2", main_dates_top="B5", ot_dates_top="B16"),
    2: WeekLayout(sheet="Week 2", employee_cell="M2", main_dates_top="B5", ot_dates_top="B16"),
})

_CELL_FIELDS = ("employee_cell", "main_dates_top", "ot_dates_top", "week_start_cell", "total_oc_cell", "total_ot_cell")
_OVERRIDABLE_FIELDS = ("sheet",) + _CELL_FIELDS
_OPTIONAL_CELL_FIELDS = ("total_oc_cell", "total_ot_cell")


def resolve_layout(week_number: Any, layouts: Mapping[int, WeekLayout] = WEEK_LAYOUTS) -> WeekLayout:
    """Return the layout for ``week_number``; anything unknown falls back to week 1."""
    try:
        return layouts[week_number]
    except (KeyError, TypeError):
        return layouts[DEFAULT_WEEK]


def block_cells(top: str, count: int = DAYS_PER_WEEK) -> List[str]:
    """Return ``count`` coordinates running down the column from ``top``."""
    column, row = coordinate_from_string(top)
    return [f"{column}{row + offset}" for offset in range(count)]


def apply_overrides(overrides: Mapping[str, Mapping[str, Any]]) -> Mapping[int, WeekLayout]:
    """Build a layout table with per-week field overrides applied.

    ``overrides`` is keyed by week ("1"/"2" or 1/2); values map ``WeekLayout``
    field names to replacement values. Cell fields are validated as A1
    coordinates; only the totals cells may be set to null.
    """
    merged = dict(WEEK_LAYOUTS)
    for raw_week, fields in (overrides or {}).items():
        try:
            week = int(raw_week)
        except (TypeError, ValueError):
            raise ConfigurationError(f"Unknown week in layout overrides: {raw_week!r}") from None
        if week not in merged:
            raise ConfigurationError(f"Unknown week in layout overrides: {raw_week!r}")
        if not isinstance(fields, Mapping):
            raise ConfigurationError(f"Layout override for week {week} must be an object")

        for name, value in fields.items():
            if name not in _OVERRIDABLE_FIELDS:
                raise ConfigurationError(f"Unknown layout field {name!r} for week {week}")
            if name in _CELL_FIELDS and not (value is None and name in _OPTIONAL_CELL_FIELDS):
                _validate_cell(value, name, week)
            if name == "sheet" and not (isinstance(value, str) and value):
                raise ConfigurationError(f"Layout field 'sheet' for week {week} must be a non-empty string")

        merged[week] = replace(merged[week], **dict(fields))
    return MappingProxyType(merged)


def _validate_cell(value: Any, name: str, week: int) -> None:
    if not isinstance(value, str):
        raise ConfigurationError(f"Layout field {name!r} for week {week} is not a cell: {value!r}")
    try:
        coordinate_from_string(value)
    except CellCoordinatesException:
        raise ConfigurationError(f"Layout field {name!r} for week {week} is not a cell: {value!r}") from None


__all__ = [
    "DAYS_PER_WEEK",
    "DEFAULT_WEEK",
    "WEEK_LAYOUTS",
    "WeekLayout",
    "apply_overrides",
    "block_cells",
    "resolve_layout",
]
