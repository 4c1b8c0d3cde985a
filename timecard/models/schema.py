from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _drop_nulls(data: Any) -> Any:
    """Drop JSON nulls so the field defaults apply."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class TimecardEntry(BaseModel):
    """One daily row of the timecard, Sunday first."""

    date: str = Field(default="", description="Calendar date text in any accepted format.")
    project: str = ""
    hours: float = 0.0
    type: str = Field(default="", description="Entry type label (e.g. regular, OC, OT).")
    notes: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_fields_use_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)


class TimecardRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    employee_name: str = Field(default="", alias="employeeName")
    week_number: int = Field(
        default=1,
        alias="weekNumber",
        description="Week of the two-week timecard; values other than 1 or 2 mean week 1.",
    )
    rows: List[TimecardEntry] = Field(
        default_factory=list,
        description="Daily rows; the first seven fill the date columns.",
    )
    total_oc: float = Field(default=0.0, alias="totalOC")
    total_ot: float = Field(default=0.0, alias="totalOT")

    @model_validator(mode="before")
    @classmethod
    def null_fields_use_defaults(cls, data: Any) -> Any:
        data = _drop_nulls(data)
        if isinstance(data, dict) and isinstance(data.get("rows"), list):
            data["rows"] = [{} if row is None else row for row in data["rows"]]
        return data


class ErrorResponse(BaseModel):
    detail: str
