"""Pytest configuration and shared fixtures for timecard tests.

- Builds requests around a known week (Sun 2024-01-07 .. Sat 2024-01-13)
- Wires a TimecardWriter to the built-in template (no files read)
- FastAPI test client with the writer dependency overridden
"""

from io import BytesIO
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from fastapi.testclient import TestClient
from openpyxl import load_workbook

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from timecard.excel.excel_template_loader import ExcelTemplateLoader
from timecard.excel.template_builder import build_default_template
from timecard.excel.timecard_writer import TimecardWriter
from timecard.models.schema import TimecardEntry, TimecardRequest

WEEK_DATES = [
    "2024-01-07",
    "2024-01-08",
    "2024-01-09",
    "2024-01-10",
    "2024-01-11",
    "2024-01-12",
    "2024-01-13",
]


@pytest.fixture(scope="session")
def template_bytes() -> bytes:
    """Built-in template, built once per session."""
    return build_default_template()


@pytest.fixture
def template_loader(template_bytes: bytes) -> ExcelTemplateLoader:
    return ExcelTemplateLoader(template_bytes=template_bytes)


@pytest.fixture
def writer(template_loader: ExcelTemplateLoader) -> TimecardWriter:
    return TimecardWriter(template_loader=template_loader)


@pytest.fixture
def make_request() -> Callable[..., TimecardRequest]:
    """Factory for requests; ``dates`` replaces the default week."""

    def _make(dates: Optional[List[str]] = None, **overrides) -> TimecardRequest:
        rows = [
            TimecardEntry(date=value, project="Site A", hours=8, type="regular", notes="")
            for value in (WEEK_DATES if dates is None else dates)
        ]
        fields = {"employee_name": "Jordan Smith", "week_number": 1, "rows": rows, "total_oc": 2.5, "total_ot": 4.0}
        fields.update(overrides)
        return TimecardRequest(**fields)

    return _make


@pytest.fixture
def request_payload() -> dict:
    """A valid POST /excel body using wire field names."""
    return {
        "employeeName": "Jordan Smith",
        "weekNumber": 2,
        "rows": [
            {"date": value, "project": "Site A", "hours": 8, "type": "regular", "notes": ""}
            for value in WEEK_DATES
        ],
        "totalOC": 2.5,
        "totalOT": 4.0,
    }


@pytest.fixture
def open_result() -> Callable[[bytes], object]:
    """Re-read produced bytes with openpyxl."""

    def _open(content: bytes):
        return load_workbook(BytesIO(content))

    return _open


@pytest.fixture
def api_client(writer: TimecardWriter):
    """FastAPI test client backed by the built-in template."""
    from timecard.api.routes import get_timecard_writer
    from timecard.main import app

    app.dependency_overrides[get_timecard_writer] = lambda: writer
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.pop(get_timecard_writer, None)
