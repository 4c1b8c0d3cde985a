import json
from datetime import datetime

import pytest
from openpyxl import load_workbook

from timecard.cli import main


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("TIMECARD_TEMPLATE_PATH", "TIMECARD_LAYOUTS_PATH"):
        monkeypatch.delenv(name, raising=False)


def test_fill_writes_workbook(tmp_path, request_payload, capsys):
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(request_payload), encoding="utf-8")
    output = tmp_path / "out" / "Timecard.xlsx"

    assert main(["fill", str(request_file), "-o", str(output)]) == 0

    ws = load_workbook(output)["Week 2"]
    assert ws["M2"].value == "Jordan Smith"
    assert ws["B4"].value == datetime(2024, 1, 7)
    assert "Timecard written to" in capsys.readouterr().out


def test_fill_week_override_and_skipped_cells(tmp_path, request_payload, capsys):
    request_payload["rows"][3]["date"] = "someday"
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(request_payload), encoding="utf-8")
    output = tmp_path / "Timecard.xlsx"

    assert main(["fill", str(request_file), "-o", str(output), "--week", "1"]) == 0

    ws = load_workbook(output)["Week 1"]
    assert ws["M2"].value == "Jordan Smith"
    assert ws["B8"].value is None
    out = capsys.readouterr().out
    assert "skipped B8" in out
    assert "skipped B19" in out


def test_fill_rejects_short_week(tmp_path, request_payload, capsys):
    request_payload["rows"] = request_payload["rows"][:6]
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(request_payload), encoding="utf-8")
    output = tmp_path / "Timecard.xlsx"

    assert main(["fill", str(request_file), "-o", str(output)]) == 1
    assert not output.exists()
    assert "need at least 7 rows" in capsys.readouterr().err


def test_fill_rejects_malformed_file(tmp_path, capsys):
    request_file = tmp_path / "request.json"
    request_file.write_text("{oops", encoding="utf-8")

    assert main(["fill", str(request_file), "-o", str(tmp_path / "x.xlsx")]) == 2
    assert "bad request file" in capsys.readouterr().err


def test_fill_reads_dotenv_from_working_directory(tmp_path, request_payload, monkeypatch):
    layouts_file = tmp_path / "layouts.json"
    layouts_file.write_text(json.dumps({"2": {"total_oc_cell": "N13"}}), encoding="utf-8")
    (tmp_path / ".env").write_text(f"TIMECARD_LAYOUTS_PATH={layouts_file}\n", encoding="utf-8")
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(request_payload), encoding="utf-8")
    output = tmp_path / "Timecard.xlsx"
    monkeypatch.chdir(tmp_path)
    # Registered so monkeypatch removes the value load_dotenv sets
    monkeypatch.setenv("TIMECARD_LAYOUTS_PATH", "")
    monkeypatch.delenv("TIMECARD_LAYOUTS_PATH")

    assert main(["fill", str(request_file), "-o", str(output)]) == 0

    assert load_workbook(output)["Week 2"]["N13"].value == 2.5
