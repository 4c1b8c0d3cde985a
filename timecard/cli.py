"""Fill the timecard template from a JSON request file without the HTTP server.

Usage:
    python -m timecard.cli fill request.json -o Timecard.xlsx
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from timecard.excel.excel_template_loader import ExcelTemplateLoader
from timecard.excel.timecard_writer import TimecardWriter
from timecard.models.schema import TimecardRequest
from timecard.services.config_service import ConfigService
from timecard.utils.helpers.exceptions import TimecardError
from timecard.utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


def fill(args: argparse.Namespace) -> int:
    config = ConfigService()
    try:
        payload = json.loads(Path(args.request).read_text(encoding="utf-8"))
        request = TimecardRequest.model_validate(payload)
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        print(f"bad request file: {exc}", file=sys.stderr)
        return 2

    if args.week is not None:
        request.week_number = args.week

    writer = TimecardWriter(
        template_loader=ExcelTemplateLoader(args.template or config.template_path),
        layouts=config.get_layouts(),
    )
    try:
        result = writer.populate_report(request)
    except TimecardError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(result.content)
    print(f"Timecard written to: {output} ({len(result.content)} bytes, sheet '{result.sheet}')")
    for cell in result.skipped_cells:
        print(f"  skipped {cell}: date not recognized")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="timecard", description="Timecard spreadsheet tools")
    parser.add_argument("--log-level", default="WARNING", help="Root log level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fill_parser = subparsers.add_parser("fill", help="Populate the template from a request JSON file")
    fill_parser.add_argument("request", type=Path, help="JSON file shaped like the POST /excel body")
    fill_parser.add_argument("-o", "--output", type=Path, default=Path("Timecard.xlsx"), help="Output .xlsx path")
    fill_parser.add_argument("--week", type=int, default=None, help="Override weekNumber from the file")
    fill_parser.add_argument("--template", type=Path, default=None, help="Template .xlsx (built-in when omitted)")
    fill_parser.set_defaults(handler=fill)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
