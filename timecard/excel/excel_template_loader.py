"""Excel template loader for timecard population."""

from __future__ import annotations

import logging
import threading
import warnings
from io import BytesIO
from pathlib import Path
from typing import Callable, Optional, Union

from openpyxl import load_workbook
from openpyxl.workbook.workbook import Workbook

from timecard.excel.template_builder import build_default_template
from timecard.utils.helpers.exceptions import TemplateLoadError


class ExcelTemplateLoader:
    """Hold the template as immutable bytes and materialize fresh workbooks.

    The template is read once. Every ``open_fresh`` call parses those bytes
    into a new workbook, so concurrent callers never share a live workbook and
    the template itself is never mutated.
    """

    def __init__(
        self,
        template_path: Optional[Union[str, Path]] = None,
        *,
        template_bytes: Optional[bytes] = None,
        default_factory: Callable[[], bytes] = build_default_template,
    ) -> None:
        self.template_path = Path(template_path) if template_path else None
        self._template_bytes = bytes(template_bytes) if template_bytes is not None else None
        self._default_factory = default_factory
        self._lock = threading.Lock()
        self.logger = logging.getLogger(__name__)

    # -----------------
    # Public API
    # -----------------
    @property
    def template_bytes(self) -> bytes:
        """Return the raw template, reading it on first use."""
        if self._template_bytes is None:
            with self._lock:
                if self._template_bytes is None:
                    self._template_bytes = self._read_template()
        return self._template_bytes

    def open_fresh(self) -> Workbook:
        """Return a newly parsed workbook owned by the caller."""
        data = self.template_bytes
        try:
            # Suppress openpyxl warnings about extensions it does not round-trip
            with warnings.catch_warnings():
                warnings.filterwarnings("ignore", category=UserWarning, module="openpyxl")
                return load_workbook(BytesIO(data))
        except Exception as exc:
            raise TemplateLoadError(f"open xlsx: {exc}") from exc

    # -----------------
    # Helpers
    # -----------------
    def _read_template(self) -> bytes:
        if self.template_path is None:
            self.logger.info("Using built-in timecard template")
            return self._default_factory()

        if not self.template_path.exists():
            raise TemplateLoadError(f"Template not found: {self.template_path}")
        try:
            data = self.template_path.read_bytes()
        except OSError as exc:
            raise TemplateLoadError(f"template read: {exc}") from exc
        self.logger.info("Timecard template loaded", extra={"path": str(self.template_path), "size": len(data)})
        return data


__all__ = ["ExcelTemplateLoader"]
