"""Environment and file-based configuration for the timecard service."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import List, Mapping, Optional

from timecard.excel.week_layouts import WEEK_LAYOUTS, WeekLayout, apply_overrides
from timecard.utils.helpers.exceptions import ConfigurationError

DEFAULT_PORT = 8080


class ConfigService:
    """Read settings from the environment; layout overrides from a JSON file.

    Values are read lazily and cached per instance.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = os.environ if environ is None else environ
        self._layouts: Optional[Mapping[int, WeekLayout]] = None
        self._logger = logging.getLogger(__name__)

    # -----------------
    # Public accessors
    # -----------------
    @property
    def port(self) -> int:
        raw = self._get("PORT")
        if not raw:
            return DEFAULT_PORT
        try:
            return int(raw)
        except ValueError:
            self._logger.warning("Invalid PORT value, using default", extra={"value": raw})
            return DEFAULT_PORT

    @property
    def template_path(self) -> Optional[Path]:
        raw = self._get("TIMECARD_TEMPLATE_PATH")
        return Path(raw).expanduser() if raw else None

    @property
    def layouts_path(self) -> Optional[Path]:
        raw = self._get("TIMECARD_LAYOUTS_PATH")
        return Path(raw).expanduser() if raw else None

    @property
    def cors_origins(self) -> List[str]:
        raw = self._get("TIMECARD_CORS_ORIGINS")
        if not raw:
            return ["*"]
        origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
        return origins or ["*"]

    @property
    def log_level(self) -> str:
        return (self._get("TIMECARD_LOG_LEVEL") or "INFO").upper()

    def get_layouts(self) -> Mapping[int, WeekLayout]:
        """Return the week layout table with any configured overrides applied."""
        if self._layouts is None:
            self._layouts = self._load_layouts()
        return self._layouts

    # -----------------
    # Internal loaders
    # -----------------
    def _get(self, name: str) -> str:
        return (self._environ.get(name) or "").strip()

    def _load_layouts(self) -> Mapping[int, WeekLayout]:
        path = self.layouts_path
        if path is None:
            return WEEK_LAYOUTS
        if not path.exists():
            raise ConfigurationError(f"Layout overrides not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle) or {}
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Layout overrides unreadable: {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"Layout overrides must be a JSON object: {path}")

        layouts = apply_overrides(data)
        self._logger.info("Layout overrides loaded", extra={"path": str(path), "weeks": sorted(data.keys())})
        return layouts
