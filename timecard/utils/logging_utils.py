"""Logging setup and structured timecard events."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)
event_logger = logging.getLogger("timecard.events")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SENSITIVE_KEYS = {"employee_name", "employeename", "notes", "rows"}


def configure_logging(level: Union[str, int] = "INFO") -> None:
	"""Attach a console handler to the root logger once."""

	root_logger = logging.getLogger()
	if isinstance(level, str):
		level = logging.getLevelName(level.upper())
		if not isinstance(level, int):
			level = logging.INFO
	root_logger.setLevel(level)

	if any(getattr(handler, "_timecard_console", False) for handler in root_logger.handlers):
		return
	console_handler = logging.StreamHandler()
	console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
	console_handler._timecard_console = True
	root_logger.addHandler(console_handler)


def log_timecard_event(event: Dict[str, Any]) -> None:
	"""Emit a structured timecard event without leaking personal data."""

	payload = {
		"timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
	}
	for key, value in event.items():
		if key is None:
			continue
		normalized = str(key)
		if normalized.lower() in SENSITIVE_KEYS:
			continue
		payload[normalized] = value

	try:
		event_logger.info(json.dumps(payload, ensure_ascii=False, default=str))
	except Exception as exc:  # pragma: no cover - logging must never break population
		logger.debug("Failed to write timecard event: %s", exc, exc_info=True)
