# src/hiring_intel/logging_utils.py
"""
Logging setup shared by the CLI and the API.

Events that someone may want to count or alert on (failed company lookups,
finished searches) go through `log_event`, which writes the event name
followed by its fields as one compact JSON object:

    company_lookup.failed {"company": "Acme Corp", "status": 503}
"""

from __future__ import annotations

import json
import logging
from typing import Any

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def event_fields(**fields: Any) -> str:
    # None fields are left out; anything json can't encode is logged via str()
    present = {k: v for k, v in fields.items() if v is not None}
    return json.dumps(present, sort_keys=True, separators=(", ", ": "), default=str)


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO, **fields: Any) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, "%s %s", event, event_fields(**fields))
