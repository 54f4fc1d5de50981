from __future__ import annotations

import json
import logging
import sys
from typing import Any


LOGGER_NAME = "devicenames"


def setup_logging(level: int | str = logging.INFO) -> None:
    # One stdout handler, message-only; records are already JSON.
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def log_json(event: str, **fields: Any) -> None:
    rec: dict[str, Any] = {"event": event, **fields}
    logging.getLogger(LOGGER_NAME).info(json.dumps(rec, ensure_ascii=False, default=str))


def parse_level(value: str | int) -> int:
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    return level if isinstance(level, int) else logging.INFO
