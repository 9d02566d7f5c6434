"""
JSON logging for the server process.

FastMCP installs its own console handler on the root logger when it is
constructed, which happens at import time of the server module. setup_logging
runs later from main(), so it replaces whatever handlers are already on the
root logger with a single JSON handler on stderr. stdout stays reserved for
the stdio transport.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Dict, Union


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _is_json_handler(handler: logging.Handler) -> bool:
    return isinstance(handler.formatter, _JsonFormatter)


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    root = logging.getLogger()

    # Root ends up with exactly one handler, the JSON one
    for h in list(root.handlers):
        if not _is_json_handler(h):
            root.removeHandler(h)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_JsonFormatter())
        root.addHandler(handler)

    # Applied on every call
    root.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
