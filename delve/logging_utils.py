"""Structured event logging for level generation, turns and transports.

Every line names one ``event`` followed by its fields, either as key=value
pairs or as one JSON object per line::

    from delve.logging_utils import log
    log.info(event="maze_generated", size=10, floors=31)
    # level=info ts=1700000000 event=maze_generated logger=delve size=10 floors=31

``bind`` returns a child logger that stamps fixed context (a game id, a
transport name) on every line it writes.

Environment:
    DELVE_LOG_LEVEL  debug | info | warn | error (default info)
    DELVE_LOG_JSON   1/true/yes/on for JSON lines
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("DELVE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("DELVE_LOG_JSON", "0").lower() in ("1", "true", "yes", "on")


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # Coordinates read as x,y
    if isinstance(value, (tuple, list)):
        return ",".join(_render(v) for v in value)
    return str(value).replace(" ", "_")


def _format(severity: str, event: Optional[str], fields: Dict[str, Any]) -> str:
    """Render one line. ``level`` and ``ts`` are reserved and never taken from ``fields``."""
    ts = int(time.time())
    present = {k: v for k, v in fields.items() if v is not None and k not in ("level", "ts")}
    if JSON_MODE:
        rec: Dict[str, Any] = {"level": severity, "ts": ts}
        if event:
            rec["event"] = event
        rec.update(present)
        return json.dumps(rec, separators=(",", ":"), default=str)
    head = [f"level={severity}", f"ts={ts}"]
    if event:
        head.append(f"event={_render(event)}")
    return " ".join(head + [f"{k}={_render(v)}" for k, v in present.items()])


class EventLogger:
    def __init__(self, name: str = "delve", context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **context) -> "EventLogger":
        return EventLogger(self.name, {**self.context, **context})

    def _emit(self, level: str, event: Optional[str], fields: Dict[str, Any]) -> None:
        if LEVELS[level] < CURRENT_LEVEL:
            return
        line = _format(level, event, {"logger": self.name, **self.context, **fields})
        print(line, file=sys.stderr if level == "error" else sys.stdout)

    def debug(self, event: Optional[str] = None, **fields):
        self._emit("debug", event, fields)

    def info(self, event: Optional[str] = None, **fields):
        self._emit("info", event, fields)

    def warn(self, event: Optional[str] = None, **fields):
        self._emit("warn", event, fields)

    def error(self, event: Optional[str] = None, **fields):
        self._emit("error", event, fields)


_LOGGERS: Dict[str, EventLogger] = {}


def get_logger(name: str) -> EventLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = EventLogger(name)
    return _LOGGERS[name]


log = get_logger("delve")
