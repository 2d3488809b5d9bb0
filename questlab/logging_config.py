"""
Logging for the tracker's own modules.

Everything under the ``questlab`` logger goes to one stream handler, as
plain text by default or one JSON object per line with LOG_FORMAT=json.
"""

from __future__ import annotations

import json
import logging

from flask import Flask

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def init_logging(app: Flask) -> logging.Logger:
    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logger = logging.getLogger("questlab")
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    # create_app may run many times in one process (tests); keep one handler.
    logger.handlers.clear()
    handler = logging.StreamHandler()
    if app.config.get("LOG_FORMAT") == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)

    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    return logger
