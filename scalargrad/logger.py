import json
import logging
import sys

from .config import AutogradConfig


class JsonFormatter(logging.Formatter):
    """
    Format records as one JSON object per line.
    """

    def format(self, record):
        log_record = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        return json.dumps(log_record, ensure_ascii=False)


def setup_logger(name="scalargrad", level=None, json_format=False):
    """
    Attach a stdout handler to the package logger and set its level.

    Module loggers (`scalargrad.core.engine`, ...) propagate here. Calling
    this again only updates the level; it never stacks handlers.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level if level is not None else AutogradConfig.LOG_LEVEL)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if json_format:
            formatter = JsonFormatter()
        else:
            formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
