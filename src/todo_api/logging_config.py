from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_level(value: str | None, default: int = logging.INFO) -> int:
    name = (value or "").strip().upper()
    if not name:
        return default
    level = getattr(logging, name, None)
    return level if isinstance(level, int) else default


# PUBLIC_INTERFACE
def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach a single stdout handler to the 'todo_api' logger and bind the
    uvicorn loggers to the same format. Safe to call more than once.
    """
    resolved = _parse_level(level)
    formatter = logging.Formatter(LOG_FORMAT)

    logger = logging.getLogger("todo_api")
    if not logger.handlers:
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(resolved)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        lg = logging.getLogger(name)
        for h in list(lg.handlers):
            lg.removeHandler(h)
        handler = logging.StreamHandler(stream=sys.stdout)
        handler.setFormatter(formatter)
        lg.addHandler(handler)
        lg.setLevel(resolved)
        lg.propagate = False
    return logger
