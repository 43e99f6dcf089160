from __future__ import annotations

import logging
import sys
from pythonjsonlogger import jsonlogger

from structview.core.config import settings

FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None, *, json: bool | None = None) -> None:
    """Install one stdout handler on the root logger.

    Unset arguments fall back to ``settings.log_level`` / ``settings.log_json``.
    """
    level = settings.log_level if level is None else level
    json = settings.log_json if json is None else json

    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    if json:
        handler.setFormatter(jsonlogger.JsonFormatter(FORMAT))
    else:
        handler.setFormatter(logging.Formatter(FORMAT))

    # Avoid duplicate handlers on repeated calls
    root.handlers = [handler]
