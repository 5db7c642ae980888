"""Logging setup for the command line entrypoint."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "central-publish"


def configure_logging(level: str | int = logging.INFO) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
