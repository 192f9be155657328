from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Union

from pythonjsonlogger import jsonlogger

LOG_FORMAT_ENV = "NEUROPAL_LENS_LOG_FORMAT"
LOG_LEVEL_ENV = "NEUROPAL_LENS_LOG_LEVEL"

# Request logs from the dev server and Dash's own chatter drown out ours
QUIET_LOGGERS: Dict[str, int] = {
    "werkzeug": logging.WARNING,
    "dash": logging.WARNING,
}


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the root logger for NeuroPAL Lens.

    Format: force_format ("json" or "plain"), else $NEUROPAL_LENS_LOG_FORMAT,
    else JSON. Level: the argument, else $NEUROPAL_LENS_LOG_LEVEL, else INFO.
    Unknown level names fall back to INFO.

    werkzeug and dash are held at WARNING unless our own level is stricter.
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv(LOG_FORMAT_ENV, "json").lower()

    root_level = _resolve_level(level)
    logger = logging.getLogger()
    logger.setLevel(root_level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
    else:
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(max(quiet_level, root_level))

    return logger
