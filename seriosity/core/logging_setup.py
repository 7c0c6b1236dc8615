from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Transcription clients and the folder observer log every request/event at INFO.
NOISY_LOGGERS = ("httpx", "openai", "watchdog", "faster_whisper")

_HANDLER_NAME = "seriosity"


def setup_logging(cfg_logging: Dict[str, Any]) -> None:
    """Route evaluation logs to a rotating file and, optionally, the console.

    Safe to call more than once: handlers installed by an earlier call are
    replaced, so a watcher restarted in-process does not double every line.
    """
    if not cfg_logging or not cfg_logging.get("enabled", True):
        return

    level_name = str(cfg_logging.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    file_path = Path(cfg_logging.get("file_path", "logs/seriosity.log"))
    file_path.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            file_path,
            maxBytes=int(cfg_logging.get("max_bytes", 1_048_576)),
            backupCount=int(cfg_logging.get("backup_count", 5)),
            encoding="utf-8",
        )
    ]
    if cfg_logging.get("console", False):
        handlers.append(logging.StreamHandler(sys.stderr))

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
        old.close()
    for handler in handlers:
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level)

    library_level = getattr(
        logging, str(cfg_logging.get("library_level", "WARNING")).upper(), logging.WARNING
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, library_level))
