from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

FALLBACK_LOG_NAME = "apt-buildpack.log"

# Handlers installed on the root logger by configure_logging().
_handlers: List[logging.Handler] = []


def _open_log_file(log_path: str) -> logging.FileHandler:
    try:
        Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
        return logging.FileHandler(log_path)
    except OSError:
        return logging.FileHandler(str(Path.cwd() / FALLBACK_LOG_NAME))


def configure_logging(log_path: Optional[str] = None, level: int = logging.INFO) -> Optional[str]:
    """Configure root logging for a buildpack run.

    Build output goes to the console (the staging log). A log file is
    optional; if the requested path cannot be opened we fall back to a file
    in the current working directory.

    Calling again only changes the level. Returns the log file in use, or
    None when logging only to the console.
    """

    root = logging.getLogger()
    root.setLevel(level)

    if not _handlers:
        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
        _handlers.append(logging.StreamHandler())
        if log_path:
            _handlers.append(_open_log_file(log_path))
        for h in _handlers:
            h.setFormatter(fmt)
            root.addHandler(h)

    for h in _handlers:
        if isinstance(h, logging.FileHandler):
            return h.baseFilename
    return None
