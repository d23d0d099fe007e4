from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path


def _resolve_log_dir(settings: object) -> Path:
    """Resolve the log directory.

    - If TENFOOT_LOG_DIR is absolute, use it directly.
    - Otherwise, treat it as relative to the current working directory.
    """

    raw = getattr(settings, "TENFOOT_LOG_DIR", Path("_logs"))
    p = raw if isinstance(raw, Path) else Path(str(raw))
    if p.is_absolute():
        return p
    return Path.cwd() / p


def setup_logging(settings: object) -> Path | None:
    """Configure root logging for the CLI and interactive hosts.

    Returns the log file path when file logging is enabled, else None.

    Rotation:
      - Daily rotation at midnight.
      - Keep the last `TENFOOT_LOG_BACKUP_COUNT` rotated files.

    Safe to call multiple times (it resets handlers).
    """

    level_name = str(getattr(settings, "TENFOOT_LOG_LEVEL", "INFO") or "INFO").upper().strip()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt))

    # Reset root handlers so we don't duplicate logs on repeated setup.
    root = logging.getLogger()
    root.handlers = []
    root.setLevel(level)
    root.addHandler(console_handler)

    log_file: Path | None = None
    if bool(getattr(settings, "TENFOOT_LOG_TO_FILE", False)):
        log_dir = _resolve_log_dir(settings)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "tenfoot.log"

        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=max(0, int(getattr(settings, "TENFOOT_LOG_BACKUP_COUNT", 14) or 0)),
            encoding="utf-8",
            utc=False,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(file_handler)

    logging.getLogger("tenfoot").debug(
        "tenfoot logging enabled (file=%s, level=%s)",
        os.fspath(log_file) if log_file else "-",
        level_name,
    )

    return log_file
