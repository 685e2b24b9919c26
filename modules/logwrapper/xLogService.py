from __future__ import annotations

import logging
import logging.config
import os
from typing import Any, Dict, Optional

from .config_loader import load_config
from .services.handlers import InMemoryLogHandler, build_formatter

_MEMORY_HANDLER: Optional[InMemoryLogHandler] = None
_ROUTER = None


def _ensure_log_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def init_logging(overrides: Optional[Dict[str, Any]] = None) -> None:
    """Configure the root logger once.

    Existing loggers are kept (disable_existing_loggers=False) so module
    loggers created at import time still reach the handlers.
    """
    global _MEMORY_HANDLER

    if _MEMORY_HANDLER is not None and logging.getLogger().handlers:
        return

    cfg = load_config(overrides=overrides)

    handlers: Dict[str, Dict[str, Any]] = {
        "in_memory": {
            "()": InMemoryLogHandler,
            "maxlen": int(cfg.get("buffer_size", 500)),
            "level": "DEBUG",
        }
    }

    if cfg.get("enable_console", True):
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": str(cfg.get("console_level", "INFO")).upper(),
            "stream": "ext://sys.stderr",
        }

    if cfg.get("enable_file", False):
        path = str(cfg.get("file_path", "logs/snapclient-ui.log"))
        _ensure_log_dir(path)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "filename": path,
            "maxBytes": int(cfg.get("rotate_bytes", 1024 * 1024)),
            "backupCount": int(cfg.get("backup_count", 3)),
            "encoding": "utf-8",
        }

    formatter = build_formatter()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {"default": {"()": lambda: formatter}},
            "handlers": {name: {**opts, "formatter": "default"} for name, opts in handlers.items()},
            "root": {"level": "DEBUG", "handlers": list(handlers)},
        }
    )

    if cfg.get("capture_warnings", True):
        logging.captureWarnings(True)

    for h in logging.getLogger().handlers:
        if isinstance(h, InMemoryLogHandler):
            _MEMORY_HANDLER = h
            break

    for name, level in (cfg.get("module_levels") or {}).items():
        logging.getLogger(name).setLevel(str(level).upper())


def reset_logging() -> None:
    """Drop the handlers installed by init_logging (used between tests)."""
    global _MEMORY_HANDLER
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()
    _MEMORY_HANDLER = None


def get_memory_handler() -> Optional[InMemoryLogHandler]:
    return _MEMORY_HANDLER


def get_router():
    global _ROUTER
    if _ROUTER is None:
        from .api.router import router
        _ROUTER = router
    return _ROUTER
