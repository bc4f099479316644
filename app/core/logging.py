import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from app.core.config import settings

ROTATE_BYTES = 10 * 1024 * 1024
ROTATE_BACKUPS = 5


def _rotating(path: Path, level: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "detailed",
        "filename": str(path),
        "maxBytes": ROTATE_BYTES,
        "backupCount": ROTATE_BACKUPS,
    }


def build_logging_config(log_dir: Path, level: str) -> Dict[str, Any]:
    """dictConfig for the API process.

    Cache traffic (hits, misses, sweeps, invalidations) logs at DEBUG and is
    only visible when LOG_LEVEL is lowered; the scheduler is kept quiet.
    """
    level = level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "detailed",
                "stream": "ext://sys.stdout",
            },
            "file": _rotating(log_dir / "studymate.log", level),
            "error_file": _rotating(log_dir / "error.log", "ERROR"),
        },
        "root": {"level": level, "handlers": ["console", "file", "error_file"]},
        "loggers": {
            "app": {"level": level, "handlers": ["console", "file", "error_file"], "propagate": False},
            "apscheduler": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            "uvicorn.access": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging():
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(log_dir, settings.LOG_LEVEL))
