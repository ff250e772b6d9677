import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_LEVEL_ENV_VAR = "LOG_LEVEL"
LOG_DIR_ENV_VAR = "KOCH_LOG_DIR"
DEFAULT_LOG_SUBDIR = Path(".koch") / "logs"
MAX_LOG_BYTES = 2 * 1024 * 1024  # 2 MiB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_directory() -> Path:
    """Return the directory log files are written to, creating it if needed."""

    log_dir = os.getenv(LOG_DIR_ENV_VAR)
    if log_dir:
        path = Path(log_dir).expanduser()
    else:
        path = Path.home() / DEFAULT_LOG_SUBDIR

    path.mkdir(parents=True, exist_ok=True)
    return path


def log_filename_for(name: str) -> str:
    """Turn a dotted logger name into a flat ``.log`` filename."""

    flattened = name.replace(os.sep, "_").replace("/", "_").strip(".")
    return f"{flattened.replace('.', '_') or 'root'}.log"


def _configure_logger(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)

    if logger.handlers:
        # Already configured by an earlier get_logger call.
        return

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(
            resolve_log_directory() / log_filename_for(logger.name),
            maxBytes=MAX_LOG_BYTES,
            backupCount=BACKUP_COUNT,
        ),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger writing to stderr and to a rolling per-module file."""

    level_name = os.getenv(LOG_LEVEL_ENV_VAR, "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logger = logging.getLogger(name)
    _configure_logger(logger, level)
    return logger
