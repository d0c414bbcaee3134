import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path, level: str = "INFO") -> None:
    """Configure unified dotgirl logging.

    Args:
        home: Path to the storage root. The log file lives directly under it.
        level: Logging level name for the ``dotgirl`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE

    root_logger = logging.getLogger("dotgirl")
    root_logger.setLevel(level)

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Records propagate to the ``dotgirl`` logger; nothing is written until
    configure_logging() has run at app entry.
    """
    return logging.getLogger(f"dotgirl.{name}")
