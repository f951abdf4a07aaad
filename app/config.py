"""App configuration from environment."""
import logging
import os

MAX_BATCH_WORDS = int(os.environ.get("PHONETIK_MAX_BATCH_WORDS", 1000))
MAX_UPLOAD_BYTES = int(os.environ.get("PHONETIK_MAX_UPLOAD_BYTES", 1024 * 1024))  # 1 MiB

LOG_LEVEL = os.environ.get("PHONETIK_LOG_LEVEL", "WARNING").upper()

ALLOWED_UPLOAD_EXTENSIONS = frozenset({".txt", ".csv"})


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Set the level of the package logger; handlers are left to the host."""
    logging.getLogger("app").setLevel(getattr(logging, level, logging.WARNING))
