import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE = LOG_DIR / "app.log"
LOG_FORMAT = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"


def _file_handler() -> logging.Handler | None:
    # Serverless runtimes mount a read-only filesystem outside /tmp
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            LOG_FILE, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
    except OSError:
        return None


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)

    # Prevent duplicate handlers if the logger is reused
    if not logger.handlers:
        # --- File handler (UTF-8 safe) ---
        file_handler = _file_handler()
        if file_handler is not None:
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            file_handler.setLevel(logging.INFO)
            logger.addHandler(file_handler)

        # --- Console handler (force UTF-8 output on all OS) ---
        try:
            console_stream = open(sys.stdout.fileno(), mode="w", encoding="utf-8", closefd=False)
        except (OSError, ValueError, AttributeError):
            # stdout has no usable fileno under some runners (pytest capture, Vercel)
            console_stream = sys.stdout

        console_handler = logging.StreamHandler(console_stream)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        console_handler.setLevel(logging.INFO)

        logger.addHandler(console_handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger
