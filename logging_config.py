import logging
import os
from logging.handlers import RotatingFileHandler

ROOT_LOGGER = "autoreply"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _attach_handlers(root: logging.Logger, log_dir: str) -> None:
    """One rotating service log plus console output, shared by every module logger."""
    os.makedirs(log_dir, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, f"{ROOT_LOGGER}.log"),
        maxBytes=int(os.getenv("LOG_MAX_BYTES", "1000000")),
        backupCount=int(os.getenv("LOG_BACKUP_COUNT", "3")),
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    console_handler.setFormatter(formatter)

    root.addHandler(file_handler)
    root.addHandler(console_handler)


def configure_logger(module_name: str, log_dir: str = None) -> logging.Logger:
    """
    Return the `autoreply.<module_name>` logger.

    The first call attaches the file and console handlers to the shared
    `autoreply` parent; module loggers only propagate to it, so traffic from
    the webhook, the reply pipeline and the dashboard ends up in one file.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(logging.DEBUG)
        root.propagate = False
        _attach_handlers(root, log_dir or os.getenv("LOG_DIR", "logs"))
    return root.getChild(module_name)
