import os
import sys

from loguru import logger


def configure_logging(logs_folder: str, level: str = "INFO") -> str:
    """Send logs to stderr and to a rotating file in logs_folder. Returns the log file path."""
    if not os.path.exists(logs_folder):
        os.makedirs(logs_folder)

    log_file = os.path.join(logs_folder, "battery.log")

    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:YYYY-MM-DD HH:mm:ss} - {level} - {message}")
    logger.add(log_file, rotation="10 MB", retention="1 month", level=level)
    return log_file
