import logging
import os
from datetime import datetime

from config import LOG_DIR, LOG_LEVEL
from searcher.errors import InvalidConfigurationError


def setup_logger(name="rk_search", log_dir=LOG_DIR, level=LOG_LEVEL, log_to_file=True):
    # Configure Root Logger
    logger = logging.getLogger()
    try:
        logger.setLevel(level)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationError(f"Unknown log level: {level}", level=level) from e

    # Remove existing handlers to avoid duplicates if called multiple times
    if logger.handlers:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if isinstance(handler, logging.FileHandler):
                handler.close()

    # Console Handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_to_file:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = os.path.join(log_dir, f"search_{timestamp}.log")
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            raise InvalidConfigurationError(f"Cannot write logs to {log_dir}: {e.strerror or e}", log_dir=log_dir) from e

        # File Handler
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logging.getLogger(name)
