import logging
import os
from logging.handlers import RotatingFileHandler

from config import LOG_DIR


def setup_api_logger(log_path: str | None = None) -> logging.Logger:
    """Setup and return the application-wide logger for API requests and errors.

    Creates a rotating file handler at `log_path` (defaults to $LOG_DIR/api.log,
    or ./logs/api.log next to the project).
    """
    if log_path is None:
        logs_dir = LOG_DIR or os.path.join(os.path.abspath(os.path.dirname(__file__)), '..', 'logs')
        os.makedirs(logs_dir, exist_ok=True)
        log_path = os.path.join(logs_dir, 'api.log')

    # parent of every "nomadiq.*" logger, so services log to the same file
    logger = logging.getLogger('nomadiq')
    logger.setLevel(logging.INFO)

    # avoid adding multiple handlers if called multiple times
    if not logger.handlers:
        handler = RotatingFileHandler(log_path, maxBytes=5 * 1024 * 1024, backupCount=5, encoding='utf-8')
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logging.getLogger('nomadiq.api')
