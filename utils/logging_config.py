import logging
import os
from datetime import datetime

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level=logging.INFO, log_dir=None):
    """
    Configure process logging for the client.

    Args:
        log_level: root logger level, INFO by default
        log_dir: when given, also write a dated log file into this directory
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # drop handlers from any earlier call
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(console_handler)

    if log_dir:
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        today = datetime.now().strftime("%Y-%m-%d")
        file_handler = logging.FileHandler(os.path.join(log_dir, f"graph_rest_{today}.log"), encoding='utf-8')
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(file_handler)

    return logging.getLogger(__name__)


def get_logger(name):
    """
    Return a logger for the given module name.

    Args:
        name: logger name, usually __name__
    """
    return logging.getLogger(name)
