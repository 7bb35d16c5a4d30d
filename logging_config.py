# logging_config.py
import logging
from logging import Logger

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: int = logging.INFO) -> Logger:
    """应用启动时调用一次，返回应用根 logger"""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger("exam_practice")
