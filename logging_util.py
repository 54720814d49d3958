import logging
import sys

from config import LOG_FORMAT, TRANSCRIPT_FORMAT


def setup_logger(name: str = "caesar_chat", level: int = logging.INFO,
                 fmt: str = LOG_FORMAT, stream=None) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        handler = logging.StreamHandler(stream)
        formatter = logging.Formatter(fmt)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def setup_transcript_logger(name: str = "transcript") -> logging.Logger:
    """Logger for chat lines, which carry their own timestamp."""
    return setup_logger(name, fmt=TRANSCRIPT_FORMAT, stream=sys.stdout)


def set_verbose(*loggers: logging.Logger) -> None:
    for logger in loggers:
        logger.setLevel(logging.DEBUG)
