"""
Shared utilities to follow DRY and keep server/client consistent.
"""
import logging

from config import CLOSE_COMMAND


def is_close_command(text: str) -> bool:
    return text.upper() == CLOSE_COMMAND


def close_quietly(resource, logger: logging.Logger, label: str) -> None:
    """Close `resource` if present; log close failures instead of raising."""
    if resource is None:
        return
    try:
        resource.close()
    except OSError as e:
        logger.error(f"Error closing {label}: {e}")
