"""Secure logging utilities to keep passwords out of log records."""

import logging
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from password_strength.config import get_settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def is_debug_mode() -> bool:
    """Check if evaluation details should be attached to log records.

    Invalid settings in the environment turn debug mode off instead of
    failing the evaluation being logged.
    """
    try:
        return get_settings().debug
    except ValidationError as e:
        logger.warning(f"Ignoring invalid settings, debug mode disabled: {e.error_count()} error(s)")
        return False


def redact_password(password: str) -> str:
    """Render a password for logging without disclosing its content.

    Args:
        password: The password being evaluated

    Returns:
        Placeholder carrying only the password length
    """
    return f"[REDACTED len={len(password)}]"


def log_evaluation(
    logger: logging.Logger,
    message: str,
    password: str,
    **kwargs: Any,
) -> None:
    """Log a password evaluation at debug level.

    In debug mode the extra context is attached to the record.
    Otherwise only the message and the redacted password are logged.

    Args:
        logger: The logger instance to use
        message: The log message (must not contain the password)
        password: The evaluated password, always redacted
        **kwargs: Additional numeric context such as scores and counts
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if is_debug_mode():
        logger.debug(f"{message} for {redact_password(password)}: {kwargs}", extra=kwargs)
    else:
        logger.debug(f"{message} for {redact_password(password)}")
