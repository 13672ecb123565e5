"""
Configuration and error handling utilities for funcsynth.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from funcsynth.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for funcsynth operations.

    STRICT: All errors raise exceptions (default, fail-fast)
    LENIENT: Non-fatal errors become warnings, execution continues
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level default error mode
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT

# Module-level default sample rate (Hz), used when none is passed explicitly
DEFAULT_SAMPLE_RATE: int = 44100

_sample_rate: int = DEFAULT_SAMPLE_RATE


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all funcsynth operations.

    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.

    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def set_sample_rate(rate: int) -> None:
    """
    Set the default sample rate used by rendering helpers.

    Args:
        rate: Sample rate in Hz (must be positive)
    """
    global _sample_rate
    if rate <= 0:
        raise ValueError(f"sample rate must be positive, got {rate}")
    _sample_rate = int(rate)


def get_sample_rate() -> int:
    """Return the default sample rate in Hz."""
    return _sample_rate


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
    exception: Optional[Exception] = None,
) -> bool:
    """
    Handle an error based on the error mode.

    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.

    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)
        exception: A prebuilt exception to raise instead of
            exception_class(message), e.g. a ParseError carrying position info

    Returns:
        True if operation should continue (warning was issued)

    Raises:
        exception_class: If in STRICT mode or fatal=True

    Example:
        # In strict mode, raises ParseError
        # In lenient mode, logs warning and skips the token
        if handle_error(str(err), exception=err):
            continue
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        if exception is not None:
            raise exception
        raise exception_class(message)
    else:
        logger.warning(message)
        return True
