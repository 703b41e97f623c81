"""
Unified error handling for the terragrade CLI.

Exit Codes:
- 0: Success
- 10: Input error (lock file missing or unreadable)
- 11: Configuration error
- 12: Provider error (external service failure)
- 127: Unknown/internal error
- 130: Interrupted
"""

from __future__ import annotations

import functools
import sys
import traceback
from enum import IntEnum
from typing import Any, Callable, TypeVar

import structlog

logger = structlog.get_logger()


class ExitCode(IntEnum):
    """Standardized exit codes for CLI commands."""

    SUCCESS = 0
    INPUT_ERROR = 10
    CONFIG_ERROR = 11
    PROVIDER_ERROR = 12
    UNKNOWN_ERROR = 127
    INTERRUPTED = 130


class TerragradeError(Exception):
    """Base exception for terragrade errors with exit code support."""

    exit_code: ExitCode = ExitCode.UNKNOWN_ERROR
    show_traceback: bool = False

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputFileError(TerragradeError):
    """Raised when the lock file cannot be read."""

    exit_code = ExitCode.INPUT_ERROR


class ConfigurationError(TerragradeError):
    """Raised for configuration-related errors."""

    exit_code = ExitCode.CONFIG_ERROR


class ProviderError(TerragradeError):
    """Raised when an external service fails."""

    exit_code = ExitCode.PROVIDER_ERROR


F = TypeVar("F", bound=Callable[..., int])


def main_with_error_handling(
    *,
    show_traceback: bool = False,
    log_errors: bool = True,
) -> Callable[[F], F]:
    """
    Decorator for CLI entry points that provides unified error handling.

    Catches exceptions, prints a one-line ``Error: ...`` message and converts
    them to exit codes.

    Exit codes:
        - TerragradeError subclasses: Uses the error's exit_code
        - KeyboardInterrupt: Returns 130
        - Other exceptions: Returns 127
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> int:
            from terragrade.cli.ux import error as print_error

            try:
                return func(*args, **kwargs)
            except TerragradeError as e:
                if log_errors:
                    logger.error(
                        "command_error",
                        error_type=type(e).__name__,
                        message=e.message,
                        exit_code=int(e.exit_code),
                        **e.details,
                    )
                print_error(f"Error: {format_error_message(e)}")
                if e.show_traceback or show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return e.exit_code
            except KeyboardInterrupt:
                if log_errors:
                    logger.info("command_interrupted")
                return ExitCode.INTERRUPTED
            except Exception as e:
                if log_errors:
                    logger.error(
                        "unexpected_error",
                        error_type=type(e).__name__,
                        message=str(e),
                        exit_code=int(ExitCode.UNKNOWN_ERROR),
                    )
                print_error(f"Error: {e}")
                if show_traceback:
                    traceback.print_exc(file=sys.stderr)
                return ExitCode.UNKNOWN_ERROR

        return wrapper  # type: ignore[return-value]

    return decorator


def format_error_message(error: TerragradeError) -> str:
    """Format an error message for display to users."""
    msg = error.message
    if error.details:
        detail_str = ", ".join(f"{k}={v}" for k, v in error.details.items())
        msg = f"{msg} ({detail_str})"
    return msg
