"""Core modules for terragrade - error definitions and exit codes."""

from terragrade.core.errors import (
    ConfigurationError,
    ExitCode,
    InputFileError,
    ProviderError,
    TerragradeError,
    format_error_message,
    main_with_error_handling,
)

__all__ = [
    "ExitCode",
    "TerragradeError",
    "InputFileError",
    "ConfigurationError",
    "ProviderError",
    "main_with_error_handling",
    "format_error_message",
]
