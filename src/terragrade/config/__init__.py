"""
terragrade configuration.

Pydantic-based settings loaded from environment variables and ``.env`` files.
"""

from terragrade.config.settings import Settings, load_settings

__all__ = ["Settings", "load_settings"]
