"""Unified configuration module.

Single source of truth for all configuration and settings.
"""

from .settings import (
    Settings,
    DEFAULT_USER_AGENT,
    PLATFORM_LIMITS,
)

__all__ = [
    "Settings",
    "DEFAULT_USER_AGENT",
    "PLATFORM_LIMITS",
]
