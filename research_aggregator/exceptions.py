"""
Custom exceptions for the research aggregator
"""
from typing import Optional


class ResearchSystemError(Exception):
    """Base exception for research aggregator"""
    pass


class ConfigurationError(ResearchSystemError):
    """Configuration related errors"""
    pass


class AdapterError(ResearchSystemError):
    """Platform adapter request or parse errors"""
    def __init__(self, message: str, platform: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.platform = platform
        self.status_code = status_code


class ExtractionError(ResearchSystemError):
    """Content extraction errors"""
    pass


class ResearchError(ResearchSystemError):
    """A research run failed outside the per-adapter and per-fetch boundaries"""
    def __init__(self, step: str, cause: BaseException):
        super().__init__(f"Failed to conduct research ({step}): {cause}")
        self.step = step
        self.cause = cause
