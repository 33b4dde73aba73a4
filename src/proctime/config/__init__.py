"""Configuration module for proctime."""

from .settings import (
    CAPTURE_STDOUT,
    LOG_FORMAT,
    LOG_LEVEL,
    STDERR_MAX_CHARS,
    HarnessConfig,
)

__all__ = [
    "CAPTURE_STDOUT",
    "LOG_FORMAT",
    "LOG_LEVEL",
    "STDERR_MAX_CHARS",
    "HarnessConfig",
]
