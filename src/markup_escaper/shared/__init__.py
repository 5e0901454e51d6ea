"""Shared utilities for markup escaping.

This module provides configuration objects, result types and logging
utilities used across the character and escaping layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    EscaperConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    EscapeResult,
    EscapeStatistics,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "EscaperConfig",
    "CorrelationLogger",
    "get_logger",
    "EscapeResult",
    "EscapeStatistics",
]
