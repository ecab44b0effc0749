"""Shared utilities for XML tree formatting.

This module provides configuration objects, the result envelope and logging
helpers used across the adapter, formatter and tree builder.
"""

from .config import (
    Config,
    ConfigError,
    ConfigValidationError,
    FormatterConfig,
    GlobalConfig,
    ParserEngineConfig,
    TreeConfig,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)
from .result import (
    UNKNOWN_ERROR_MESSAGE,
    XML_SYNTAX_ERROR_MESSAGE,
    ParsingResult,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigValidationError",
    "FormatterConfig",
    "GlobalConfig",
    "ParserEngineConfig",
    "TreeConfig",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
    "UNKNOWN_ERROR_MESSAGE",
    "XML_SYNTAX_ERROR_MESSAGE",
    "ParsingResult",
]
