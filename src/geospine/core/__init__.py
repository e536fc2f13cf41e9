"""
geospine.core - document, error, logging and settings primitives.

Everything here is processor-agnostic; processors live in
``geospine.framework``.
"""

from geospine.core.document import IngestDocument
from geospine.core.errors import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    GeoSpineError,
    InvalidConfigError,
    MissingConfigError,
    ProcessorError,
    ProcessorNotFoundError,
    ValidationError,
)
from geospine.core.logging import configure_logging, get_logger

__all__ = [
    "IngestDocument",
    "ErrorCategory",
    "ErrorContext",
    "GeoSpineError",
    "ValidationError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "ProcessorError",
    "ProcessorNotFoundError",
    "configure_logging",
    "get_logger",
]
