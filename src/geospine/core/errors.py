"""
Structured error types for geospine.

Every failure raised by geospine carries a category, a retry flag and a
structured context so that a host ingestion pipeline can decide whether to
drop, tag, or abort on a document without parsing message text.

Manifesto:
    - **Typed Error Hierarchy:** Validation, configuration and processor
      lookup failures are distinct types
    - **Explicit Retry Semantics:** Each error knows if it's retryable
    - **Rich Context:** Errors carry processor type, tag and field
    - **Error Chaining:** Preserve original exceptions while adding context

Architecture:
    ::

        ┌───────────────────────────────────────────────────────┐
        │                    GeoSpineError                       │
        │      (category, retryable, context, cause)             │
        ├───────────────────────────────────────────────────────┤
        │  ValidationError    ConfigError         ProcessorError │
        │  (VALIDATION)       (CONFIG)            (PROCESSOR)    │
        │                         │                   │          │
        │                    MissingConfig     ProcessorNotFound │
        │                    InvalidConfig                       │
        └───────────────────────────────────────────────────────┘

Examples:
    >>> error = ValidationError("type cannot be null", field="type")
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.retryable
    False

    >>> error = MissingConfigError("field").with_context(processor_type="feature", tag="geo")
    >>> error.context.processor_type
    'feature'

Tags:
    error-handling, exception-hierarchy, error-context, geospine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and routing.

    Attributes:
        VALIDATION: Document shape violations
        CONFIG: Missing or invalid processor configuration
        PROCESSOR: Processor lookup and registration failures
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    PROCESSOR = "PROCESSOR"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Only fields that are set end up in ``to_dict()``; anything without a
    dedicated field goes to ``metadata``.

    Attributes:
        processor_type: Registered type identifier (e.g. "feature")
        tag: Processor instance tag
        field_name: Document or configuration field involved
        metadata: Additional key-value pairs
    """

    processor_type: str | None = None
    tag: str | None = None
    field_name: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["processor_type", "tag", "field_name"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class GeoSpineError(Exception):
    """
    Base exception for all geospine errors.

    Subclasses set ``default_category`` and ``default_retryable`` to provide
    sensible defaults for their domain.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> GeoSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise MissingConfigError("field").with_context(
                processor_type="feature",
                tag="geo-ingest",
            )
        """
        for key, value in kwargs.items():
            if key != "metadata" and hasattr(self.context, key):
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


class ValidationError(GeoSpineError):
    """
    Document validation error.

    Raised when an ingested document does not have the shape a processor
    requires. Never retryable - the document must be fixed.
    """

    default_category = ErrorCategory.VALIDATION
    default_retryable = False

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.constraint = constraint
        if field is not None and self.context.field_name is None:
            self.context.field_name = field

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        if self.constraint:
            result["constraint"] = self.constraint
        return result


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(GeoSpineError):
    """
    Configuration error.

    Never retryable - configuration must be fixed.
    """

    default_category = ErrorCategory.CONFIG
    default_retryable = False


class MissingConfigError(ConfigError):
    """Required configuration is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"[{key}] required property is missing")
        self.context.field_name = key


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")
        self.context.field_name = key


# =============================================================================
# PROCESSOR ERRORS
# =============================================================================


class ProcessorError(GeoSpineError):
    """Processor registration or execution error."""

    default_category = ErrorCategory.PROCESSOR
    default_retryable = False


class ProcessorNotFoundError(ProcessorError):
    """Processor type not found in registry."""

    def __init__(self, processor_type: str, available: list[str] | None = None):
        self.processor_type = processor_type
        self.available = available or []
        message = f"No processor type exists with name [{processor_type}]"
        if self.available:
            message += f". Available: {', '.join(self.available)}"
        super().__init__(message)
        self.context.processor_type = processor_type


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, GeoSpineError):
        return error.retryable
    return False


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, GeoSpineError):
        return error.category
    if isinstance(error, (ValueError, TypeError)):
        return ErrorCategory.VALIDATION
    if isinstance(error, KeyError):
        return ErrorCategory.CONFIG
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "GeoSpineError",
    "ValidationError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "ProcessorError",
    "ProcessorNotFoundError",
    "is_retryable",
    "categorize_error",
]
