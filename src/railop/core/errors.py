"""
Structured error types for railop.

Provides a small hierarchy of typed errors carrying a category, structured
context metadata and an optional chained cause.

Operations report *domain* problems as ``Failure`` values, never by raising.
The exceptions in this module are reserved for defects that must reach the
operation author: a step bound to something that cannot be invoked, a
params transform configured without params being passed, and similar
programmer errors.

Manifesto:
    - **Failures are values:** Collaborator failures travel as ``Failure``
    - **Defects are exceptions:** Misconfiguration raises and is never wrapped
    - **Rich context:** Errors carry metadata for logging
    - **Error chaining:** Preserve original exceptions as ``cause``

Architecture:
    ::

        RailopError (base)
          ├── ConfigError         ── invalid definition / settings
          └── OperationError      ── raised by the operation engine

Tags:
    error-handling, exception-hierarchy, error-context, railop

Doc-Types:
    - API Reference
    - Error Handling Guide

Usage:
    from railop.core.errors import ConfigError

    raise ConfigError("Step 'lookup' is not invokable").with_context(
        operation="Transfer", step="lookup"
    )
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Error categories for classification in logs.

    Attributes:
        CONFIG: Invalid operation definition or settings
        OPERATION: Engine-level errors while dispatching a call
        INTERNAL: Bugs, unexpected state
        UNKNOWN: Uncategorized errors
    """

    CONFIG = "CONFIG"             # Invalid definition, missing params
    OPERATION = "OPERATION"       # Dispatch / unwrap errors
    INTERNAL = "INTERNAL"         # Bugs, unexpected state
    UNKNOWN = "UNKNOWN"           # Uncategorized errors


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Typed fields cover what the engine knows about (operation and step
    names); everything else goes to ``metadata``.
    """

    operation: str | None = None
    step: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for key in ("operation", "step"):
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class RailopError(Exception):
    """
    Base exception for all railop errors.

    Subclasses set ``default_category`` to classify themselves.

    Examples:
        >>> error = RailopError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = RailopError("Bad step").with_context(step="lookup")
        >>> error.context.step
        'lookup'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> RailopError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ConfigError("Invalid step").with_context(
                operation="Transfer", step="debit"
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
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
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
# CONFIGURATION ERRORS (Never wrapped into a Result)
# =============================================================================


class ConfigError(RailopError):
    """Invalid definition or settings."""

    default_category = ErrorCategory.CONFIG


# =============================================================================
# ENGINE ERRORS
# =============================================================================


class OperationError(RailopError):
    """Error raised by the operation engine itself."""

    default_category = ErrorCategory.OPERATION


def categorize_error(error: Exception) -> ErrorCategory:
    """
    Categorize an exception.

    For RailopError, returns its category. Anything else is UNKNOWN.
    """
    if isinstance(error, RailopError):
        return error.category
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "RailopError",
    "ConfigError",
    "OperationError",
    "categorize_error",
]
